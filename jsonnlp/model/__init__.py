"""
Model — The JSON-NLP document graph.

Records are flat and cross-referenced by integer id.
JSON is a rendering of the model; the model is the contract.
"""

from jsonnlp.model.enums import (
    DependencyStyle,
    IOBTag,
    Mood,
    SentenceType,
    Tense,
    TreeType,
    Voice,
)
from jsonnlp.model.base import Record
from jsonnlp.model.schema import (
    Attribute,
    Clause,
    ConstituentParse,
    Coreference,
    Corpus,
    Dependency,
    DependencyTree,
    Document,
    Entity,
    Expression,
    Features,
    Meta,
    Paragraph,
    Referent,
    Relation,
    Representative,
    Scope,
    Sentence,
    Token,
    Triple,
)

__all__ = [
    # Vocabulary
    "SentenceType",
    "DependencyStyle",
    "TreeType",
    "IOBTag",
    "Voice",
    "Mood",
    "Tense",
    # Base
    "Record",
    # Provenance
    "Meta",
    # Tokens
    "Token",
    "Features",
    # Text structure
    "Sentence",
    "Clause",
    "Paragraph",
    # Syntax
    "Dependency",
    "DependencyTree",
    "ConstituentParse",
    "Scope",
    # Coreference & expressions
    "Coreference",
    "Representative",
    "Referent",
    "Expression",
    # Information extraction
    "Entity",
    "Relation",
    "Attribute",
    "Triple",
    # Containers
    "Document",
    "Corpus",
]
