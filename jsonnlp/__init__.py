"""
jsonnlp — JSON-NLP Document Model & Codec

A shared interchange format for NLP pipeline output: tokens, sentences,
clauses, parses, coreference, entities, relations and triples in one
indexed document graph, read from and written to JSON.
"""

__version__ = "0.1.0"
__schema_version__ = "1.0"

from jsonnlp.errors import (  # noqa: E402
    ConfigError,
    EncodeError,
    InvalidCorpusError,
    JSONNLPError,
    ParseError,
    ReadError,
)
from jsonnlp.model import (  # noqa: E402
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
from jsonnlp.model.serialization import decode, encode, from_json, load, save, to_json  # noqa: E402
from jsonnlp.validate.runner import ensure_valid, validate_corpus  # noqa: E402

__all__ = [
    # Errors
    "JSONNLPError",
    "ReadError",
    "ParseError",
    "EncodeError",
    "ConfigError",
    "InvalidCorpusError",
    # Models
    "Corpus",
    "Document",
    "Meta",
    "Token",
    "Features",
    "Sentence",
    "Clause",
    "Paragraph",
    "Dependency",
    "DependencyTree",
    "ConstituentParse",
    "Scope",
    "Coreference",
    "Representative",
    "Referent",
    "Expression",
    "Entity",
    "Relation",
    "Attribute",
    "Triple",
    # Codec
    "decode",
    "encode",
    "from_json",
    "to_json",
    "load",
    "save",
    # Validation
    "validate_corpus",
    "ensure_valid",
]
