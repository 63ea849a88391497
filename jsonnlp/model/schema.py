"""
JSON-NLP Schema — Pydantic models for the document graph.

Records are flat and refer to each other by integer id, never by
nesting. Every field has a zero default so payloads written against
an older revision decode cleanly; new revisions only add fields.
Aliases are the wire names and are fixed.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from jsonnlp.model.base import Record


# ============================================================================
# Provenance
# ============================================================================

class Meta(Record):
    """
    Dublin Core provenance block.

    Used both for the corpus as a whole and for each document, so a
    document can record a different producer or language than its corpus.
    """

    mandatory: ClassVar[frozenset[str]] = frozenset({"conforms_to"})

    conforms_to: str = Field("", alias="DC.conformsTo", description="JSON-NLP version")
    created: str = Field("", alias="DC.created", description="Creation timestamp: '2020-05-28T02:15:19'")
    date: str = Field("", alias="DC.date", description="Modification timestamp")
    source: str = Field("", alias="DC.source", description="Producing tool: 'NLP1 2.2.3'")
    language: str = Field("", alias="DC.language", description="Language code: 'en'")
    author: str = Field("", alias="DC.author")
    creator: str = Field("", alias="DC.creator")
    publisher: str = Field("", alias="DC.publisher")
    title: str = Field("", alias="DC.title")
    description: str = Field("", alias="DC.description")
    identifier: str = Field("", alias="DC.identifier")


# ============================================================================
# Tokens
# ============================================================================

class Features(Record):
    """Morphosyntactic flags of a token."""

    overt: StrictBool = Field(False, alias="overt")
    stop: StrictBool = Field(False, alias="stop", description="Stop word")
    alpha: StrictBool = Field(False, alias="alpha", description="Alphabetic characters only")
    number: StrictInt = Field(
        0, alias="number", description="1 = singular, 2 = dual, 3 or more = plural"
    )
    gender: str = Field("", alias="gender", description="male, female, neuter")
    person: StrictInt = Field(0, alias="person", description="1, 2, 3")
    tense: str = Field("", alias="tense", description="past, present, future")
    perfect: StrictBool = Field(False, alias="perfect")
    continuous: StrictBool = Field(False, alias="continuous")
    case: str = Field("", alias="case", description="nom, acc, dat, gen, voc, loc, inst, ...")
    human: StrictBool = Field(False, alias="human")
    animate: StrictBool = Field(False, alias="animate")
    negated: StrictBool = Field(False, alias="negated", description="Word in scope of negation")
    countable: StrictBool = Field(False, alias="countable")
    factive: StrictBool = Field(False, alias="factive", description="Factive verb")
    counterfactive: StrictBool = Field(False, alias="counterfactive")
    irregular: StrictBool = Field(False, alias="irregular", description="Irregular verb or noun form")
    phrasal_verb: StrictBool = Field(False, alias="phrasalVerb")
    mood: str = Field("", alias="mood", description="indicative, imperative, subjunctive")
    foreign: StrictBool = Field(False, alias="foreign")
    space_after: StrictBool = Field(False, alias="spaceAfter")


class Token(Record):
    """A word or punctuation mark, the unit every other record points at."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "sentence_id", "text"})

    id: StrictInt = Field(0, alias="id", description="Token id, unique within the document")
    sentence_id: StrictInt = Field(0, alias="sentence_id", description="Owning sentence")
    text: str = Field("", alias="text", description="Surface form: 'John'")
    lemma: str = Field("", alias="lemma")

    # Part of speech
    xpos: str = Field("", alias="xpos", description="Language-specific tag: 'NNP'")
    xpos_prob: StrictFloat = Field(0.0, alias="xpos_prob")
    upos: str = Field("", alias="upos", description="Universal tag: 'PROPN'")
    upos_prob: StrictFloat = Field(0.0, alias="upos_prob")

    entity_iob: str = Field("", alias="entity_iob", description="'B', 'I' or 'O'")
    char_offset_begin: StrictInt = Field(0, alias="characterOffsetBegin")
    char_offset_end: StrictInt = Field(0, alias="characterOffsetEnd")

    # Lexical semantics
    prop_id: str = Field("", alias="propID", description="PropBank roleset id")
    prop_id_probability: str = Field(
        "", alias="propIDProbability", description="PropBank id probability, as written by producers"
    )
    wordnet_id: str = Field("", alias="wordNetID", description="WordNet synset id")
    wordnet_id_prob: StrictFloat = Field(0.0, alias="wordNetIDProb")
    verbnet_id: str = Field("", alias="verbNetID", description="VerbNet class id")
    verbnet_id_prob: StrictFloat = Field(0.0, alias="verbNetIDProb")

    lang: str = Field("", alias="lang", description="Language code: 'en'")
    features: Features = Field(default_factory=Features, alias="features")
    shape: str = Field("", alias="shape", description="Orthographic shape: 'Xxxx'")
    entity: str = Field("", alias="entity", description="Named entity type: 'PERSON'")


# ============================================================================
# Text structure
# ============================================================================

class Sentence(Record):
    """A sentence, as a token span plus the clauses it contains."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictInt = Field(0, alias="id")
    token_from: StrictInt = Field(0, alias="tokenFrom", description="First token id")
    token_to: StrictInt = Field(0, alias="tokenTo", description="Last token id")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    clauses: list[StrictInt] = Field(default_factory=list, alias="clauses")
    type: str = Field("", alias="type", description="declarative, interrogative, ...")
    sentiment: str = Field("", alias="sentiment")
    sentiment_prob: StrictFloat = Field(0.0, alias="sentimentProb")


class Clause(Record):
    """A clause; clauses may govern other clauses of the same sentence."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "sentence_id"})

    id: StrictInt = Field(0, alias="id")
    sentence_id: StrictInt = Field(0, alias="sentenceId", description="Owning sentence")
    token_from: StrictInt = Field(0, alias="tokenFrom")
    token_to: StrictInt = Field(0, alias="tokenTo")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    main: StrictBool = Field(False, alias="main", description="Main (matrix) clause")
    governor: StrictInt = Field(0, alias="gov", description="Governing clause id")
    head: StrictInt = Field(0, alias="head", description="Head token id")
    negated: StrictBool = Field(False, alias="neg")
    tense: str = Field("", alias="tense")
    mood: str = Field("", alias="mood")
    aspect: str = Field("", alias="aspect")
    voice: str = Field("", alias="voice")
    sentiment: str = Field("", alias="sentiment")
    sentiment_prob: StrictFloat = Field(0.0, alias="sentimentProb")


class Paragraph(Record):
    """A paragraph, as a token span plus its sentences."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictInt = Field(0, alias="id")
    token_from: StrictInt = Field(0, alias="tokenFrom")
    token_to: StrictInt = Field(0, alias="tokenTo")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    sentences: list[StrictInt] = Field(default_factory=list, alias="sentences")


# ============================================================================
# Syntax
# ============================================================================

class Dependency(Record):
    """A labeled governor -> dependent edge between two tokens."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"label", "governor", "dependent"})

    label: str = Field("", alias="lab", description="Relation label: 'nsubj'")
    governor: StrictInt = Field(0, alias="gov", description="Governor token id")
    dependent: StrictInt = Field(0, alias="dep", description="Dependent token id")
    prob: StrictFloat = Field(0.0, alias="prob")


class DependencyTree(Record):
    """All dependency edges of one sentence, in one annotation style."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"sentence_id"})

    sentence_id: StrictInt = Field(0, alias="sentenceID")
    style: str = Field("", alias="style", description="universal, stanford, ...")
    dependencies: list[Dependency] = Field(default_factory=list, alias="dependencies")
    prob: StrictFloat = Field(0.0, alias="prob")


class Scope(Record):
    """Token scope of a constituent: governors, dependents and terminals."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id"})

    id: StrictInt = Field(0, alias="id")
    governors: list[StrictInt] = Field(default_factory=list, alias="gov")
    dependents: list[StrictInt] = Field(default_factory=list, alias="dep")
    terminals: list[StrictInt] = Field(default_factory=list, alias="terminals")


class ConstituentParse(Record):
    """A phrase-structure tree of one sentence as a labeled bracketing."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"sentence_id", "labeled_bracketing"})

    sentence_id: StrictInt = Field(0, alias="sentenceId")
    type: str = Field("", alias="type", description="Bracketing convention: 'penn'")
    labeled_bracketing: str = Field(
        "", alias="labeledBracketing", description="'(S (NP (NNP John)) (VP (VBD left)))'"
    )
    prob: StrictFloat = Field(0.0, alias="prob")
    scopes: list[Scope] = Field(default_factory=list, alias="scopes")


# ============================================================================
# Coreference & expressions
# ============================================================================

class Representative(Record):
    """The canonical mention of a coreference chain."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"tokens"})

    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    head: StrictInt = Field(0, alias="head")


class Referent(Record):
    """A mention that refers back to the representative."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"tokens"})

    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    head: StrictInt = Field(0, alias="head")
    prob: StrictFloat = Field(0.0, alias="prob")


class Coreference(Record):
    """A coreference chain: one representative mention and its referents."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "representative", "referents"})

    id: StrictInt = Field(0, alias="id")
    representative: Representative = Field(default_factory=Representative, alias="representative")
    referents: list[Referent] = Field(default_factory=list, alias="referents")


class Expression(Record):
    """A multi-token expression such as a noun phrase."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "tokens"})

    id: StrictInt = Field(0, alias="id")
    type: str = Field("", alias="type", description="Semantic or syntactic type: 'NP'")
    head: StrictInt = Field(0, alias="head")
    dependency: str = Field("", alias="dependency", description="Dependency label of the head: 'nsubj'")
    token_from: StrictInt = Field(0, alias="tokenFrom")
    token_to: StrictInt = Field(0, alias="tokenTo")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    prob: StrictFloat = Field(0.0, alias="prob")


# ============================================================================
# Information extraction
# ============================================================================

class Attribute(Record):
    """A label/value pair attached to an entity or relation."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"label", "value"})

    label: str = Field("", alias="lab")
    value: str = Field("", alias="value")


class Entity(Record):
    """An extracted entity."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "label", "type"})

    id: StrictInt = Field(0, alias="id")
    label: str = Field("", alias="label", description="Canonical name: 'John Smith'")
    type: str = Field("", alias="type", description="Entity type: 'PERSON'")
    url: str = Field("", alias="url", description="Knowledge-base link")
    head: StrictInt = Field(0, alias="head")
    token_from: StrictInt = Field(0, alias="tokenFrom")
    token_to: StrictInt = Field(0, alias="tokenTo")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    triple_id: StrictInt = Field(0, alias="tripleID", description="Triple this entity was extracted from")
    sentiment: str = Field("", alias="sentiment")
    sentiment_prob: StrictFloat = Field(0.0, alias="sentimentProb")
    count: StrictInt = Field(0, alias="count", description="Occurrences in the document")
    attributes: list[Attribute] = Field(default_factory=list, alias="attributes")


class Relation(Record):
    """An extracted relation (the predicate of a triple)."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"id", "label", "type"})

    id: StrictInt = Field(0, alias="id")
    label: str = Field("", alias="label", description="Relation name: 'works_for'")
    type: str = Field("", alias="type")
    url: str = Field("", alias="url")
    head: StrictInt = Field(0, alias="head")
    token_from: StrictInt = Field(0, alias="tokenFrom")
    token_to: StrictInt = Field(0, alias="tokenTo")
    tokens: list[StrictInt] = Field(default_factory=list, alias="tokens")
    sentiment: str = Field("", alias="sentiment")
    sentiment_prob: StrictFloat = Field(0.0, alias="sentimentProb")
    count: StrictInt = Field(0, alias="count")
    attributes: list[Attribute] = Field(default_factory=list, alias="attributes")


class Triple(Record):
    """A subject-relation-object fact linking two entities through a relation."""

    mandatory: ClassVar[frozenset[str]] = frozenset(
        {"id", "from_entity", "to_entity", "relation_id"}
    )

    id: StrictInt = Field(0, alias="id")
    from_entity: StrictInt = Field(0, alias="fromEntity", description="Subject entity id")
    to_entity: StrictInt = Field(0, alias="toEntity", description="Object entity id")
    relation_id: StrictInt = Field(0, alias="rel", description="Relation id")
    clauses: list[StrictInt] = Field(default_factory=list, alias="clauses")
    sentences: list[StrictInt] = Field(default_factory=list, alias="sentences")
    directional: StrictBool = Field(False, alias="directional")
    event: StrictInt = Field(0, alias="event", description="Event id grouping triples")
    temporal_sequence: StrictInt = Field(0, alias="tempSeq", description="Order within the event")
    prob: StrictFloat = Field(0.0, alias="prob")
    syntactic: StrictBool = Field(False, alias="syntactic", description="Stated in the syntax")
    implied: StrictBool = Field(False, alias="implied")
    presupposed: StrictBool = Field(False, alias="presupposed")
    count: StrictInt = Field(0, alias="count")


# ============================================================================
# Containers
# ============================================================================

class Document(Record):
    """One analyzed text with its own annotation collections."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"meta", "id"})

    meta: Meta = Field(default_factory=Meta, alias="meta")
    id: StrictInt = Field(0, alias="id")

    tokens: list[Token] = Field(default_factory=list, alias="tokenList")
    clauses: list[Clause] = Field(default_factory=list, alias="clauses")
    sentences: list[Sentence] = Field(default_factory=list, alias="sentences")
    paragraphs: list[Paragraph] = Field(default_factory=list, alias="paragraphs")
    dependency_trees: list[DependencyTree] = Field(default_factory=list, alias="dependencyTrees")
    coreferences: list[Coreference] = Field(default_factory=list, alias="coreferences")
    constituents: list[ConstituentParse] = Field(default_factory=list, alias="constituents")
    expressions: list[Expression] = Field(default_factory=list, alias="expressions")
    entities: list[Entity] = Field(default_factory=list, alias="entities")
    relations: list[Relation] = Field(default_factory=list, alias="relations")
    triples: list[Triple] = Field(default_factory=list, alias="triples")


class Corpus(Record):
    """The root value: corpus provenance plus every document."""

    mandatory: ClassVar[frozenset[str]] = frozenset({"meta", "documents"})

    meta: Meta = Field(default_factory=Meta, alias="meta")
    documents: list[Document] = Field(default_factory=list, alias="documents")
