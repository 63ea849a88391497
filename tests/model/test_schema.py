"""
Unit tests for the JSON-NLP schema models.

These tests cover construction, zero-value defaults, wire aliases,
null handling and type strictness of the records.
"""

import pytest
from pydantic import ValidationError

from jsonnlp.model import (
    Clause,
    ConstituentParse,
    Coreference,
    Corpus,
    Dependency,
    DependencyStyle,
    Document,
    Entity,
    Features,
    IOBTag,
    Meta,
    Mood,
    Record,
    SentenceType,
    Sentence,
    Tense,
    Token,
    TreeType,
    Triple,
    Voice,
)
from jsonnlp.model.base import is_zero


class TestIsZero:
    """Tests for the zero-value predicate."""

    @pytest.mark.parametrize("value", ["", 0, 0.0, False, [], {}, None])
    def test_zero_values(self, value):
        assert is_zero(value)

    @pytest.mark.parametrize("value", ["x", 1, 0.5, True, [0], {"a": 1}, -1])
    def test_non_zero_values(self, value):
        assert not is_zero(value)


class TestDefaults:
    """Every field defaults to its type's zero value."""

    def test_empty_corpus(self):
        """An empty Corpus has empty meta and no documents."""
        corpus = Corpus()
        assert corpus.documents == []
        assert corpus.meta == Meta()
        assert corpus.meta.conforms_to == ""

    def test_token_defaults(self):
        token = Token()
        assert token.id == 0
        assert token.text == ""
        assert token.xpos_prob == 0.0
        assert token.features == Features()
        assert token.features.space_after is False

    def test_document_collections_default_empty(self):
        doc = Document(id=3)
        for name in (
            "tokens", "clauses", "sentences", "paragraphs", "dependency_trees",
            "coreferences", "constituents", "expressions", "entities",
            "relations", "triples",
        ):
            assert getattr(doc, name) == []

    def test_default_factories_are_not_shared(self):
        """Collections of two records are independent lists."""
        a, b = Sentence(), Sentence()
        a.tokens.append(1)
        assert b.tokens == []


class TestAliases:
    """Records accept both attribute names and wire names."""

    def test_construct_by_attribute_name(self):
        clause = Clause(id=2, sentence_id=1, governor=1, negated=True)
        assert clause.governor == 1
        assert clause.negated is True

    def test_construct_by_wire_name(self):
        clause = Clause.model_validate({"id": 2, "sentenceId": 1, "gov": 1, "neg": True})
        assert clause.sentence_id == 1
        assert clause.governor == 1
        assert clause.negated is True

    def test_meta_dublin_core_aliases(self):
        meta = Meta.model_validate({"DC.conformsTo": "1.0", "DC.language": "de"})
        assert meta.conforms_to == "1.0"
        assert meta.language == "de"

    def test_dependency_abbreviated_keys(self):
        dep = Dependency.model_validate({"lab": "nsubj", "gov": 3, "dep": 2, "prob": 0.5})
        assert (dep.label, dep.governor, dep.dependent, dep.prob) == ("nsubj", 3, 2, 0.5)

    def test_triple_relation_key(self):
        triple = Triple.model_validate({"id": 1, "fromEntity": 1, "toEntity": 2, "rel": 4})
        assert triple.relation_id == 4


class TestFieldPresence:
    """Unknown keys are ignored and null means absent."""

    def test_unknown_keys_ignored(self):
        token = Token.model_validate({"id": 1, "text": "a", "futureField": {"x": 1}})
        assert token.text == "a"
        assert "futureField" not in token.model_dump(by_alias=True)

    def test_null_becomes_zero_value(self):
        token = Token.model_validate(
            {"id": 1, "text": None, "xpos_prob": None, "features": None}
        )
        assert token.text == ""
        assert token.xpos_prob == 0.0
        assert token.features == Features()

    def test_null_list_becomes_empty_list(self):
        sentence = Sentence.model_validate({"id": 1, "tokens": None})
        assert sentence.tokens == []

    def test_mandatory_fields_declared(self):
        assert Token.mandatory == {"id", "sentence_id", "text"}
        assert Entity.mandatory == {"id", "label", "type"}
        assert Record.mandatory == frozenset()


class TestStrictTypes:
    """Numbers and booleans are not coerced from other JSON types."""

    def test_string_id_rejected(self):
        with pytest.raises(ValidationError):
            Token.model_validate({"id": "1", "text": "a"})

    def test_fractional_id_rejected(self):
        with pytest.raises(ValidationError):
            Token.model_validate({"id": 1.5, "text": "a"})

    def test_integer_flag_rejected(self):
        with pytest.raises(ValidationError):
            Clause.model_validate({"id": 1, "main": 1})

    def test_string_probability_rejected(self):
        with pytest.raises(ValidationError):
            Token.model_validate({"id": 1, "xpos_prob": "0.5"})

    def test_integer_probability_accepted(self):
        token = Token.model_validate({"id": 1, "xpos_prob": 1})
        assert token.xpos_prob == 1.0

    def test_number_for_string_rejected(self):
        with pytest.raises(ValidationError):
            Token.model_validate({"id": 1, "text": 5})

    def test_assignment_is_validated(self):
        token = Token(id=1, text="a")
        with pytest.raises(ValidationError):
            token.id = "two"

    def test_assignment_of_valid_value(self):
        token = Token(id=1, text="a")
        token.upos = "NOUN"
        token.upos_prob = 0.4
        assert token.upos_prob == 0.4


class TestVocabulary:
    """Vocabulary enums fit the open string fields."""

    def test_sentence_type_value(self):
        sentence = Sentence(id=1, type=SentenceType.INTERROGATIVE)
        assert sentence.type == "interrogative"

    def test_unknown_vocabulary_accepted(self):
        """Producers may use tag sets not listed in the enums."""
        sentence = Sentence(id=1, type="rhetorical")
        assert sentence.type == "rhetorical"

    def test_dependency_style_value(self):
        assert DependencyStyle.UNIVERSAL == "universal"

    def test_iob_tag_on_token(self):
        token = Token(id=1, sentence_id=1, text="Apple", entity_iob=IOBTag.BEGIN)
        assert token.entity_iob == "B"
        assert [tag.value for tag in IOBTag] == ["B", "I", "O"]

    def test_tree_type_on_constituent(self):
        parse = ConstituentParse(sentence_id=1, type=TreeType.PENN, labeled_bracketing="(S (NP John))")
        assert parse.model_dump(by_alias=True)["type"] == "penn"

    def test_clause_vocabulary(self):
        clause = Clause(id=1, sentence_id=1, voice=Voice.PASSIVE, mood=Mood.INDICATIVE, tense=Tense.PAST)
        wire = clause.model_dump(by_alias=True)
        assert (wire["voice"], wire["mood"], wire["tense"]) == ("passive", "indicative", "past")

    def test_feature_vocabulary(self):
        features = Features(mood=Mood.SUBJUNCTIVE, tense=Tense.FUTURE)
        assert features.mood == "subjunctive"
        assert features.tense == "future"


class TestCoreference:
    """Coreference chains nest mention records."""

    def test_chain_from_wire(self):
        coref = Coreference.model_validate({
            "id": 1,
            "representative": {"tokens": [1, 2], "head": 2},
            "referents": [{"tokens": [7], "head": 7, "prob": 0.9}],
        })
        assert coref.representative.head == 2
        assert coref.referents[0].tokens == [7]
        assert coref.referents[0].prob == 0.9
