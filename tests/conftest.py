import json
from pathlib import Path

import pytest

from jsonnlp.core.logging import configure_logging
from jsonnlp.model.schema import (
    Corpus,
    Dependency,
    DependencyTree,
    Document,
    Entity,
    Meta,
    Relation,
    Sentence,
    Token,
    Triple,
)

DATA_DIR = Path(__file__).parent / "data"
SAMPLE_FILE = DATA_DIR / "sample.json"

# Scenario payload: one document, one token, everything else absent
MINIMAL_PAYLOAD = (
    '{"meta":{"DC.conformsTo":"1.0"},"documents":[{"meta":{"DC.conformsTo":"1.0"},'
    '"id":1,"tokenList":[{"id":0,"sentence_id":0,"text":"John"}]}]}'
)


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    configure_logging(level="silent", force=True)


@pytest.fixture
def sample_file() -> Path:
    return SAMPLE_FILE


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_FILE.read_text(encoding="utf-8")


@pytest.fixture
def sample_data(sample_text) -> dict:
    return json.loads(sample_text)


@pytest.fixture
def minimal_payload() -> str:
    return MINIMAL_PAYLOAD


@pytest.fixture
def small_corpus() -> Corpus:
    """A consistent hand-built corpus: 'Mary met Bob.'"""
    doc = Document(
        meta=Meta(conforms_to="1.0", language="en"),
        id=7,
        tokens=[
            Token(id=1, sentence_id=1, text="Mary", char_offset_begin=0, char_offset_end=4),
            Token(id=2, sentence_id=1, text="met", lemma="meet", char_offset_begin=5, char_offset_end=8),
            Token(id=3, sentence_id=1, text="Bob", char_offset_begin=9, char_offset_end=12),
            Token(id=4, sentence_id=1, text=".", char_offset_begin=12, char_offset_end=13),
        ],
        sentences=[Sentence(id=1, token_from=1, token_to=4, tokens=[1, 2, 3, 4])],
        dependency_trees=[
            DependencyTree(
                sentence_id=1,
                style="universal",
                dependencies=[
                    Dependency(label="root", governor=0, dependent=2),
                    Dependency(label="nsubj", governor=2, dependent=1, prob=0.9),
                    Dependency(label="obj", governor=2, dependent=3),
                    Dependency(label="punct", governor=2, dependent=4),
                ],
            )
        ],
        entities=[
            Entity(id=1, label="Mary", type="PERSON", head=1, tokens=[1]),
            Entity(id=2, label="Bob", type="PERSON", head=3, tokens=[3]),
        ],
        relations=[Relation(id=1, label="met", type="encounter", head=2, tokens=[2])],
        triples=[Triple(id=1, from_entity=1, to_entity=2, relation_id=1, sentences=[1], prob=0.8)],
    )
    return Corpus(meta=Meta(conforms_to="1.0", source="unit-test"), documents=[doc])
