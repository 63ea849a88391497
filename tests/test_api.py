"""
Tests for the package-level API a consuming application uses.
"""

import jsonnlp


def test_construct_empty_corpus():
    corpus = jsonnlp.Corpus()
    assert corpus.documents == []


def test_decode_blob_and_encode(minimal_payload):
    corpus = jsonnlp.decode(minimal_payload.encode("utf-8"))
    assert corpus.documents[0].tokens[0].text == "John"
    assert jsonnlp.decode(jsonnlp.encode(corpus)) == corpus


def test_load_file_and_validate(sample_file):
    corpus = jsonnlp.load(sample_file)
    assert jsonnlp.validate_corpus(corpus) == []
    assert jsonnlp.ensure_valid(corpus) is corpus


def test_build_and_serialize_document():
    """A producer fills records and serializes them."""
    doc = jsonnlp.Document(
        meta=jsonnlp.Meta(conforms_to=jsonnlp.__schema_version__, source="my-tagger 1.0"),
        id=1,
        tokens=[jsonnlp.Token(id=1, sentence_id=1, text="Hi", upos="INTJ")],
        sentences=[jsonnlp.Sentence(id=1, tokens=[1])],
    )
    corpus = jsonnlp.Corpus(meta=jsonnlp.Meta(conforms_to="1.0"), documents=[doc])
    text = jsonnlp.to_json(corpus)
    assert '"upos":"INTJ"' in text
    assert '"DC.source":"my-tagger 1.0"' in text


def test_error_hierarchy():
    for error in (
        jsonnlp.ReadError,
        jsonnlp.ParseError,
        jsonnlp.EncodeError,
        jsonnlp.ConfigError,
        jsonnlp.InvalidCorpusError,
    ):
        assert issubclass(error, jsonnlp.JSONNLPError)
    assert issubclass(jsonnlp.ReadError, OSError)
    assert issubclass(jsonnlp.ParseError, ValueError)
