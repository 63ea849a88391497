"""
Confidence Validator — Probabilities lie in [0, 1].
"""

from __future__ import annotations

import math
from typing import Iterator

from jsonnlp.core.contracts import Validator
from jsonnlp.model.schema import Corpus, Document


def _probabilities(doc: Document) -> Iterator[tuple[str, str, float]]:
    """Yield (record, wire field, value) for every probability in a document."""
    for token in doc.tokens:
        where = f"token {token.id}"
        yield where, "xpos_prob", token.xpos_prob
        yield where, "upos_prob", token.upos_prob
        yield where, "wordNetIDProb", token.wordnet_id_prob
        yield where, "verbNetIDProb", token.verbnet_id_prob
    for sentence in doc.sentences:
        yield f"sentence {sentence.id}", "sentimentProb", sentence.sentiment_prob
    for clause in doc.clauses:
        yield f"clause {clause.id}", "sentimentProb", clause.sentiment_prob
    for tree in doc.dependency_trees:
        where = f"dependency tree of sentence {tree.sentence_id}"
        yield where, "prob", tree.prob
        for dep in tree.dependencies:
            yield f"{where}, edge {dep.governor}->{dep.dependent}", "prob", dep.prob
    for parse in doc.constituents:
        yield f"constituent parse of sentence {parse.sentence_id}", "prob", parse.prob
    for coref in doc.coreferences:
        for i, referent in enumerate(coref.referents):
            yield f"coreference {coref.id} referent {i}", "prob", referent.prob
    for expression in doc.expressions:
        yield f"expression {expression.id}", "prob", expression.prob
    for entity in doc.entities:
        yield f"entity {entity.id}", "sentimentProb", entity.sentiment_prob
    for relation in doc.relations:
        yield f"relation {relation.id}", "sentimentProb", relation.sentiment_prob
    for triple in doc.triples:
        yield f"triple {triple.id}", "prob", triple.prob


class ConfidenceValidator(Validator):
    """Validates that every confidence value lies in [0.0, 1.0]."""

    @property
    def name(self) -> str:
        return "confidence"

    def validate(self, corpus: Corpus) -> list[str]:
        errors: list[str] = []

        for doc in corpus.documents:
            prefix = f"Document {doc.id}"

            for where, field, value in _probabilities(doc):
                if math.isnan(value) or not 0.0 <= value <= 1.0:
                    errors.append(f"{prefix}: {where} has invalid {field} {value}")

            # propIDProbability is a string on the wire
            for token in doc.tokens:
                if not token.prop_id_probability:
                    continue
                try:
                    value = float(token.prop_id_probability)
                except ValueError:
                    errors.append(
                        f"{prefix}: token {token.id} has non-numeric propIDProbability "
                        f"{token.prop_id_probability!r}"
                    )
                    continue
                if math.isnan(value) or not 0.0 <= value <= 1.0:
                    errors.append(f"{prefix}: token {token.id} has invalid propIDProbability {value}")

        return errors
