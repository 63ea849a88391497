"""
Reference Validator — Every cross-reference id must resolve in its document.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from jsonnlp.core.contracts import Validator
from jsonnlp.model.schema import Corpus, Document


class ReferenceValidator(Validator):
    """
    Checks that ids used as references exist in the same Document.

    Optional references (heads, governing clauses, span bounds, triple
    links) hold 0 when absent, so 0 is only checked where the field is
    part of the mandatory core.
    """

    def __init__(self, root_governor: int = 0):
        self.root_governor = root_governor

    @property
    def name(self) -> str:
        return "references"

    def validate(self, corpus: Corpus) -> list[str]:
        errors: list[str] = []
        for doc in corpus.documents:
            errors.extend(self._validate_document(doc))
        return errors

    def _validate_document(self, doc: Document) -> list[str]:
        errors: list[str] = []
        prefix = f"Document {doc.id}"

        token_ids = {t.id for t in doc.tokens}
        sentence_ids = {s.id for s in doc.sentences}
        clause_ids = {c.id for c in doc.clauses}
        entity_ids = {e.id for e in doc.entities}
        relation_ids = {r.id for r in doc.relations}
        triple_ids = {t.id for t in doc.triples}

        # Duplicate ids make references ambiguous
        for kind, ids in (
            ("sentence", [s.id for s in doc.sentences]),
            ("clause", [c.id for c in doc.clauses]),
            ("paragraph", [p.id for p in doc.paragraphs]),
            ("coreference", [c.id for c in doc.coreferences]),
            ("expression", [e.id for e in doc.expressions]),
            ("entity", [e.id for e in doc.entities]),
            ("relation", [r.id for r in doc.relations]),
            ("triple", [t.id for t in doc.triples]),
        ):
            for dup, count in Counter(ids).items():
                if count > 1:
                    errors.append(f"{prefix}: {kind} id {dup} is used {count} times")

        def tokens(where: str, ids: Iterable[int]) -> None:
            for tid in ids:
                if tid not in token_ids:
                    errors.append(f"{prefix}: {where} references unknown token {tid}")

        def optional_token(where: str, tid: int) -> None:
            if tid:
                tokens(where, [tid])

        # Tokens -> sentences (only once the document is segmented)
        if doc.sentences:
            for token in doc.tokens:
                if token.sentence_id not in sentence_ids:
                    errors.append(
                        f"{prefix}: token {token.id} references unknown sentence {token.sentence_id}"
                    )

        for sentence in doc.sentences:
            where = f"sentence {sentence.id}"
            tokens(where, sentence.tokens)
            optional_token(where, sentence.token_from)
            optional_token(where, sentence.token_to)
            for cid in sentence.clauses:
                if cid not in clause_ids:
                    errors.append(f"{prefix}: {where} references unknown clause {cid}")

        for clause in doc.clauses:
            where = f"clause {clause.id}"
            if doc.sentences and clause.sentence_id not in sentence_ids:
                errors.append(f"{prefix}: {where} references unknown sentence {clause.sentence_id}")
            tokens(where, clause.tokens)
            optional_token(where, clause.token_from)
            optional_token(where, clause.token_to)
            optional_token(where, clause.head)
            if clause.governor and clause.governor not in clause_ids:
                errors.append(f"{prefix}: {where} references unknown governing clause {clause.governor}")
            if clause.governor and clause.governor == clause.id:
                errors.append(f"{prefix}: {where} governs itself")

        for paragraph in doc.paragraphs:
            where = f"paragraph {paragraph.id}"
            tokens(where, paragraph.tokens)
            optional_token(where, paragraph.token_from)
            optional_token(where, paragraph.token_to)
            for sid in paragraph.sentences:
                if sid not in sentence_ids:
                    errors.append(f"{prefix}: {where} references unknown sentence {sid}")

        for tree in doc.dependency_trees:
            where = f"dependency tree of sentence {tree.sentence_id}"
            if doc.sentences and tree.sentence_id not in sentence_ids:
                errors.append(f"{prefix}: {where} references unknown sentence")
            for dep in tree.dependencies:
                edge = f"{where}, edge '{dep.label}'"
                if dep.governor not in token_ids and dep.governor != self.root_governor:
                    errors.append(f"{prefix}: {edge} references unknown governor token {dep.governor}")
                tokens(edge, [dep.dependent])

        for parse in doc.constituents:
            where = f"constituent parse of sentence {parse.sentence_id}"
            if doc.sentences and parse.sentence_id not in sentence_ids:
                errors.append(f"{prefix}: {where} references unknown sentence")
            for scope in parse.scopes:
                scope_where = f"{where}, scope {scope.id}"
                tokens(scope_where, scope.governors)
                tokens(scope_where, scope.dependents)
                tokens(scope_where, scope.terminals)

        for coref in doc.coreferences:
            where = f"coreference {coref.id}"
            tokens(f"{where} representative", coref.representative.tokens)
            optional_token(f"{where} representative", coref.representative.head)
            for i, referent in enumerate(coref.referents):
                tokens(f"{where} referent {i}", referent.tokens)
                optional_token(f"{where} referent {i}", referent.head)

        for expression in doc.expressions:
            where = f"expression {expression.id}"
            tokens(where, expression.tokens)
            optional_token(where, expression.token_from)
            optional_token(where, expression.token_to)
            optional_token(where, expression.head)

        for entity in doc.entities:
            where = f"entity {entity.id}"
            tokens(where, entity.tokens)
            optional_token(where, entity.token_from)
            optional_token(where, entity.token_to)
            optional_token(where, entity.head)
            if entity.triple_id and entity.triple_id not in triple_ids:
                errors.append(f"{prefix}: {where} references unknown triple {entity.triple_id}")

        for relation in doc.relations:
            where = f"relation {relation.id}"
            tokens(where, relation.tokens)
            optional_token(where, relation.token_from)
            optional_token(where, relation.token_to)
            optional_token(where, relation.head)

        for triple in doc.triples:
            where = f"triple {triple.id}"
            if triple.from_entity not in entity_ids:
                errors.append(f"{prefix}: {where} references unknown entity {triple.from_entity}")
            if triple.to_entity not in entity_ids:
                errors.append(f"{prefix}: {where} references unknown entity {triple.to_entity}")
            if triple.relation_id not in relation_ids:
                errors.append(f"{prefix}: {where} references unknown relation {triple.relation_id}")
            for cid in triple.clauses:
                if cid not in clause_ids:
                    errors.append(f"{prefix}: {where} references unknown clause {cid}")
            for sid in triple.sentences:
                if sid not in sentence_ids:
                    errors.append(f"{prefix}: {where} references unknown sentence {sid}")

        return errors
