"""
Conformance Validator — DC.conformsTo names a readable schema version.
"""

from jsonnlp.core.contracts import Validator
from jsonnlp.core.versioning import SCHEMA_VERSION, check_conformance
from jsonnlp.model.schema import Corpus


class ConformanceValidator(Validator):
    """
    Validates the declared schema versions.

    The corpus must declare a version. A document may leave its own
    ``DC.conformsTo`` empty to inherit the corpus version.
    """

    @property
    def name(self) -> str:
        return "conformance"

    def validate(self, corpus: Corpus) -> list[str]:
        errors: list[str] = []

        declared = corpus.meta.conforms_to
        if not declared:
            errors.append("Corpus does not declare DC.conformsTo")
        elif not check_conformance(declared):
            errors.append(
                f"Corpus conforms to {declared!r}, not readable by schema {SCHEMA_VERSION}"
            )

        for doc in corpus.documents:
            version = doc.meta.conforms_to
            if version and not check_conformance(version):
                errors.append(
                    f"Document {doc.id} conforms to {version!r}, not readable by schema {SCHEMA_VERSION}"
                )

        return errors
