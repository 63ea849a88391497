"""
Validation Runner — Run the enabled validators over a corpus.
"""

from __future__ import annotations

from typing import Optional, Sequence

from jsonnlp.config.loader import get_settings
from jsonnlp.config.settings import ValidationSettings
from jsonnlp.core.contracts import Validator
from jsonnlp.core.logging import LogChannel, get_logger
from jsonnlp.errors import InvalidCorpusError
from jsonnlp.model.schema import Corpus
from jsonnlp.validate.confidence import ConfidenceValidator
from jsonnlp.validate.conformance import ConformanceValidator
from jsonnlp.validate.ordering import TokenOrderValidator
from jsonnlp.validate.references import ReferenceValidator

log = get_logger(LogChannel.VALIDATE)


def build_validators(settings: ValidationSettings) -> list[Validator]:
    """Instantiate the validators enabled in ``settings``."""
    validators: list[Validator] = []
    if settings.references:
        validators.append(ReferenceValidator(root_governor=settings.root_governor))
    if settings.token_order:
        validators.append(TokenOrderValidator())
    if settings.confidence:
        validators.append(ConfidenceValidator())
    if settings.conformance:
        validators.append(ConformanceValidator())
    return validators


def validate_corpus(
    corpus: Corpus,
    settings: Optional[ValidationSettings] = None,
    validators: Optional[Sequence[Validator]] = None,
) -> list[str]:
    """
    Check a corpus against the format invariants.

    Args:
        corpus: Decoded or hand-built corpus
        settings: Which checks to run (defaults to the packaged settings)
        validators: Explicit validators, overriding ``settings``

    Returns:
        Problems found, prefixed by validator name (empty if valid)
    """
    if validators is None:
        validators = build_validators(settings or get_settings().validation)

    problems: list[str] = []
    for validator in validators:
        found = validator.validate(corpus)
        log.verbose("validator_ran", validator=validator.name, problems=len(found))
        for message in found:
            log.debug("validation_problem", validator=validator.name, message=message)
        problems.extend(f"[{validator.name}] {message}" for message in found)

    log.info(
        "corpus_validated",
        documents=len(corpus.documents),
        validators=[v.name for v in validators],
        problems=len(problems),
    )
    return problems


def ensure_valid(
    corpus: Corpus,
    settings: Optional[ValidationSettings] = None,
) -> Corpus:
    """
    Return ``corpus`` unchanged if it passes validation.

    Raises:
        InvalidCorpusError: If any validator reports a problem
    """
    problems = validate_corpus(corpus, settings)
    if problems:
        log.warning("corpus_invalid", problems=len(problems), first=problems[0])
        raise InvalidCorpusError(problems)
    return corpus
