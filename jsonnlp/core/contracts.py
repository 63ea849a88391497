"""
Contracts — Interfaces for components that inspect a decoded corpus.
"""

from abc import ABC, abstractmethod

from jsonnlp.model.schema import Corpus


class Validator(ABC):
    """Abstract base for validators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Validator name for diagnostics."""
        ...

    @abstractmethod
    def validate(self, corpus: Corpus) -> list[str]:
        """
        Validate the corpus.

        Returns:
            List of error messages (empty if valid)
        """
        ...
