"""
Errors — Typed failures raised by the codec, config and validation layers.

- JSONNLPError       : common base, catch-all for callers
- ReadError          : the source file could not be read
- ParseError         : input is not valid JSON-NLP (syntax, encoding, types)
- EncodeError        : a value cannot be represented in JSON
- ConfigError        : a settings file is missing or invalid
- InvalidCorpusError : a corpus violates format invariants
"""

from __future__ import annotations

import os
from typing import Optional, Union


class JSONNLPError(Exception):
    """Base class for every error raised by jsonnlp."""


class ReadError(JSONNLPError, OSError):
    """The source file could not be opened or read."""

    def __init__(self, message: str, path: Union[str, os.PathLike, None] = None):
        super().__init__(message)
        self.path = path


class ParseError(JSONNLPError, ValueError):
    """
    Input could not be decoded into a Corpus.

    ``line``/``column``/``offset`` point into the text for syntax and
    encoding failures. ``location`` is the dotted wire path
    (``documents.0.tokenList.3.id``) for schema mismatches.
    """

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        offset: Optional[int] = None,
        location: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset
        self.location = location

    def __str__(self) -> str:
        if self.location:
            return f"{self.message} (at {self.location})"
        if self.line is not None:
            return f"{self.message} (line {self.line}, column {self.column}, offset {self.offset})"
        if self.offset is not None:
            return f"{self.message} (offset {self.offset})"
        return self.message


class EncodeError(JSONNLPError, ValueError):
    """A Corpus holds a value that has no JSON representation."""


class ConfigError(JSONNLPError, ValueError):
    """A settings file is missing, unreadable or invalid."""


class InvalidCorpusError(JSONNLPError, ValueError):
    """A Corpus failed one or more validators."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        summary = f"{len(self.problems)} validation problem(s)"
        if self.problems:
            summary += f": {self.problems[0]}"
        super().__init__(summary)
