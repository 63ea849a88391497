"""
JSON-NLP Serialization — decode and encode Corpus values.

The codec neither logs nor recovers. Every failure is raised to the
caller, and a partially decoded Corpus is never returned.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from jsonnlp.config.settings import CodecSettings
from jsonnlp.errors import EncodeError, ParseError, ReadError
from jsonnlp.model.schema import Corpus

Source = Union[bytes, bytearray, memoryview, str, os.PathLike]

ENCODING = "utf-8"


def decode(source: Source) -> Corpus:
    """
    Decode a JSON-NLP payload.

    Args:
        source: UTF-8 bytes, JSON text, or a path object naming a file

    Returns:
        A freshly built Corpus

    Raises:
        ReadError: If ``source`` is a path that cannot be read
        ParseError: If the payload is not valid JSON-NLP
    """
    if isinstance(source, os.PathLike):
        return load(source)

    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            text = bytes(source).decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"Input is not valid UTF-8: {exc.reason}", offset=exc.start
            ) from exc
    elif isinstance(source, str):
        text = source
    else:
        raise TypeError(f"Cannot decode from {type(source).__name__}")

    return from_json(text)


class _NonStandardConstant(Exception):
    pass


def _reject_constant(name: str) -> None:
    raise _NonStandardConstant(name)


def _constant_offset(text: str) -> int:
    """Offset of the first bare NaN/Infinity literal in otherwise valid JSON."""
    in_string = False
    escaped = False
    for pos, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "NI":
            # Outside strings only these literals contain N or I
            return pos - 1 if pos and text[pos - 1] == "-" else pos
    return 0


def from_json(text: str) -> Corpus:
    """Decode a Corpus from JSON text."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, offset=exc.pos
        ) from exc
    except _NonStandardConstant as exc:
        pos = _constant_offset(text)
        raise ParseError(
            f"Invalid JSON: non-standard constant {exc.args[0]}",
            line=text.count("\n", 0, pos) + 1,
            column=pos - text.rfind("\n", 0, pos),
            offset=pos,
        ) from exc

    try:
        return Corpus.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        message = first["msg"]
        if exc.error_count() > 1:
            message += f" (and {exc.error_count() - 1} more)"
        raise ParseError(message, location=location or None) from exc


def load(path: Union[str, os.PathLike]) -> Corpus:
    """
    Load a Corpus from a JSON-NLP file.

    The whole file is read before decoding starts.

    Raises:
        ReadError: If the file cannot be opened or read
        ParseError: If the contents are not valid JSON-NLP
    """
    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise ReadError(f"Cannot read {path}: {exc.strerror or exc}", path=path) from exc
    return decode(payload)


def to_json(corpus: Corpus, settings: Optional[CodecSettings] = None) -> str:
    """
    Serialize a Corpus to JSON text.

    Zero-valued optional fields are omitted (see Record).

    Raises:
        EncodeError: If the Corpus holds NaN/Infinity or a value of the wrong type
    """
    settings = settings or CodecSettings()
    try:
        data = corpus.model_dump(by_alias=True, warnings="error")
    except PydanticSerializationError as exc:
        raise EncodeError(f"Cannot serialize corpus: {exc}") from exc

    try:
        return json.dumps(
            data,
            allow_nan=False,
            ensure_ascii=settings.ensure_ascii,
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            separators=None if settings.indent is not None else (",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot represent value in JSON: {exc}") from exc


def encode(corpus: Corpus, settings: Optional[CodecSettings] = None) -> bytes:
    """Serialize a Corpus to UTF-8 JSON bytes."""
    return to_json(corpus, settings).encode(ENCODING)


def save(
    corpus: Corpus,
    path: Union[str, os.PathLike],
    settings: Optional[CodecSettings] = None,
) -> None:
    """
    Save a Corpus to a JSON-NLP file.

    The payload is fully encoded before the file is touched.

    Raises:
        EncodeError: If the Corpus cannot be serialized
        OSError: If the file cannot be written
    """
    payload = encode(corpus, settings)
    Path(path).write_bytes(payload)
