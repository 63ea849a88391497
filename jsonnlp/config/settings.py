"""
Settings — Pydantic models for jsonnlp configuration.

A settings file has three sections:
- codec: layout of encoded output
- validation: which invariant checks run
- logging: level, format and channels
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CodecSettings(BaseModel):
    """Layout of encoded JSON. Never affects which fields are written."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: Optional[int] = Field(
        None, ge=0, description="Pretty-print indent (None = compact output)"
    )
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters")
    sort_keys: bool = Field(False, description="Sort object keys")


class ValidationSettings(BaseModel):
    """Which validators validate_corpus runs."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    references: bool = Field(True, description="Cross-reference ids must resolve")
    token_order: bool = Field(True, description="Token ids increase, offsets do not overlap")
    confidence: bool = Field(True, description="Probabilities lie in [0, 1]")
    conformance: bool = Field(True, description="DC.conformsTo matches the schema major version")
    root_governor: int = Field(
        0, description="Governor id used for dependency roots when no such token exists"
    )


class LoggingSettings(BaseModel):
    """Logging configuration, applied with configure_logging()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["silent", "info", "verbose", "debug"] = Field("info")
    format: Literal["console", "json"] = Field("console")
    channels: list[str] = Field(
        default_factory=list, description="Enabled channels (empty = all)"
    )


class Settings(BaseModel):
    """Complete jsonnlp configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    codec: CodecSettings = Field(default_factory=CodecSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
