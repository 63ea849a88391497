"""
Record — Shared base for every JSON-NLP model.

Implements the field-presence rules common to all records:
unknown wire keys are ignored, ``null`` means absent, and zero values
outside the mandatory core are never written.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
)


def is_zero(value: Any) -> bool:
    """True for the zero value of any wire type (after serialization)."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


class Record(BaseModel):
    """
    Base model for JSON-NLP records.

    Subclasses declare fields with the wire name as alias and list the
    attribute names that are always written in ``mandatory``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    mandatory: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_absent(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @model_serializer(mode="wrap")
    def _omit_zero_values(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name in self.mandatory:
                continue
            key = field.alias if field.alias in data else name
            if key in data and is_zero(data[key]):
                del data[key]
        return data
