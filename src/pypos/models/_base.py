"""Base model and enum for POS API responses.

Every response model inherits from :class:`PosBaseModel` which provides:

* frozen, ``extra="ignore"`` models so new backend fields never break
  parsing;
* a ``raw`` dict that captures the original payload.

Status enums inherit from :class:`PosEnum` which adds an ``UNKNOWN``
member and a ``_missing_`` hook that returns ``UNKNOWN`` for any value
without a mapped member.
"""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


class PosEnum(enum.StrEnum):
    """Base for backend status enums.

    Every subclass **must** define ``UNKNOWN = "unknown"``.
    """

    @classmethod
    def _missing_(cls, value: object) -> PosEnum:
        # pylint: disable=no-member
        if hasattr(cls, "UNKNOWN"):
            unknown: PosEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


def _coerce_amount(value: Any) -> Any:
    """Rails serialises decimal columns as strings (``"1200.0"``)."""
    if isinstance(value, str) and value.strip():
        return Decimal(value.strip())
    return value


Amount = Annotated[Decimal, BeforeValidator(_coerce_amount)]
"""Money amount, accepting JSON numbers or decimal strings."""


class PosBaseModel(BaseModel):
    """Base for POS API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "raw" in values:
            return values
        stashed = dict(values)
        stashed["raw"] = dict(values)
        return stashed


class PosRequestModel(BaseModel):
    """Base for request bodies built by callers.

    ``payload()`` drops unset fields so PATCH requests only carry the
    attributes being changed.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
