"""Option schemas for the query parameter resolvers."""

import re

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from query_params.delimiter import (
    DEFAULT_DELIMITER,
    Delimiter,
    LiteralDelimiter,
    PatternDelimiter,
    as_delimiter,
)

DelimiterField = InstanceOf[LiteralDelimiter] | InstanceOf[PatternDelimiter]


class StringResolveOptions(BaseModel):
    """Options for resolving a single string value."""
    model_config = ConfigDict(frozen=True)

    required: bool = Field(default=False, description="Raise when no non-empty value is present")
    message: str | None = Field(default=None, description="Error message used when a required value is missing")


class ArrayResolveOptions(BaseModel):
    """Options for resolving a list of string values.

    Delimiters accept a plain separator string, a compiled ``re.Pattern`` or
    an already built ``Delimiter``; all are normalised to the ``Delimiter``
    variant on validation.
    """
    model_config = ConfigDict(frozen=True)

    delimiter: DelimiterField = Field(default=DEFAULT_DELIMITER, description="Separator for the first split")
    flat: bool = Field(default=False, description="Re-split every token with flat_delimiter")
    flat_delimiter: DelimiterField | None = Field(
        default=None, description="Separator for the flatten pass; defaults to delimiter"
    )

    @field_validator("delimiter", "flat_delimiter", mode="before")
    @classmethod
    def _normalize_delimiter(
        cls, value: str | re.Pattern[str] | Delimiter | None
    ) -> Delimiter | None:
        """Turn separator strings and patterns into ``Delimiter`` variants."""
        if value is None:
            return None
        try:
            return as_delimiter(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def effective_flat_delimiter(self) -> Delimiter:
        """Delimiter used by the flatten pass."""
        return self.flat_delimiter if self.flat_delimiter is not None else self.delimiter


__all__ = ["ArrayResolveOptions", "StringResolveOptions"]
