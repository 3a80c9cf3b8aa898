"""Separators used to split delimited query parameter values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LiteralDelimiter:
    """Split on an exact substring."""

    separator: str

    def split(self, text: str) -> list[str]:
        # An empty separator yields the individual characters
        if not self.separator:
            return list(text)
        return text.split(self.separator)


@dataclass(frozen=True, slots=True)
class PatternDelimiter:
    """Split wherever a regular expression matches."""

    pattern: re.Pattern[str]

    def split(self, text: str) -> list[str | None]:
        return self.pattern.split(text)


Delimiter = LiteralDelimiter | PatternDelimiter

DEFAULT_DELIMITER = LiteralDelimiter(",")


def as_delimiter(value: str | re.Pattern[str] | Delimiter) -> Delimiter:
    """Normalize a separator string or compiled pattern into a ``Delimiter``."""
    if isinstance(value, LiteralDelimiter | PatternDelimiter):
        return value
    if isinstance(value, str):
        return LiteralDelimiter(value)
    if isinstance(value, re.Pattern):
        return PatternDelimiter(value)
    raise TypeError(f"delimiter must be a string or compiled pattern, got {type(value).__name__}")


def trim_tokens(pieces: Iterable[str | None]) -> list[str]:
    """Trim surrounding whitespace and drop pieces that end up empty."""
    # re.split reports unmatched capture groups as None
    return [piece.strip() for piece in pieces if piece and piece.strip()]


def split_tokens(values: Iterable[str], delimiter: Delimiter) -> list[str]:
    """Split every value by ``delimiter``, trimming pieces and dropping empty ones."""
    tokens: list[str] = []
    for value in values:
        tokens.extend(trim_tokens(delimiter.split(value)))
    return tokens


__all__ = [
    "DEFAULT_DELIMITER",
    "Delimiter",
    "LiteralDelimiter",
    "PatternDelimiter",
    "as_delimiter",
    "split_tokens",
    "trim_tokens",
]
