"""Explicit representation of a decoded query parameter value.

A request layer hands over one of three shapes per parameter name: nothing
at all, a single decoded string, or the ordered list of strings produced by
repeating the parameter. ``QueryValue`` makes those cases explicit so the
resolvers can match on them instead of guessing from ``None``-or-list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Absent:
    """No value was supplied for the parameter."""


@dataclass(frozen=True, slots=True)
class Single:
    """Exactly one value was supplied."""

    value: str


@dataclass(frozen=True, slots=True)
class Multiple:
    """The parameter was repeated; values keep their request order."""

    values: tuple[str, ...]

    @property
    def first(self) -> str | None:
        """First value, or ``None`` for an empty list."""
        return self.values[0] if self.values else None


QueryValue = Absent | Single | Multiple

RawQueryValue = QueryValue | str | Sequence[str] | None

ABSENT = Absent()


def to_query_value(raw: RawQueryValue) -> QueryValue:
    """Coerce a raw query value into a ``QueryValue``.

    ``None`` maps to ``Absent``, a string to ``Single`` and any other sequence
    of strings to ``Multiple``. ``QueryValue`` instances pass through.

    Raises:
        TypeError: When ``raw`` is none of the accepted shapes.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, Absent | Single | Multiple):
        return raw
    if isinstance(raw, str):
        return Single(raw)
    if isinstance(raw, Sequence):
        values = tuple(raw)
        invalid = [value for value in values if not isinstance(value, str)]
        if invalid:
            raise TypeError(f"query values must be strings, got {invalid!r}")
        return Multiple(values)
    raise TypeError(f"unsupported query value type: {type(raw).__name__}")


__all__ = [
    "ABSENT",
    "Absent",
    "Multiple",
    "QueryValue",
    "RawQueryValue",
    "Single",
    "to_query_value",
]
