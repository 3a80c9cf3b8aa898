"""Resolvers turning loosely typed query values into strings, lists and booleans."""

import logging
import re
import warnings
from typing import Any

from query_params.delimiter import Delimiter, split_tokens, trim_tokens
from query_params.exceptions import MissingParameterException
from query_params.query_value import (
    Absent,
    Multiple,
    RawQueryValue,
    Single,
    to_query_value,
)
from query_params.schemas import ArrayResolveOptions, StringResolveOptions

logger = logging.getLogger(__name__)

_TRUE_LITERAL = "true"


def _first_candidate(value: RawQueryValue) -> str | None:
    """Return the first non-empty value, or None when there is nothing usable."""
    match to_query_value(value):
        case Multiple() as multiple:
            return multiple.first or None
        case Single(value=text):
            return text or None
        case Absent():
            return None


def require_value(candidate: str | None, message: str | None = None) -> str:
    """Unwrap a resolved string or raise ``MissingParameterException``."""
    if candidate is None:
        logger.debug("Required query parameter is missing")
        raise MissingParameterException(message)
    return candidate


def resolve_query_string(
    value: RawQueryValue,
    options: StringResolveOptions | None = None,
) -> str | None:
    """Resolve a query value to a single string.

    Repeated parameters contribute only their first value. Empty strings are
    treated exactly like a missing parameter; whitespace is left untouched.

    Args:
        value: The decoded query value.
        options: ``required=True`` raises instead of returning ``None``.

    Returns:
        The resolved string, or ``None`` when no non-empty value is present.

    Raises:
        MissingParameterException: When ``options.required`` is set and no
            value is present.
    """
    candidate = _first_candidate(value)
    if options is not None and options.required:
        return require_value(candidate, options.message)
    return candidate


def resolve_query_string_required(value: RawQueryValue, message: str | None = None) -> str:
    """Resolve a query value to a string, raising when it is missing or empty."""
    return require_value(_first_candidate(value), message)


def resolve_query_array(
    value: RawQueryValue,
    options: ArrayResolveOptions | None = None,
    *,
    delimiter: str | re.Pattern[str] | Delimiter | None = None,
    flat: bool | None = None,
    flat_delimiter: str | re.Pattern[str] | Delimiter | None = None,
) -> list[str]:
    """Resolve a query value to a list of strings.

    A single value is split by the delimiter; repeated parameters are taken
    as-is. Every token is trimmed and empty tokens are dropped. With ``flat``
    each token is split again by ``flat_delimiter`` so repeated parameters
    may themselves carry delimited lists.

    Keyword arguments override the matching fields of ``options``.

    Example:
        >>> resolve_query_array(["a,b", "c"], flat=True)
        ['a', 'b', 'c']
    """
    options = _merge_array_options(
        options, delimiter=delimiter, flat=flat, flat_delimiter=flat_delimiter
    )

    match to_query_value(value):
        case Absent() | Single(value=""):
            return []
        case Multiple(values=values):
            base = trim_tokens(values)
        case Single(value=text):
            base = trim_tokens(options.delimiter.split(text))

    if not options.flat:
        return base

    return split_tokens(base, options.effective_flat_delimiter)


def _merge_array_options(
    options: ArrayResolveOptions | None, **overrides: Any
) -> ArrayResolveOptions:
    """Apply keyword overrides on top of the given or default options."""
    updates = {key: override for key, override in overrides.items() if override is not None}
    if options is None:
        return ArrayResolveOptions(**updates)
    if not updates:
        return options
    return ArrayResolveOptions(**(dict(options) | updates))


def resolve_query_boolean(value: RawQueryValue) -> bool:
    """Resolve a query value to a boolean.

    Only the exact, case-sensitive literal ``"true"`` is true. ``"True"``,
    ``"1"``, ``"yes"`` and everything else, including a missing parameter,
    resolve to False. Repeated parameters contribute only their first value.
    """
    match to_query_value(value):
        case Multiple() as multiple:
            return multiple.first == _TRUE_LITERAL
        case Single(value=text):
            return text == _TRUE_LITERAL
        case Absent():
            return False


def parse_as_str(
    value: RawQueryValue,
    *,
    required: bool = False,
    message: str | None = None,
) -> str | None:
    """Deprecated alias of ``resolve_query_string``."""
    warnings.warn(
        "parse_as_str is deprecated; use resolve_query_string or resolve_query_string_required",
        DeprecationWarning,
        stacklevel=2,
    )
    return resolve_query_string(value, StringResolveOptions(required=required, message=message))


def parse_as_arr(
    value: RawQueryValue,
    options: ArrayResolveOptions | None = None,
    **overrides: Any,
) -> list[str]:
    """Deprecated alias of ``resolve_query_array``."""
    warnings.warn(
        "parse_as_arr is deprecated; use resolve_query_array",
        DeprecationWarning,
        stacklevel=2,
    )
    return resolve_query_array(value, options, **overrides)


def parse_as_bool(value: RawQueryValue) -> bool:
    """Deprecated alias of ``resolve_query_boolean``."""
    warnings.warn(
        "parse_as_bool is deprecated; use resolve_query_boolean",
        DeprecationWarning,
        stacklevel=2,
    )
    return resolve_query_boolean(value)


__all__ = [
    "parse_as_arr",
    "parse_as_bool",
    "parse_as_str",
    "require_value",
    "resolve_query_array",
    "resolve_query_boolean",
    "resolve_query_string",
    "resolve_query_string_required",
]
