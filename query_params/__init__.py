"""Typed resolution of decoded request query parameters."""

from query_params.delimiter import Delimiter, LiteralDelimiter, PatternDelimiter
from query_params.exceptions import MissingParameterException, QueryParameterException
from query_params.predicates import is_boolean
from query_params.query_value import ABSENT, Absent, Multiple, QueryValue, Single, to_query_value
from query_params.resolvers import (
    parse_as_arr,
    parse_as_bool,
    parse_as_str,
    require_value,
    resolve_query_array,
    resolve_query_boolean,
    resolve_query_string,
    resolve_query_string_required,
)
from query_params.schemas import ArrayResolveOptions, StringResolveOptions

__all__ = [
    "ABSENT",
    "Absent",
    "ArrayResolveOptions",
    "Delimiter",
    "LiteralDelimiter",
    "MissingParameterException",
    "Multiple",
    "PatternDelimiter",
    "QueryParameterException",
    "QueryValue",
    "Single",
    "StringResolveOptions",
    "is_boolean",
    "parse_as_arr",
    "parse_as_bool",
    "parse_as_str",
    "require_value",
    "resolve_query_array",
    "resolve_query_boolean",
    "resolve_query_string",
    "resolve_query_string_required",
    "to_query_value",
]
