"""Helpers for reading query parameters from Flask/Werkzeug requests."""

from __future__ import annotations

import re

from flask import request
from werkzeug.datastructures import MultiDict

from query_params.config import Settings, get_settings
from query_params.delimiter import Delimiter
from query_params.exceptions import MissingParameterException
from query_params.query_value import ABSENT, Multiple, QueryValue, Single
from query_params.resolvers import (
    resolve_query_array,
    resolve_query_boolean,
    resolve_query_string,
)
from query_params.schemas import ArrayResolveOptions


def query_value_from_args(args: MultiDict[str, str], name: str) -> QueryValue:
    """Build a ``QueryValue`` for ``name`` from already decoded request args.

    Repeated parameters become ``Multiple`` in request order.
    """
    values = args.getlist(name)
    if not values:
        return ABSENT
    if len(values) == 1:
        return Single(values[0])
    return Multiple(tuple(values))


class QueryArgs:
    """Typed accessor over request query arguments.

    Defaults for the array delimiter and the missing-parameter message come
    from ``Settings`` so an application can change them in one place.
    """

    def __init__(
        self,
        args: MultiDict[str, str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.args = args if args is not None else request.args
        self.settings = settings if settings is not None else get_settings()

    def value(self, name: str) -> QueryValue:
        """Raw ``QueryValue`` for ``name``."""
        return query_value_from_args(self.args, name)

    def string(self, name: str) -> str | None:
        return resolve_query_string(self.value(name))

    def required_string(self, name: str, message: str | None = None) -> str:
        """Resolve ``name`` as a string, raising when it is missing or empty."""
        resolved = resolve_query_string(self.value(name))
        if resolved is None:
            raise MissingParameterException(
                message if message is not None else self.settings.QUERY_MISSING_PARAMETER_MESSAGE,
                parameter=name,
            )
        return resolved

    def array(
        self,
        name: str,
        *,
        delimiter: str | re.Pattern[str] | Delimiter | None = None,
        flat: bool = False,
        flat_delimiter: str | re.Pattern[str] | Delimiter | None = None,
    ) -> list[str]:
        options = ArrayResolveOptions(
            delimiter=delimiter if delimiter is not None else self.settings.QUERY_ARRAY_DELIMITER,
            flat=flat,
            flat_delimiter=flat_delimiter,
        )
        return resolve_query_array(self.value(name), options)

    def boolean(self, name: str) -> bool:
        return resolve_query_boolean(self.value(name))


__all__ = ["QueryArgs", "query_value_from_args"]
