"""Runtime type predicates."""

from typing import Any, TypeGuard


def is_boolean(value: Any) -> TypeGuard[bool]:
    """Return True only for the two boolean literals.

    This is a type check, not a truthiness check: ``0``, ``1``, ``"true"``,
    ``None`` and containers are all rejected.
    """
    return type(value) is bool


__all__ = ["is_boolean"]
