"""Tests for the QueryValue representation."""

import pytest

from query_params.query_value import (
    ABSENT,
    Absent,
    Multiple,
    Single,
    to_query_value,
)


class TestToQueryValue:
    """Test cases for coercing raw values."""

    def test_none_is_absent(self):
        assert to_query_value(None) == ABSENT
        assert isinstance(to_query_value(None), Absent)

    def test_string_is_single(self):
        assert to_query_value("abc") == Single("abc")
        assert to_query_value("") == Single("")

    def test_sequences_are_multiple(self):
        """Lists and tuples keep their order."""
        assert to_query_value(["b", "a"]) == Multiple(("b", "a"))
        assert to_query_value(("x",)) == Multiple(("x",))
        assert to_query_value([]) == Multiple(())

    def test_query_values_pass_through(self):
        single = Single("a")
        multiple = Multiple(("a", "b"))
        assert to_query_value(single) is single
        assert to_query_value(multiple) is multiple
        assert to_query_value(ABSENT) is ABSENT

    def test_rejects_unsupported_types(self):
        with pytest.raises(TypeError):
            to_query_value(42)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            to_query_value({"a": "b"})  # type: ignore[arg-type]

    def test_rejects_non_string_items(self):
        with pytest.raises(TypeError, match="must be strings"):
            to_query_value(["a", 1])  # type: ignore[list-item]


def test_multiple_first():
    """first returns the leading value or None for an empty list."""
    assert Multiple(("a", "b")).first == "a"
    assert Multiple(("", "b")).first == ""
    assert Multiple(()).first is None
