"""Tests for the field validation helpers."""

import pytest

from recordkit.errors import InvalidInputError
from recordkit.utils.validator import require_in_range, require_non_empty


def test_non_empty_accepts_text():
    assert require_non_empty("John", "name") == "John"
    assert require_non_empty(" ", "name") == " "


def test_non_empty_rejects_empty():
    with pytest.raises(InvalidInputError, match="name cannot be empty"):
        require_non_empty("", "name")


def test_non_empty_rejects_non_string():
    with pytest.raises(InvalidInputError, match="must be a string"):
        require_non_empty(42, "email")


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        require_non_empty("", "name")


def test_in_range():
    assert require_in_range(5, 1, 10, "id") == 5
    assert require_in_range(1, 1, 10, "id") == 1
    assert require_in_range(10, 1, 10, "id") == 10


def test_out_of_range():
    with pytest.raises(InvalidInputError, match="between 1 and 10"):
        require_in_range(0, 1, 10, "id")
    with pytest.raises(InvalidInputError):
        require_in_range(11, 1, 10, "id")


def test_in_range_rejects_bool_and_str():
    with pytest.raises(InvalidInputError):
        require_in_range(True, 0, 10, "id")
    with pytest.raises(InvalidInputError):
        require_in_range("3", 0, 10, "id")
