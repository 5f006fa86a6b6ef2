"""Tests for httpparams.errors — exception hierarchy and messages."""

import pytest

from httpparams.errors import HttpParamsError, IllegalMutation


class TestHierarchy:
    def test_illegal_mutation_is_httpparams_error(self) -> None:
        assert issubclass(IllegalMutation, HttpParamsError)

    def test_illegal_mutation_is_type_error(self) -> None:
        assert issubclass(IllegalMutation, TypeError)


class TestIllegalMutation:
    def test_default_message(self) -> None:
        err = IllegalMutation("clear values")
        assert err.operation == "clear values"
        assert str(err) == "HttpParameters are immutable, you cannot clear values directly!"

    def test_custom_detail(self) -> None:
        err = IllegalMutation("put value", "read-only")
        assert err.detail == "read-only"
        assert str(err) == "read-only"

    def test_caught_as_type_error(self) -> None:
        with pytest.raises(TypeError):
            raise IllegalMutation("put value")
