"""Tests for httpparams.http.parameter — Request, File and Empty parameters."""

import pytest

from httpparams.http.parameter import EmptyParameter, FileParameter, Parameter, RequestParameter


class _Upload:
    def __init__(self, filename: str) -> None:
        self.filename = filename


class TestRequestParameter:
    def test_single_value(self) -> None:
        p = RequestParameter("q", "hello")
        assert p.name == "q"
        assert p.value == "hello"
        assert p.multiple_values == ("hello",)
        assert p.is_defined is True
        assert p.is_multiple is False

    def test_list_is_multi_valued(self) -> None:
        p = RequestParameter("tag", ["python", "rust"])
        assert p.value == "python"
        assert p.multiple_values == ("python", "rust")
        assert p.is_multiple is True

    def test_non_string_values_stringified(self) -> None:
        p = RequestParameter("ids", (1, 2))
        assert p.multiple_values == ("1", "2")

    def test_bytes_decoded(self) -> None:
        assert RequestParameter("b", b"caf\xe9").value == "café"

    def test_none_is_undefined(self) -> None:
        p = RequestParameter("q", None)
        assert p.is_defined is False
        assert p.value is None
        assert p.multiple_values == ()
        assert str(p) == ""

    def test_empty_list_has_no_value(self) -> None:
        p = RequestParameter("q", [])
        assert p.is_defined is True
        assert p.value is None

    def test_raw_preserved(self) -> None:
        raw = ["a", "b"]
        assert RequestParameter("q", raw).raw is raw

    def test_str_is_html_escaped(self) -> None:
        p = RequestParameter("q", '<script>alert("x")</script>')
        assert str(p) == "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"

    def test_frozen(self) -> None:
        p = RequestParameter("q", "x")
        with pytest.raises(AttributeError):
            p.raw = "y"  # type: ignore[misc]

    def test_is_parameter(self) -> None:
        assert isinstance(RequestParameter("q", "x"), Parameter)


class TestFileParameter:
    def test_uses_filename(self) -> None:
        p = FileParameter("avatar", _Upload("me.png"))
        assert p.value == "me.png"
        assert p.is_defined is True

    def test_multiple_files(self) -> None:
        p = FileParameter("docs", [_Upload("a.pdf"), _Upload("b.pdf")])
        assert p.multiple_values == ("a.pdf", "b.pdf")
        assert p.is_multiple is True

    def test_falls_back_to_str(self) -> None:
        assert FileParameter("f", "/tmp/upload-1").value == "/tmp/upload-1"


class TestEmptyParameter:
    def test_carries_name(self) -> None:
        p = EmptyParameter("missing")
        assert p.name == "missing"

    def test_no_values(self) -> None:
        p = EmptyParameter("missing")
        assert p.value is None
        assert p.raw is None
        assert p.multiple_values == ()
        assert p.is_defined is False
        assert p.is_multiple is False

    def test_falsy(self) -> None:
        assert not EmptyParameter("missing")

    def test_str_empty(self) -> None:
        assert str(EmptyParameter("missing")) == ""

    def test_equality_by_name(self) -> None:
        assert EmptyParameter("a") == EmptyParameter("a")
        assert EmptyParameter("a") != EmptyParameter("b")

    def test_is_parameter(self) -> None:
        assert isinstance(EmptyParameter(None), Parameter)


class TestParameterInterface:
    def test_abstract_base_cannot_be_created(self) -> None:
        with pytest.raises(TypeError):
            Parameter()  # type: ignore[abstract]

    def test_subclass_missing_properties_fails_on_creation(self) -> None:
        class Partial(Parameter):
            __slots__ = ("name", "raw")

            @property
            def is_defined(self) -> bool:
                return True

        with pytest.raises(TypeError):
            Partial()  # type: ignore[abstract]
