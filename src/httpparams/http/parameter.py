"""Request parameter values.

A ``Parameter`` is one named request parameter with one or more string
values. ``EmptyParameter`` stands in for a parameter that was not sent,
so callers read ``.value`` without checking for ``None`` first.
"""

import html
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


def _stringify(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


class Parameter(ABC):
    """Shared interface for every parameter variant.

    ``value`` is the first value, ``multiple_values`` all of them.
    ``raw`` is whatever the dispatcher handed over before wrapping.
    """

    __slots__ = ()

    name: str | None
    raw: Any

    @property
    @abstractmethod
    def multiple_values(self) -> tuple[str, ...]: ...

    @property
    @abstractmethod
    def is_defined(self) -> bool: ...

    @property
    def value(self) -> str | None:
        values = self.multiple_values
        return values[0] if values else None

    @property
    def is_multiple(self) -> bool:
        return len(self.multiple_values) > 1


@dataclass(frozen=True, slots=True)
class RequestParameter(Parameter):
    """A parameter taken from the request (query string or form field).

    Lists and tuples are multi-valued, ``None`` is undefined, anything else
    is a single value. ``str()`` is HTML-escaped so the parameter can be
    echoed into a page.
    """

    name: str
    raw: Any = None

    @property
    def multiple_values(self) -> tuple[str, ...]:
        if self.raw is None:
            return ()
        if isinstance(self.raw, (list, tuple)):
            return tuple(_stringify(v) for v in self.raw)
        return (_stringify(self.raw),)

    @property
    def is_defined(self) -> bool:
        return self.raw is not None

    def __str__(self) -> str:
        value = self.value
        if value is None:
            return ""
        return html.escape(value, quote=True)


@dataclass(frozen=True, slots=True)
class FileParameter(Parameter):
    """An uploaded file, or a list of them, under one field name.

    Values are the upload filenames when the object has a ``filename``
    attribute, otherwise ``str()`` of the object.
    """

    name: str
    raw: Any

    @property
    def multiple_values(self) -> tuple[str, ...]:
        files = self.raw if isinstance(self.raw, (list, tuple)) else (self.raw,)
        return tuple(getattr(f, "filename", None) or _stringify(f) for f in files)

    @property
    def is_defined(self) -> bool:
        return True

    def __str__(self) -> str:
        return html.escape(self.value or "", quote=True)


@dataclass(frozen=True, slots=True)
class EmptyParameter(Parameter):
    """Sentinel for a parameter that is not present. Falsy."""

    name: str | None

    @property
    def raw(self) -> None:
        return None

    @property
    def multiple_values(self) -> tuple[str, ...]:
        return ()

    @property
    def is_defined(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""
