"""Immutable, case-insensitive request parameters.

``HttpParameters`` implements ``Mapping[str, Parameter]``. Names keep the
casing they arrived with; lookups ignore it. A missing name resolves to
an ``EmptyParameter`` rather than ``None``.

Containers are assembled by a ``Builder``::

    params = (
        HttpParameters.create(raw)
        .with_parent(action_params)
        .with_extra_params({"locale": "en"})
        .build()
    )
"""

from __future__ import annotations

import functools
import logging
import warnings
from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, ValuesView
from types import MappingProxyType
from typing import Any, NoReturn

from httpparams._internal.types import Comparator, RawParams
from httpparams.config import ParamsConfig
from httpparams.errors import IllegalMutation
from httpparams.http.parameter import EmptyParameter, Parameter, RequestParameter

logger = logging.getLogger("httpparams.parameters")


def _wrap(name: str, value: Any) -> Parameter:
    """Wrap a raw value, passing existing ``Parameter`` instances through."""
    if isinstance(value, Parameter):
        return value
    return RequestParameter(name, value)


def _natural_order(a: str, b: str) -> int:
    return (a > b) - (a < b)


def case_collisions(names: Iterable[str]) -> list[tuple[str, ...]]:
    """Group names that are equal ignoring case. Only groups of two or more."""
    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(name.lower(), []).append(name)
    return [tuple(group) for group in groups.values() if len(group) > 1]


class HttpParameters(Mapping[str, Parameter]):
    """Immutable, case-insensitive request parameters.

    ``get`` returns the first matching parameter, or ``EmptyParameter``.
    ``params[name]`` does the same lookup but raises ``KeyError`` on a miss.

    Writing through the mapping interface (``params[k] = v``, ``del``,
    ``update``, ``clear``...) raises ``IllegalMutation``. Dispatcher code that
    needs to strip or override parameters uses ``remove`` and ``append_all``,
    which change this container in place and return it.

    Two stored names may differ only by case (the builder merges a parent
    by exact name). Lookups then resolve to whichever comes first in
    insertion order; the builder logs a warning when that happens.
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, Parameter] | None = None) -> None:
        object.__setattr__(self, "_data", data if data is not None else {})

    @classmethod
    def create(cls, raw: RawParams | None = None, *, config: ParamsConfig | None = None) -> Builder:
        """Start a ``Builder`` from raw request values, or empty."""
        return Builder(raw, config=config)

    # -- Case-insensitive access --

    def _find(self, name: str) -> Parameter | None:
        key_lower = name.lower()
        for key, param in self._data.items():
            if key.lower() == key_lower:
                return param
        return None

    def contains(self, name: object) -> bool:
        """True if a parameter matches *name* ignoring case."""
        if not isinstance(name, str):
            return False
        key_lower = name.lower()
        return any(key.lower() == key_lower for key in self._data)

    def get(self, key: object, default: object = None) -> Parameter:  # type: ignore[override]
        """Return the parameter matching *key* ignoring case.

        Never raises: a missing name gives ``EmptyParameter(key)``, whatever
        *default* is. Non-string keys are looked up by ``str(key)``.
        """
        if key is None:
            return EmptyParameter(None)
        name = key if isinstance(key, str) else str(key)
        param = self._find(name)
        if param is not None:
            return param
        return EmptyParameter(name)

    def __getitem__(self, key: str) -> Parameter:
        if isinstance(key, str):
            param = self._find(key)
            if param is not None:
                return param
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    # -- Controlled mutation --

    def remove(self, names: str | Iterable[str]) -> HttpParameters:
        """Drop every parameter matching any of *names*, ignoring case.

        A single string is one name. Returns ``self`` for chaining.
        """
        if isinstance(names, str):
            names = (names,)
        names_lower = {name.lower() for name in names if isinstance(name, str)}
        doomed = [key for key in self._data if key.lower() in names_lower]
        for key in doomed:
            del self._data[key]
        if doomed:
            logger.debug("Removed parameters: %s", ", ".join(doomed))
        return self

    def append_all(self, new_params: RawParams) -> HttpParameters:
        """Add *new_params*, replacing existing ones that match ignoring case.

        Raw values are wrapped in ``RequestParameter``. Returns ``self``.
        """
        self.remove(new_params.keys())
        for name, value in new_params.items():
            self._data[name] = _wrap(name, value)
        logger.debug("Appended parameters: %s", ", ".join(new_params))
        return self

    # -- Read-only mapping --

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def is_empty(self) -> bool:
        return not self._data

    def contains_key(self, key: object) -> bool:
        """Exact-case membership, unlike ``contains``."""
        return key in self._data

    def contains_value(self, value: object) -> bool:
        return value in self._data.values()

    def keys(self) -> KeysView[str]:
        """Sorted snapshot of the names. Later changes don't show up in it."""
        return dict.fromkeys(sorted(self._data)).keys()

    def values(self) -> ValuesView[Parameter]:
        return MappingProxyType(self._data).values()

    def items(self) -> ItemsView[str, Parameter]:
        return MappingProxyType(self._data).items()

    def to_multi_dict(self) -> dict[str, list[str]]:
        """All values per name, the shape ``parse_qs`` produces."""
        return {name: list(param.multiple_values) for name, param in self._data.items()}

    # -- Mapping mutators are closed --

    def __setitem__(self, key: str, value: Parameter) -> NoReturn:
        raise IllegalMutation("put value")

    def __delitem__(self, key: str) -> NoReturn:
        raise IllegalMutation("remove object")

    def pop(self, key: str, *default: Any) -> NoReturn:
        raise IllegalMutation("remove object")

    def popitem(self) -> NoReturn:
        raise IllegalMutation("remove object")

    def setdefault(self, key: str, default: Any = None) -> NoReturn:
        raise IllegalMutation("put value")

    def update(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise IllegalMutation("put values")

    def clear(self) -> NoReturn:
        raise IllegalMutation("clear values")

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return f"HttpParameters({self._data!r})"


class Builder:
    """Stages raw request values and builds an ``HttpParameters``.

    Usually obtained from ``HttpParameters.create()``. Every ``with_*``
    method returns the builder for chaining.
    """

    __slots__ = ("_comparator", "_config", "_parent", "_staged")

    def __init__(self, raw: RawParams | None = None, *, config: ParamsConfig | None = None) -> None:
        self._config = config or ParamsConfig()
        self._comparator: Comparator | None = None
        self._parent: HttpParameters | None = None
        self._staged: dict[str, Any] = {}
        if raw:
            self._stage_all(raw)

    def _stage(self, name: str, value: Any) -> None:
        # With a comparator, names comparing equal share one slot (first name wins)
        if self._comparator is not None:
            for existing in self._staged:
                if self._comparator(existing, name) == 0:
                    self._staged[existing] = value
                    return
        self._staged[name] = value

    def _stage_all(self, params: RawParams) -> None:
        for name, value in params.items():
            self._stage(name, value)

    def with_parent(self, parent: HttpParameters | None) -> Builder:
        """Inherit *parent*'s parameters. Staged values win on an exact name match."""
        if parent is not None:
            self._parent = parent
        return self

    def with_extra_params(self, params: RawParams | None) -> Builder:
        if params is not None:
            self._stage_all(params)
        return self

    def with_comparator(self, comparator: Comparator | None) -> Builder:
        """Order staged names with *comparator* (``None`` for natural order).

        This starts a fresh staging area. Values staged so far are dropped
        unless ``ParamsConfig.preserve_staged_on_reorder`` is set.
        """
        previous = self._staged
        self._comparator = comparator or _natural_order
        self._staged = {}
        if self._config.preserve_staged_on_reorder:
            self._stage_all(previous)
        elif previous:
            logger.warning(
                "with_comparator() discarded %d staged parameter(s): %s",
                len(previous),
                ", ".join(previous),
            )
        return self

    def _ordered_names(self) -> list[str]:
        if self._comparator is None:
            return list(self._staged)
        return sorted(self._staged, key=functools.cmp_to_key(self._comparator))

    def build(self) -> HttpParameters:
        """Produce the container: parent entries, then staged entries on top."""
        parameters: dict[str, Parameter] = {} if self._parent is None else dict(self._parent._data)
        inherited = len(parameters)
        for name in self._ordered_names():
            parameters[name] = _wrap(name, self._staged[name])

        if self._config.warn_on_case_collisions:
            for group in case_collisions(parameters):
                logger.warning(
                    "Parameter names differ only by case: %s (lookups use %r)",
                    ", ".join(group),
                    group[0],
                )

        logger.debug("Built %d parameter(s), %d inherited from parent", len(parameters), inherited)
        return HttpParameters(parameters)

    def build_no_nested_wrapping(self) -> HttpParameters:
        """Deprecated: ``build()`` already leaves ``Parameter`` values unwrapped."""
        warnings.warn(
            "Builder.build_no_nested_wrapping() is deprecated, use build() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.build()
