"""Shared type aliases used across httpparams modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Orders two parameter names — negative, zero or positive like a classic cmp()
Comparator: TypeAlias = Callable[[str, str], int]

# Raw parameters as handed over by the dispatcher, before wrapping
RawParams: TypeAlias = Mapping[str, Any]
