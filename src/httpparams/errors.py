"""httpparams exception hierarchy.

Absence is not an error here: missing parameters resolve to
``EmptyParameter``. The only failure is a programming error, mutating a
container through the generic mapping interface.
"""


class HttpParamsError(Exception):
    """Base for all httpparams-specific errors."""


class IllegalMutation(HttpParamsError, TypeError):  # noqa: N818 — names the condition, like NotFound
    """Raised when an ``HttpParameters`` container is mutated as a mapping.

    ``params["x"] = ...``, ``del params["x"]``, ``pop``, ``popitem``,
    ``setdefault``, ``update`` and ``clear`` all raise this. Use
    ``HttpParameters.remove()`` or ``append_all()`` for controlled changes.

    Subclasses ``TypeError`` so it is caught the same way as assignment
    into a ``MappingProxyType``.
    """

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail or f"HttpParameters are immutable, you cannot {operation} directly!"
        super().__init__(self.detail)
