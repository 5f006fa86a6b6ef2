"""httpparams — case-insensitive, immutable request parameters for dispatchers.

Wraps the raw parameter map a dispatcher pulls off a request, matches
names without regard to case, and never hands back ``None`` for a
missing parameter.

Basic usage::

    from httpparams import HttpParameters

    params = HttpParameters.create({"Page": "2", "tag": ["a", "b"]}).build()
    params.get("page").value            # "2"
    params.get("tag").multiple_values   # ("a", "b")
    params.get("missing").value         # None (EmptyParameter)

Stripping and overriding before passing parameters downstream::

    params.remove({"password", "token"}).append_all({"locale": "en"})
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "Builder",
    "EmptyParameter",
    "FileParameter",
    "HttpParameters",
    "HttpParamsError",
    "IllegalMutation",
    "Parameter",
    "ParamsConfig",
    "RequestParameter",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import httpparams`` fast while providing a clean top-level API.
    """
    if name in ("HttpParameters", "Builder"):
        from httpparams.http import parameters as _params

        return getattr(_params, name)

    if name in ("Parameter", "RequestParameter", "FileParameter", "EmptyParameter"):
        from httpparams.http import parameter as _param

        return getattr(_param, name)

    if name == "ParamsConfig":
        from httpparams.config import ParamsConfig

        return ParamsConfig

    if name in ("HttpParamsError", "IllegalMutation"):
        from httpparams import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
