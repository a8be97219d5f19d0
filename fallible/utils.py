from __future__ import annotations

from functools import partial
from importlib.metadata import version
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def fallible_version() -> str:
    try:
        return version("fallible")
    except Exception:
        return "unknown"


def callable_name(func: Callable[..., Any]) -> str:
    while isinstance(func, partial):
        func = func.func

    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if name is None:
        return repr(func)

    module = getattr(func, "__module__", None)
    return f"{module}.{name}" if module else name


def truncate(s: str, n: int) -> str:
    if len(s) > n:
        return s[:n] + "..."
    return s
