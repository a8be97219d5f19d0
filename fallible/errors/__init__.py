from __future__ import annotations

from .errors import AbsentValueError, FallibleError, UnwrapError

__all__ = ["AbsentValueError", "FallibleError", "UnwrapError"]
