from __future__ import annotations

from .errors import AbsentValueError, FallibleError, UnwrapError
from .options import Options
from .result import Failure, Result, Success, as_result, failure, from_operation, from_value, is_failure, is_success, success
from .utils import fallible_version

__version__ = fallible_version()

__all__ = [
    "AbsentValueError",
    "FallibleError",
    "Failure",
    "Options",
    "Result",
    "Success",
    "UnwrapError",
    "as_result",
    "failure",
    "from_operation",
    "from_value",
    "is_failure",
    "is_success",
    "success",
]
