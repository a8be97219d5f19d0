from __future__ import annotations

import json
from typing import Any


class FallibleError(Exception):
    def __init__(self, mesg: str, code: float, details: Any = None) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self.code = code
        self._details = details
        try:
            self.details = json.dumps(details, indent=2) if details else None
        except Exception:
            self.details = str(details)

    def __str__(self) -> str:
        return f"[{self.code:03.0f}] {self.mesg}{'\n' + self.details if self.details else ''}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.code, self._details))


# Error codes 100-199


class AbsentValueError(FallibleError, ValueError):
    def __init__(self, variant: str) -> None:
        super().__init__(f"{variant} cannot hold None", 100, {"variant": variant})
        self.variant = variant

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.variant,))


# Error codes 200-299


class UnwrapError(FallibleError):
    """Raised by ``unwrap`` when the failure payload is not an exception.

    The payload is kept untouched on ``error`` and the failed result on ``result``.
    """

    def __init__(self, result: Any, error: Any) -> None:
        super().__init__(f"Called unwrap on a Failure holding a non-exception value: {error!r}", 200)
        self.result = result
        self.error = error

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.result, self.error))
