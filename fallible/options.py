from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    capture: tuple[type[BaseException], ...] = (Exception,)
    failure_types: tuple[type, ...] = (BaseException,)

    def __post_init__(self) -> None:
        if not isinstance(self.capture, tuple):
            msg = f"capture must be `tuple`, got {type(self.capture).__name__}"
            raise TypeError(msg)

        if not all(isinstance(t, type) and issubclass(t, BaseException) for t in self.capture):
            msg = "capture must only contain exception classes"
            raise TypeError(msg)

        if not isinstance(self.failure_types, tuple):
            msg = f"failure_types must be `tuple`, got {type(self.failure_types).__name__}"
            raise TypeError(msg)

        if not all(isinstance(t, type) for t in self.failure_types):
            msg = "failure_types must only contain classes"
            raise TypeError(msg)

        if not self.capture:
            msg = "capture must contain at least one exception class"
            raise ValueError(msg)
        if not self.failure_types:
            msg = "failure_types must contain at least one class"
            raise ValueError(msg)

    def merge(
        self,
        *,
        capture: tuple[type[BaseException], ...] | None = None,
        failure_types: tuple[type, ...] | None = None,
    ) -> Options:
        return Options(
            capture=capture if capture is not None else self.capture,
            failure_types=failure_types if failure_types is not None else self.failure_types,
        )

    def is_failure_value(self, value: object) -> bool:
        return isinstance(value, self.failure_types)
