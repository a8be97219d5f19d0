from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial, wraps
from typing import TYPE_CHECKING, Any, NoReturn, final

from typing_extensions import TypeIs

from fallible.errors import AbsentValueError, UnwrapError
from fallible.logging import logger
from fallible.options import Options
from fallible.utils import callable_name, truncate

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

_DEFAULT_OPTIONS = Options()


class Result[T, E](ABC):
    """Either a success value of type ``T`` or a failure value of type ``E``.

    A result is one of exactly two immutable variants, ``Success`` or
    ``Failure``, and neither can hold ``None``. Combinators never mutate a
    result, they return a new one.

    Example:
        Computing without exceptions for control flow::

            r = Result.from_operation(lambda: int(raw))
            port = r.map(lambda n: n + 1).unwrap_or(8080)

    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in ("Success", "Failure"):
            msg = f"Result is closed to subclassing, got {cls.__qualname__}"
            raise TypeError(msg)

    @staticmethod
    def success[V](value: V) -> Result[V, Any]:
        """Wrap ``value`` in a ``Success``.

        Raises:
            AbsentValueError: If ``value`` is ``None``.
        """
        return Success(value)

    @staticmethod
    def failure[F](error: F) -> Result[Any, F]:
        """Wrap ``error`` in a ``Failure``.

        Raises:
            AbsentValueError: If ``error`` is ``None``.
        """
        return Failure(error)

    @staticmethod
    def from_value(value: Any, opts: Options = _DEFAULT_OPTIONS) -> Result[Any, Any]:
        """Normalize a plain value or an already-failed value into a result.

        Values that are instances of ``opts.failure_types`` (exceptions by
        default) become a ``Failure``, everything else a ``Success``.
        """
        if opts.is_failure_value(value):
            return Failure(value)
        return Success(value)

    @staticmethod
    def from_operation[V](thunk: Callable[[], V], opts: Options = _DEFAULT_OPTIONS) -> Result[V, Any]:
        """Run ``thunk`` once and capture its outcome.

        Args:
            thunk (Callable[[], V]): Zero-argument computation.
            opts (Options): ``opts.capture`` decides which exceptions become a
                ``Failure``. Defaults to any ``Exception``.

        Returns:
            Result[V, Any]: ``Success`` with the returned value, or ``Failure``
            holding the raised exception object itself.

        Raises:
            AbsentValueError: If ``thunk`` returns ``None``.

        Exceptions outside ``opts.capture`` propagate unchanged.
        """
        try:
            value = thunk()
        except opts.capture as e:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Captured %s raised by %s", truncate(repr(e), 200), callable_name(thunk))
            return Failure(e)

        return Success(value)

    @abstractmethod
    def is_success(self) -> bool: ...

    @abstractmethod
    def is_failure(self) -> bool: ...

    @abstractmethod
    def to_optional_value(self) -> T | None:
        """Return the success payload, or ``None`` for a failure."""

    @abstractmethod
    def to_optional_error(self) -> E | None:
        """Return the failure payload, or ``None`` for a success."""

    def ok(self) -> T | None:
        return self.to_optional_value()

    def err(self) -> E | None:
        return self.to_optional_error()

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success payload or raise the failure.

        A failure holding an exception raises that exact exception object. Any
        other failure payload is raised inside an ``UnwrapError``.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abstractmethod
    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        """Return the success payload, or ``supplier()`` for a failure.

        The supplier only runs on the failure path.
        """

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success payload, leaving a failure untouched.

        Exceptions raised by ``fn`` are not captured.
        """

    @abstractmethod
    def map_or_else[U](self, fn: Callable[[T], U], fallback: Callable[[E], U]) -> U:
        """Apply ``fn`` to a success payload or ``fallback`` to a failure payload."""

    @abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Keep a success, or fall back to ``other`` as given."""

    @abstractmethod
    def or_else[F](self, supplier: Callable[[], F]) -> Result[T, F]:
        """Keep a success, or replace the failure with ``Failure(supplier())``."""

    def __or__[F](self, other: Result[T, F]) -> Result[T, F]:
        return self.or_(other)


@final
@dataclass(frozen=True, slots=True)
class Success[T, E](Result[T, E]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise AbsentValueError("Success")

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def to_optional_value(self) -> T:
        return self.value

    def to_optional_error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def map_or_else[U](self, fn: Callable[[T], U], fallback: Callable[[E], U]) -> U:
        return fn(self.value)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return Success(self.value)

    def or_else[F](self, supplier: Callable[[], F]) -> Result[T, F]:
        return Success(self.value)


@final
@dataclass(frozen=True, slots=True)
class Failure[T, E](Result[T, E]):
    error: E
    _traceback: TracebackType | None = field(init=False, repr=False, compare=False)
    _context: BaseException | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.error is None:
            raise AbsentValueError("Failure")

        # unwrap raises with these so the payload does not accumulate frames or context
        is_exc = isinstance(self.error, BaseException)
        object.__setattr__(self, "_traceback", self.error.__traceback__ if is_exc else None)
        object.__setattr__(self, "_context", self.error.__context__ if is_exc else None)

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (self.error,))

    def _rewrap(self) -> Failure[Any, E]:
        f: Failure[Any, E] = Failure(self.error)
        object.__setattr__(f, "_traceback", self._traceback)
        object.__setattr__(f, "_context", self._context)
        return f

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def to_optional_value(self) -> None:
        return None

    def to_optional_error(self) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Unwrapping %s", truncate(repr(self), 200))
        if isinstance(self.error, BaseException):
            self.error.__context__ = self._context
            raise self.error.with_traceback(self._traceback)
        raise UnwrapError(self, self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return self._rewrap()

    def map_or_else[U](self, fn: Callable[[T], U], fallback: Callable[[E], U]) -> U:
        return fallback(self.error)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[F](self, supplier: Callable[[], F]) -> Result[T, F]:
        return Failure(supplier())


success = Result.success
failure = Result.failure
from_value = Result.from_value
from_operation = Result.from_operation


def is_success[T, E](result: Result[T, E]) -> TypeIs[Success[T, E]]:
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Failure[T, E]]:
    return isinstance(result, Failure)


def as_result[**P, R](opts: Options = _DEFAULT_OPTIONS) -> Callable[[Callable[P, R]], Callable[P, Result[R, Any]]]:
    """Decorate a function so that it returns a result instead of raising.

    Example:
        Narrowing the capture to a declared failure category::

            @as_result(Options(capture=(ValueError,)))
            def parse(raw: str) -> int:
                return int(raw)

            parse("42")   # Success(42)
            parse("x")    # Failure(ValueError(...))

    """

    def decorator(func: Callable[P, R]) -> Callable[P, Result[R, Any]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R, Any]:
            return Result.from_operation(partial(func, *args, **kwargs), opts)

        return wrapper

    return decorator
