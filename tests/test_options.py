from __future__ import annotations

from typing import Any

import pytest

from fallible import Options


def test_defaults() -> None:
    opts = Options()
    assert opts.capture == (Exception,)
    assert opts.failure_types == (BaseException,)


@pytest.mark.parametrize(
    ("kwargs", "exc"),
    [
        ({"capture": Exception}, TypeError),
        ({"capture": [Exception]}, TypeError),
        ({"capture": (int,)}, TypeError),
        ({"capture": ("ValueError",)}, TypeError),
        ({"capture": (ValueError(),)}, TypeError),
        ({"capture": ()}, ValueError),
        ({"failure_types": BaseException}, TypeError),
        ({"failure_types": [BaseException]}, TypeError),
        ({"failure_types": ("BaseException",)}, TypeError),
        ({"failure_types": ()}, ValueError),
    ],
)
def test_validation(kwargs: dict[str, Any], exc: type[Exception]) -> None:
    with pytest.raises(exc):
        Options(**kwargs)


def test_frozen() -> None:
    opts = Options()
    with pytest.raises(AttributeError):
        opts.capture = (KeyError,)  # type: ignore[misc]


def test_merge() -> None:
    opts = Options(capture=(KeyError,), failure_types=(str,))

    assert opts.merge() == opts
    assert opts.merge(capture=(ValueError,)) == Options(capture=(ValueError,), failure_types=(str,))
    assert opts.merge(failure_types=(int,)) == Options(capture=(KeyError,), failure_types=(int,))

    # merge returns a new instance
    assert opts.merge() is not opts
    assert opts.capture == (KeyError,)


def test_merge_validates() -> None:
    with pytest.raises(ValueError, match="capture"):
        Options().merge(capture=())


@pytest.mark.parametrize(
    ("failure_types", "value", "expected"),
    [
        ((BaseException,), ValueError("foo"), True),
        ((BaseException,), KeyboardInterrupt(), True),
        ((BaseException,), "foo", False),
        ((BaseException,), ValueError, False),
        ((str,), "foo", True),
        ((str, int), 1, True),
        ((str, int), 1.5, False),
    ],
)
def test_is_failure_value(failure_types: tuple[type, ...], value: Any, expected: bool) -> None:
    assert Options(failure_types=failure_types).is_failure_value(value) is expected
