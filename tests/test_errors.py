from __future__ import annotations

import pickle

import pytest

from fallible import AbsentValueError, FallibleError, UnwrapError, failure


def test_fallible_error() -> None:
    e = FallibleError("foo", 1)
    assert str(e) == "[001] foo"
    assert e.mesg == "foo"
    assert e.code == 1
    assert e.details is None


def test_fallible_error_details() -> None:
    e = FallibleError("foo", 1, {"bar": "baz"})
    assert str(e) == '[001] foo\n{\n  "bar": "baz"\n}'

    # unserializable details are kept as text
    e = FallibleError("foo", 1, {"bar": object})
    assert str(e).startswith("[001] foo\n")


def test_absent_value_error() -> None:
    e = AbsentValueError("Success")
    assert isinstance(e, FallibleError)
    assert isinstance(e, ValueError)
    assert e.code == 100
    assert e.variant == "Success"
    assert str(e).startswith("[100] Success cannot hold None")


def test_unwrap_error() -> None:
    r = failure("boom")
    e = UnwrapError(r, "boom")
    assert isinstance(e, FallibleError)
    assert e.code == 200
    assert e.result == r
    assert e.error == "boom"
    assert str(e) == "[200] Called unwrap on a Failure holding a non-exception value: 'boom'"


@pytest.mark.parametrize(
    "error",
    [
        FallibleError("foo", 1),
        FallibleError("foo", 1, {"bar": "baz"}),
        AbsentValueError("Success"),
        AbsentValueError("Failure"),
        UnwrapError(failure("boom"), "boom"),
    ],
)
def test_pickle(error: FallibleError) -> None:
    decoded = pickle.loads(pickle.dumps(error))  # noqa: S301
    assert type(decoded) is type(error)
    assert str(decoded) == str(error)
    assert decoded.code == error.code
