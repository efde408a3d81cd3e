import pickle

import pytest

from rustic import (
    EmptyValueError,
    IndexOutOfRangeError,
    InvalidStateError,
    RusticError,
)
from rustic.result import Failure, Success


def unwrap_failure():
    Failure(KeyError("missing")).unwrap()


def test_empty_value_error_pickling():
    try:
        unwrap_failure()
    except EmptyValueError as exc:
        exception = exc

    dumped = pickle.dumps(exception)
    loaded = pickle.loads(dumped)
    assert isinstance(loaded, EmptyValueError)
    assert isinstance(loaded.__cause__, KeyError)
    assert loaded.__traceback__ is not None


def test_invalid_state_error_pickling():
    try:
        Success(1).get_err()
    except InvalidStateError as exc:
        exception = exc

    loaded = pickle.loads(pickle.dumps(exception))
    assert isinstance(loaded, InvalidStateError)
    assert str(loaded) == "Called get_err on a success."


@pytest.mark.parametrize(
    "error_type, builtin_type",
    [
        (EmptyValueError, ValueError),
        (InvalidStateError, RuntimeError),
        (IndexOutOfRangeError, IndexError),
    ],
)
def test_error_hierarchy(error_type, builtin_type):
    assert issubclass(error_type, RusticError)
    assert issubclass(error_type, builtin_type)
