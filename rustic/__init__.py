"""Option, result and sequence types for explicit handling of missing values and errors."""

from ._exceptions import (
    EmptyValueError,
    IndexOutOfRangeError,
    InvalidStateError,
    RusticError,
)
from .option import Absent, Option, Present, of_nothing, of_value
from .result import Failure, Result, Success, of_failure, of_success
from .sequence import Sequence

__all__ = [
    "Absent",
    "EmptyValueError",
    "Failure",
    "IndexOutOfRangeError",
    "InvalidStateError",
    "Option",
    "Present",
    "Result",
    "RusticError",
    "Sequence",
    "Success",
    "of_failure",
    "of_nothing",
    "of_success",
    "of_value",
]
