"""Defines the result type and its variants: success and failure.

The Result type is a union type of Success and Failure, where Success contains the
value computed by an operation and Failure contains the error that prevented it.

Functions that can fail return a Result instead of raising, so that the caller has to
decide what to do with the error before it can reach the value.
With a type checker, we can ensure that both cases are dealt with.

Example:
    .. code-block:: python

        from typing import assert_never

        from rustic.result import Failure, Result, Success

        def divide(a: float, b: float) -> Result[float, str]:
            if b == 0:
                return Failure("Division by zero")
            return Success(a / b)

        match divide(10, 2):
            case Success(value):
                print(f"Result: {value}")
            case Failure(error):
                print(f"Error: {error}")
            case other:
                assert_never(other)
"""

from ._result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_failure_type,
    is_success,
    of_failure,
    of_success,
    unwrap,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "is_failure",
    "is_failure_type",
    "is_success",
    "of_failure",
    "of_success",
    "unwrap",
]
