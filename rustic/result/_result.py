from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, Never, overload

import attrs
from typing_extensions import TypeIs

from rustic._exceptions import EmptyValueError, InvalidStateError


@attrs.frozen(repr=False, str=False)
class Success[T]:
    value: T

    @staticmethod
    def is_ok() -> Literal[True]:
        return True

    @staticmethod
    def is_err() -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], object]) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def get(self) -> T:
        return self.value

    def get_err(self) -> Never:
        raise InvalidStateError("Called get_err on a success.")

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        return Success(func(self.value))

    def flat_map[R, E](self, func: Callable[[T], Result[R, E]]) -> Result[R, E]:
        return func(self.value)

    def and_then[R, E](self, func: Callable[[T], Result[R, E]]) -> Result[R, E]:
        return self.flat_map(func)

    def equals(self, other: Result[Any, Any]) -> bool:
        return isinstance(other, Success) and self.value == other.value

    def match[R](
        self, on_success: Callable[[T], R], on_failure: Callable[[Any], R]
    ) -> R:
        return on_success(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E]:
    error: E

    @staticmethod
    def is_ok() -> Literal[False]:
        return False

    @staticmethod
    def is_err() -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        """Raise an :class:`EmptyValueError`.

        If the error held is an exception, it is attached as the cause of the raised
        error.
        """

        cause = self.error if isinstance(self.error, BaseException) else None
        raise EmptyValueError("Called unwrap on a failure.") from cause

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_or_else[D](self, func: Callable[[E], D]) -> D:
        return func(self.error)

    def expect(self, message: str) -> Never:
        cause = self.error if isinstance(self.error, BaseException) else None
        raise EmptyValueError(message) from cause

    def get(self) -> None:
        return None

    def get_err(self) -> E:
        return self.error

    def map(self, func: Callable) -> Failure[E]:
        return self

    def flat_map(self, func: Callable) -> Failure[E]:
        return self

    def and_then(self, func: Callable) -> Failure[E]:
        return self

    def equals(self, other: Result[Any, Any]) -> bool:
        return isinstance(other, Failure) and self.error == other.error

    def match[R](
        self, on_success: Callable[[Any], R], on_failure: Callable[[E], R]
    ) -> R:
        return on_failure(self.error)

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Result[T, E] = Success[T] | Failure[E]


def of_success[T](value: T) -> Result[T, Any]:
    return Success(value)


def of_failure[E](error: E) -> Result[Any, E]:
    return Failure(error)


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    return result.is_ok()


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    return result.is_err()


def is_failure_type[E](result: Result, error_type: type[E]) -> TypeIs[Failure[E]]:
    return is_failure(result) and isinstance(result.error, error_type)


@overload
def unwrap[T](value: Success[T]) -> T: ...


@overload
def unwrap(value: Failure[Any]) -> Never: ...


@overload
def unwrap[T](value: Result[T, Any]) -> T: ...


def unwrap(value):
    return value.unwrap()
