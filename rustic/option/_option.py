from __future__ import annotations

import typing
from collections.abc import Callable, Mapping
from typing import Any, Literal, Never, overload

import attrs
import cattrs
from typing_extensions import TypeIs

from rustic._exceptions import EmptyValueError
from rustic.utils import serialization


@attrs.frozen(repr=False, str=False)
class Present[T]:
    """Variant of :data:`Option` that holds a value."""

    value: T

    @staticmethod
    def is_present() -> Literal[True]:
        return True

    @staticmethod
    def is_absent() -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[], object]) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def get(self) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Present[R]:
        return Present(func(self.value))

    def flat_map[R](self, func: Callable[[T], Option[R]]) -> Option[R]:
        return func(self.value)

    def and_then[R](self, func: Callable[[T], Option[R]]) -> Option[R]:
        return self.flat_map(func)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if predicate(self.value):
            return self
        return Absent()

    def or_else(self, other: Option[T]) -> Present[T]:
        return self

    def equals(self, other: Option[Any]) -> bool:
        return isinstance(other, Present) and self.value == other.value

    def match[R](
        self, on_present: Callable[[T], R], on_absent: Callable[[], R]
    ) -> R:
        return on_present(self.value)

    def flatten[U](self: Present[Option[U]]) -> Option[U]:
        """Remove one level of nesting from an option of an option.

        Raises:
            TypeError: If the wrapped value is not itself an option.
        """

        if not isinstance(self.value, (Present, Absent)):
            raise TypeError(
                f"Can only flatten an option of an option, got {self!r}"
            )
        return self.value

    def to_list(self) -> list[T]:
        return [self.value]

    def dump(self) -> serialization.JSON:
        return _converter.unstructure(self)

    def __str__(self) -> str:
        return f"Present({self.value})"

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Absent:
    """Variant of :data:`Option` that holds no value.

    An absent option is not parametrized by the type it would hold, so the same
    instance can stand for an absent option of any type.
    """

    @staticmethod
    def is_present() -> Literal[False]:
        return False

    @staticmethod
    def is_absent() -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        raise EmptyValueError("Called unwrap on an absent value.")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_or_else[D](self, func: Callable[[], D]) -> D:
        return func()

    def expect(self, message: str) -> Never:
        raise EmptyValueError(message)

    def get(self) -> None:
        return None

    def map(self, func: Callable[[Any], object]) -> Absent:
        return self

    def flat_map(self, func: Callable[[Any], Option[Any]]) -> Absent:
        return self

    def and_then(self, func: Callable[[Any], Option[Any]]) -> Absent:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Absent:
        return self

    def or_else[T](self, other: Option[T]) -> Option[T]:
        return other

    def equals(self, other: Option[Any]) -> bool:
        return isinstance(other, Absent)

    def match[R](
        self, on_present: Callable[[Any], R], on_absent: Callable[[], R]
    ) -> R:
        return on_absent()

    def flatten(self) -> Absent:
        return self

    def to_list(self) -> list[Never]:
        return []

    def dump(self) -> serialization.JSON:
        return _converter.unstructure(self)

    def __str__(self) -> str:
        return "Absent()"

    def __repr__(self) -> str:
        return "Absent()"


type Option[T] = Present[T] | Absent


def of_value[T](value: T) -> Option[T]:
    """Wrap a value in a present option."""

    return Present(value)


def of_nothing() -> Option[Any]:
    """Return an absent option."""

    return Absent()


def is_present[T](option: Option[T]) -> TypeIs[Present[T]]:
    return option.is_present()


def is_absent(option: Option[Any]) -> TypeIs[Absent]:
    return option.is_absent()


@overload
def unwrap[T](option: Present[T]) -> T: ...


@overload
def unwrap(option: Absent) -> Never: ...


@overload
def unwrap[T](option: Option[T]) -> T: ...


def unwrap(option):
    return option.unwrap()


def flatten[T](option: Option[Option[T]]) -> Option[T]:
    """Remove one level of nesting from an option of an option."""

    if isinstance(option, Present):
        return option.flatten()
    else:
        return option


def load[T](data: serialization.JSON, value_type: type[T] | Any = Any) -> Option[T]:
    """Build an option from the data returned by :meth:`Present.dump`.

    Args:
        data: A JSON object tagged with the variant of the option.
        value_type: The type to structure the wrapped value into, if present.

    Raises:
        ValueError: If the data doesn't describe a valid option.
    """

    return _converter.structure(data, Option[value_type])


def _is_option_type(cls: Any) -> bool:
    return cls is Option or typing.get_origin(cls) is Option


def _is_option_variant(cls: Any) -> bool:
    return cls is Present or cls is Absent or typing.get_origin(cls) is Present


def configure_option_conversion_hooks(converter: cattrs.Converter) -> None:
    """Configure a converter to be able to handle :data:`Option`.

    A present option is converted to ``{"type": "Present", "value": ...}`` and an
    absent option to ``{"type": "Absent"}``.
    """

    def unstructure_option(option: Option[Any]) -> dict[str, Any]:
        if isinstance(option, Present):
            return {"type": "Present", "value": converter.unstructure(option.value)}
        elif isinstance(option, Absent):
            return {"type": "Absent"}
        raise TypeError(f"Expected an option, got {type(option)}: {option}")

    def structure_option(data: Any, cls: Any) -> Option[Any]:
        args = typing.get_args(cls)
        value_type = args[0] if args else Any
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Expected a mapping for Option, got {type(data)}: {data}"
            )
        tag = data.get("type")
        if tag == "Present":
            if set(data) != {"type", "value"}:
                raise ValueError(
                    f"Expected keys 'type' and 'value' for a present option, got "
                    f"{list(data)}"
                )
            try:
                value = converter.structure(data["value"], value_type)
            except (TypeError, ValueError, cattrs.BaseValidationError) as error:
                raise ValueError(
                    f"Invalid value for a present option: {data['value']!r}"
                ) from error
            return Present(value)
        elif tag == "Absent":
            if set(data) != {"type"}:
                raise ValueError(
                    f"Expected only the key 'type' for an absent option, got "
                    f"{list(data)}"
                )
            return Absent()
        else:
            raise ValueError(f"Unknown tag '{tag}' for Option.")

    converter.register_unstructure_hook_func(
        lambda cls: _is_option_type(cls) or _is_option_variant(cls),
        unstructure_option,
    )
    converter.register_structure_hook_func(_is_option_type, structure_option)


_converter = serialization.new_converter()
configure_option_conversion_hooks(_converter)

for _shared_converter in serialization.converters.values():
    configure_option_conversion_hooks(_shared_converter)
