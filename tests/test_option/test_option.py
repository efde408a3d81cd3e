import pytest
from hypothesis import given
from hypothesis.strategies import integers, lists, none, one_of, text

from rustic import EmptyValueError
from rustic.option import (
    Absent,
    Option,
    Present,
    flatten,
    is_absent,
    is_present,
    of_nothing,
    of_value,
    unwrap,
)

values = one_of(integers(), text(), none(), lists(integers()))


def fail(*args):
    raise AssertionError("Should not be called")


def test_present_is_present():
    option = of_value(42)
    assert option.is_present()
    assert not option.is_absent()
    assert is_present(option)
    assert not is_absent(option)


def test_absent_is_absent():
    option = of_nothing()
    assert option.is_absent()
    assert not option.is_present()
    assert is_absent(option)
    assert not is_present(option)


@given(values)
def test_unwrap_present(value):
    assert of_value(value).unwrap() == value
    assert unwrap(of_value(value)) == value


def test_unwrap_absent():
    with pytest.raises(EmptyValueError, match="Called unwrap on an absent value."):
        of_nothing().unwrap()


@given(values, values)
def test_unwrap_or(value, default):
    assert of_value(value).unwrap_or(default) == value
    assert of_nothing().unwrap_or(default) == default


def test_unwrap_or_else_only_calls_function_when_absent():
    assert of_value(1).unwrap_or_else(fail) == 1
    assert of_nothing().unwrap_or_else(lambda: 2) == 2


def test_expect():
    assert of_value("a").expect("missing") == "a"
    with pytest.raises(EmptyValueError, match="missing user"):
        of_nothing().expect("missing user")


def test_get():
    assert of_value(0).get() == 0
    assert of_nothing().get() is None


def test_map():
    assert of_value(2).map(lambda x: x * 3) == Present(6)


def test_map_absent_does_not_call_function():
    assert of_nothing().map(fail) == Absent()


@given(values)
def test_flat_map_round_trip(value):
    assert of_value(value).flat_map(of_value).unwrap() == value


def test_flat_map_chains_without_nesting():
    def half(x: int) -> Option[int]:
        if x % 2 == 0:
            return Present(x // 2)
        return Absent()

    assert of_value(8).flat_map(half).and_then(half) == Present(2)
    assert of_value(6).flat_map(half).and_then(half) == Absent()
    assert of_nothing().and_then(fail) == Absent()


def test_filter():
    assert of_value(4).filter(lambda x: x > 3) == Present(4)
    assert of_value(2).filter(lambda x: x > 3) == Absent()
    assert of_nothing().filter(fail) == Absent()


def test_filter_returns_same_instance():
    option = of_value([1])
    assert option.filter(lambda x: True) is option


def test_equals():
    assert of_value(1).equals(of_value(1))
    assert not of_value(1).equals(of_value(2))
    assert not of_value(1).equals(of_nothing())
    assert not of_nothing().equals(of_value(1))
    assert of_nothing().equals(of_nothing())


def test_match_calls_exactly_one_callback():
    assert of_value(3).match(lambda x: x + 1, fail) == 4
    assert of_nothing().match(fail, lambda: "none") == "none"


def test_structural_pattern_matching():
    match of_value("x"):
        case Present(value):
            assert value == "x"
        case Absent():
            pytest.fail("Expected a present option")


def test_flatten():
    assert Present(Present(1)).flatten() == Present(1)
    assert Present(Absent()).flatten() == Absent()
    assert Absent().flatten() == Absent()
    assert flatten(Present(Present("a"))) == Present("a")
    assert flatten(Absent()) == Absent()


def test_flatten_rejects_non_option_value():
    with pytest.raises(TypeError):
        Present(1).flatten()  # pyright: ignore[reportAttributeAccessIssue]


def test_or_else():
    assert of_value(1).or_else(of_value(2)) == Present(1)
    assert of_nothing().or_else(of_value(2)) == Present(2)


def test_to_list():
    assert of_value(1).to_list() == [1]
    assert of_nothing().to_list() == []


def test_options_are_immutable():
    option = Present(1)
    with pytest.raises(AttributeError):
        option.value = 2  # pyright: ignore[reportAttributeAccessIssue]


def test_repr():
    assert repr(Present("a")) == "Present('a')"
    assert repr(Absent()) == "Absent()"
