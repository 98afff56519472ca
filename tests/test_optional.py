from dataclasses import FrozenInstanceError

import pytest

from arrayutils import ArrayUtilsError, EmptyValueError, OptionalValue, absent, present


def test_unwrap_present_returns_value():
    value = object()
    assert OptionalValue.present(value).unwrap() is value


def test_unwrap_absent_raises():
    with pytest.raises(EmptyValueError, match="no value"):
        OptionalValue.absent().unwrap()


def test_empty_value_error_is_catchable_generically():
    with pytest.raises(ArrayUtilsError):
        absent().unwrap()
    with pytest.raises(ValueError):
        absent().unwrap()


def test_or_else():
    assert present(3).or_else(9) == 3
    assert absent().or_else(9) == 9


def test_present_none_is_not_absent():
    result = present(None)
    assert result.is_present
    assert result.unwrap() is None
    assert result.or_else("fallback") is None


def test_presence_flags_and_truthiness():
    assert bool(present(0)) is True
    assert bool(absent()) is False
    assert absent().is_absent
    assert not present(1).is_absent


def test_equality_and_repr():
    assert present(2) == present(2)
    assert absent() == OptionalValue.absent()
    assert present(2) != absent()
    assert repr(present("x")) == "OptionalValue.present('x')"
    assert repr(absent()) == "OptionalValue.absent()"


def test_optional_is_immutable():
    result = present(1)
    with pytest.raises(FrozenInstanceError):
        result._value = 2  # type: ignore[misc]


def test_constructor_is_keyword_only():
    with pytest.raises(TypeError):
        OptionalValue(5)  # type: ignore[misc]
    assert OptionalValue() == absent()


def test_absent_with_payload_rejected():
    with pytest.raises(TypeError, match="cannot carry a value"):
        OptionalValue(_value=5)
