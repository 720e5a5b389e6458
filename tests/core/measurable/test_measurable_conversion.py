import itertools
from decimal import Decimal

import pytest

from measurable.errors import UnitError
from tests.utils import Magic

MAGIC_UNITS = ["magic_missile", "fireball", "ice", "arcane", "ultima"]
# Units whose factors are exact in base 10, so round trips are lossless.
EXACT_UNITS = ["magic_missile", "ice", "arcane", "ultima"]


def test_convert_to_raises_on_an_invalid_unit(magic):
    with pytest.raises(UnitError):
        magic.convert_to("punch")


def test_convert_to_returns_a_new_object_in_the_new_unit(magic):
    converted = magic.convert_to("arcane")

    assert converted == magic
    assert converted is not magic
    assert isinstance(converted, Magic)
    assert magic.value == Decimal(10)
    assert magic.unit == "magic_missile"
    assert converted.value == Decimal(1)
    assert converted.unit == "arcane"


def test_convert_to_same_unit_does_not_recompute(magic):
    converted = magic.convert_to(magic.unit)
    assert converted == magic
    assert converted is not magic
    assert converted.value is magic.value
    assert converted.unit == magic.unit


def test_convert_to_same_unit_through_alias(magic):
    converted = magic.convert_to("Magic_Missiles")
    assert converted.unit == "magic_missile"
    assert converted.value is magic.value


def test_convert_to_through_base_unit():
    # ultima -> fireball goes ultima -> magic_missile -> fireball
    assert Magic(3, "ultima").convert_to("fire").value == Decimal(200)
    assert Magic(15, "fireball").convert_to("ice").value == Decimal("11.25")


def test_convert_in_place_replaces_value_and_unit(magic):
    converted = magic.convert_in_place("arcane")

    assert converted is magic
    assert magic.value == Decimal(1)
    assert magic.unit == "arcane"
    assert converted.value == Decimal(1)
    assert converted.unit == "arcane"


def test_convert_in_place_invalid_unit_leaves_receiver_untouched(magic):
    with pytest.raises(UnitError):
        magic.convert_in_place("punch")
    assert magic.value == Decimal(10)
    assert magic.unit == "magic_missile"


def test_convert_to_does_not_share_state_with_in_place_conversion(magic):
    copy = magic.convert_to("magic_missile")
    magic.convert_in_place("ultima")
    assert copy.unit == "magic_missile"
    assert copy.value == Decimal(10)


# -------------------------------
# Properties
# -------------------------------

@pytest.mark.parametrize("unit", MAGIC_UNITS)
@pytest.mark.parametrize("value", [0, 1, "2.5", -7, 9.1234572342342, "123456789.987654321"])
def test_identity_conversion_has_no_drift(unit, value):
    original = Magic(value, unit)
    converted = original.convert_to(unit)
    assert converted == original
    assert converted.value == original.value


@pytest.mark.regression(reason="Converting there and back returns the original value")
@pytest.mark.parametrize("a, b", list(itertools.product(EXACT_UNITS, repeat=2)))
@pytest.mark.parametrize("value", [10, "0.3", 9.1234572342342, -4])
def test_round_trip_between_exact_units(a, b, value):
    x = Magic(value, a)
    back = x.convert_to(b).convert_to(a)
    assert back == x
    assert back.value == x.value


@pytest.mark.parametrize("target", MAGIC_UNITS)
def test_round_trip_through_fractional_factor(target):
    x = Magic(10, "fireball")
    assert x.convert_to(target).convert_to("fireball") == x


@pytest.mark.parametrize("target", MAGIC_UNITS)
def test_convert_to_never_mutates_receiver(magic, target):
    magic.convert_to(target)
    assert magic.value == Decimal(10)
    assert magic.unit == "magic_missile"


# Values with more significant digits than the default decimal context holds.
LONG_VALUES = [
    "1.23456789012345678901234567891",
    "10.0000000000000000000000000001",
    "-98765432109876543210.0123456789012345",
]


@pytest.mark.parametrize("unit", MAGIC_UNITS)
@pytest.mark.parametrize("value", LONG_VALUES)
def test_identity_conversion_keeps_long_values(unit, value):
    original = Magic(value, unit)
    assert original.convert_to(unit).value == Decimal(value)


@pytest.mark.regression(reason="Round trips through exact factors keep every digit")
@pytest.mark.parametrize("a, b", list(itertools.product(EXACT_UNITS, repeat=2)))
@pytest.mark.parametrize("value", LONG_VALUES)
def test_round_trip_between_exact_units_with_long_values(a, b, value):
    x = Magic(value, a)
    back = x.convert_to(b).convert_to(a)
    assert back == x
    assert back.value == Decimal(value)


def test_conversion_keeps_digits_beyond_context_precision():
    converted = Magic("1.23456789012345678901234567891", "arcane").convert_to("magic_missile")
    assert converted.value == Decimal("12.3456789012345678901234567891")
