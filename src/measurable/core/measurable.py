"""
measurable.core.measurable
==========================

Defines the `Measurable` base class: an exact decimal magnitude paired with a
unit from its quantity type's registry.

A quantity type is a subclass that declares its units::

    class Weight(Measurable):
        unit_definitions = (
            base_unit("g", aliases=["gram", "grams"]),
            unit("kg", aliases=["kilogram"], value="1000 g"),
        )

The registry behind a type is built on first use and shared by every
instance. Values of one type compare, convert and add across units; values
of different types never mix.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, List, Tuple, TypeVar

from measurable.core.decimals import (
    DecimalLike,
    compare_scaled,
    format_decimal,
    is_numeric,
    parse_decimal,
    sign,
)
from measurable.core.utils import humanize_name, is_blank
from measurable.errors import UnitError
from measurable.units.conversion import Conversion, conversion_for
from measurable.units.parser import is_ratio, parse_amount, split_amount
from measurable.units.unit import Unit, UnitDefinition

M = TypeVar("M", bound="Measurable")


class Measurable:
    """
    A magnitude with a unit, convertible within its quantity type.

    Attributes
    ----------
    value : Decimal
        The magnitude expressed in `unit`.
    unit : str
        Canonical name of the unit the magnitude is expressed in.
    """

    __slots__ = ("_value", "_unit")

    unit_definitions: ClassVar[Tuple[UnitDefinition, ...]] = ()

    def __init__(self, value: DecimalLike, unit: object) -> None:
        if value is None:
            raise UnitError("Unit value cannot be nil")
        if isinstance(value, str) and not value.strip():
            raise UnitError("Unit value cannot be blank")
        if is_blank(unit):
            raise UnitError("Unit cannot be blank")

        resolved = self.conversion().resolve(unit)
        self._value: Decimal = parse_decimal(value)
        self._unit: Unit = resolved

    @classmethod
    def _build(cls: type[M], value: Decimal, unit: Unit) -> M:
        """Create an instance from already validated parts."""
        obj = cls.__new__(cls)
        obj._value = value
        obj._unit = unit
        return obj

    # -------------------------- type level ---------------------------------
    @classmethod
    def conversion(cls) -> Conversion:
        """The type's conversion table, built once and cached."""
        return conversion_for(cls)

    @classmethod
    def units(cls) -> List[str]:
        return cls.conversion().units()

    @classmethod
    def units_with_aliases(cls) -> List[str]:
        return cls.conversion().units_with_aliases()

    @classmethod
    def is_valid_unit(cls, name: object) -> bool:
        return cls.conversion().is_valid(name)

    @classmethod
    def humanized_name(cls) -> str:
        """Lower-cased label derived from the class name ("VeryComplexThing" -> "very complex thing")."""
        return humanize_name(cls.__name__)

    @classmethod
    def parse(cls: type[M], text: str) -> M:
        """
        Build a value from ``"<amount> <unit>"`` text.

        >>> Weight.parse("1.5 kg")
        <Weight: 1.5 kg>
        """
        if is_blank(text):
            raise UnitError("Cannot parse a blank measurement")
        amount, unit_name = split_amount(text)
        value: DecimalLike = parse_amount(amount) if is_ratio(amount) else amount
        return cls(value, unit_name)

    # -------------------------- accessors ----------------------------------
    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def unit(self) -> str:
        return self._unit.name

    def is_zero(self) -> bool:
        return self._value.is_zero()

    # -------------------------- conversion ---------------------------------
    def convert_to(self: M, unit: object) -> M:
        """Return a new value expressed in ``unit``. The receiver is left untouched."""
        target = self.conversion().resolve(unit)
        if target.name == self._unit.name:
            return self._build(self._value, self._unit)
        converted = self.conversion().convert(self._value, self._unit, target)
        return self._build(converted, target)

    def convert_in_place(self: M, unit: object) -> M:
        """Re-express the receiver in ``unit`` and return it."""
        converted = self.convert_to(unit)
        self._value = converted._value
        self._unit = converted._unit
        return self

    def _value_in_own_unit(self, other: "Measurable") -> Decimal:
        return self.conversion().convert(other._value, other._unit, self._unit)

    # -------------------------- comparison ---------------------------------
    def compare(self, other: object) -> int:
        """
        Three-way comparison returning -1, 0 or 1.

        ``other`` is either a value of the same type, in any of its units, or
        a raw number equal to zero. Values in other units are compared as
        exact rationals, so ``a.compare(b) == -b.compare(a)`` always holds.

        Raises
        ------
        TypeError
            If ``other`` is a different quantity type, a nonzero raw number,
            or anything else.
        """
        if isinstance(other, Measurable):
            if type(other) is not type(self):
                raise TypeError(
                    f"Cannot compare {type(self).__name__} with {type(other).__name__}"
                )
            factor = self.conversion().factor(other._unit, self._unit)
            return compare_scaled(self._value, other._value, factor)
        if is_numeric(other):
            if other != 0:
                raise TypeError(
                    f"Cannot compare {type(self).__name__} with nonzero number {other!r}"
                )
            return sign(self._value)
        raise TypeError(f"Cannot compare {type(self).__name__} with type {type(other)}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Measurable):
            if type(other) is not type(self):
                return False
            return self.compare(other) == 0
        if is_numeric(other):
            return other == 0 and self.is_zero()
        return NotImplemented

    # Instances are re-expressed in place by convert_in_place.
    __hash__ = None  # type: ignore[assignment]

    def _is_comparable(self, other: object) -> bool:
        return isinstance(other, Measurable) or is_numeric(other)

    def __lt__(self, other: object) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------- arithmetic ---------------------------------
    def _same_type(self, other: object) -> bool:
        return isinstance(other, Measurable) and type(other) is type(self)

    def __add__(self: M, other: object) -> M:
        if self._same_type(other):
            return self._build(self._value + self._value_in_own_unit(other), self._unit)  # type: ignore[arg-type]
        if is_numeric(other) and other == 0:
            return self._build(self._value, self._unit)
        return NotImplemented

    def __radd__(self: M, other: object) -> M:
        # 0 + value, which is what sum() starts with
        if is_numeric(other) and other == 0:
            return self._build(self._value, self._unit)
        return NotImplemented

    def __sub__(self: M, other: object) -> M:
        if self._same_type(other):
            return self._build(self._value - self._value_in_own_unit(other), self._unit)  # type: ignore[arg-type]
        if is_numeric(other) and other == 0:
            return self._build(self._value, self._unit)
        return NotImplemented

    def __rsub__(self: M, other: object) -> M:
        if is_numeric(other) and other == 0:
            return -self
        return NotImplemented

    def __neg__(self: M) -> M:
        return self._build(-self._value, self._unit)

    def __pos__(self: M) -> M:
        return self._build(self._value, self._unit)

    def __abs__(self: M) -> M:
        return self._build(abs(self._value), self._unit)

    def __mul__(self: M, other: object) -> M:
        if not is_numeric(other):
            return NotImplemented
        return self._build(self._value * parse_decimal(other), self._unit)  # type: ignore[arg-type]

    def __rmul__(self: M, other: object) -> M:
        return self.__mul__(other)

    def __truediv__(self, other: object):
        if self._same_type(other):
            # same quantity type -> plain ratio
            return self._value / self._value_in_own_unit(other)  # type: ignore[arg-type]
        if is_numeric(other):
            return self._build(self._value / parse_decimal(other), self._unit)  # type: ignore[arg-type]
        return NotImplemented

    # -------------------------- text ---------------------------------------
    def to_text(self) -> str:
        """``"<value> <unit>"`` using the canonical unit name."""
        return f"{format_decimal(self._value)} {self._unit.name}"

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.to_text()}>"

    def __format__(self, spec: str) -> str:
        """
        Apply ``spec`` to the magnitude and append the unit.

        >>> f"{Weight(10, 'kg'):.2f}"
        '10.00 kg'
        """
        if not spec:
            return self.to_text()
        return f"{format(self._value, spec)} {self._unit.name}"


__all__ = ["Measurable"]
