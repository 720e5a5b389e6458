"""
measurable.units.unit
=====================

Unit records and the declarative definitions quantity types are built from.

Every unit of a registry carries one exact rational `factor`: the number of
that unit contained in one base unit (``1 base == factor <unit>``). Factors
between two non-base units are always derived from these, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from math import isfinite
from typing import Iterable, Optional, Tuple, Union

from measurable.errors import UnitRegistrationError

FactorLike = Union[int, float, str, Decimal, Fraction]


def coerce_factor(value: FactorLike) -> Fraction:
    """
    Turn a user supplied factor into a positive, exact `Fraction`.

    Accepts ints, Decimals, Fractions, decimal strings and ``"p/q"`` ratio
    strings. Floats are read through their ``repr`` so ``0.1`` means one
    tenth, not the nearest binary double.
    """
    if isinstance(value, bool):
        raise UnitRegistrationError(f"Invalid conversion factor: {value!r}")
    if isinstance(value, float) and not isfinite(value):
        raise UnitRegistrationError(f"Conversion factor must be finite, got {value!r}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise UnitRegistrationError(f"Conversion factor must be finite, got {value!r}")

    source: Union[str, int, Decimal, Fraction]
    if isinstance(value, float):
        source = repr(value)
    elif isinstance(value, str):
        source = value.strip()
    elif isinstance(value, (int, Decimal, Fraction)):
        source = value
    else:
        raise UnitRegistrationError(
            f"Cannot use {type(value).__name__} as a conversion factor"
        )

    try:
        factor = Fraction(source)
    except (ValueError, ZeroDivisionError) as exc:
        raise UnitRegistrationError(f"Invalid conversion factor: {value!r}") from exc

    if factor <= 0:
        raise UnitRegistrationError(f"Conversion factor must be positive, got {value!r}")
    return factor


@dataclass(frozen=True, slots=True)
class Unit:
    """A registered unit: canonical name, aliases and factor relative to the base."""

    name: str
    aliases: Tuple[str, ...] = ()
    factor: Fraction = Fraction(1)
    is_base: bool = False

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name, *self.aliases)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """
    One declarative ``register unit`` call of a quantity type.

    Exactly one of `value` and `factor` is used for non-base units:
    `value` reads ``"<amount> <unit>"`` and says how much of an already
    defined unit one of this unit is worth; `factor` gives the number of
    this unit per base unit directly.
    """

    name: str
    aliases: Tuple[str, ...] = ()
    value: Optional[str] = None
    factor: Optional[FactorLike] = None
    is_base: bool = False

    def __post_init__(self) -> None:
        if self.is_base and (self.value is not None or self.factor is not None):
            raise UnitRegistrationError(
                f"Base unit '{self.name}' cannot declare a value or factor"
            )
        if not self.is_base and (self.value is None) == (self.factor is None):
            raise UnitRegistrationError(
                f"Unit '{self.name}' must declare exactly one of value or factor"
            )


def base_unit(name: str, aliases: Iterable[str] = ()) -> UnitDefinition:
    """Declare the base unit of a quantity type."""
    return UnitDefinition(name, tuple(aliases), is_base=True)


def unit(
    name: str,
    aliases: Iterable[str] = (),
    *,
    value: Optional[str] = None,
    factor: Optional[FactorLike] = None,
) -> UnitDefinition:
    """
    Declare a non-base unit.

    Examples
    --------
    ``unit("arcane", value="10 magic_missile")``
        one arcane is worth ten magic missiles
    ``unit("ice", factor="1/2")``
        one base unit is worth half an ice
    """
    return UnitDefinition(name, tuple(aliases), value=value, factor=factor)


__all__ = [
    "FactorLike",
    "Unit",
    "UnitDefinition",
    "base_unit",
    "unit",
    "coerce_factor",
]
