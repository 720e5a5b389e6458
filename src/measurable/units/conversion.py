"""
measurable.units.conversion
===========================

Conversion factors between the units of one registry.

Every registry is a star anchored at its base unit: each unit knows how many
of itself fit in one base unit, and the factor between two units is the ratio
of those numbers. Factors are exact `Fraction`s and are memoized per
``(from, to)`` pair since a sealed registry never changes.

`conversion_for` keeps one `Conversion` per quantity type for the lifetime of
the type, building it on first use.
"""

from __future__ import annotations

import logging
import threading
import weakref
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

from measurable.core.decimals import scale
from measurable.errors import UnitRegistrationError
from measurable.units.parser import parse_amount, split_amount
from measurable.units.registry import UnitRegistry
from measurable.units.unit import Unit, UnitDefinition

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measurable.core.measurable import Measurable

logger = logging.getLogger(__name__)

_IDENTITY = Fraction(1)


class Conversion:
    """Resolves conversion factors for a sealed `UnitRegistry`."""

    def __init__(self, registry: UnitRegistry) -> None:
        registry.seal()
        self.registry = registry
        self._lock = threading.Lock()
        self._factors: Dict[Tuple[str, str], Fraction] = {}

    @classmethod
    def from_definitions(cls, definitions: Iterable[UnitDefinition]) -> "Conversion":
        """Build a registry from declarative definitions, in declaration order.

        ``value`` definitions may only refer to units declared before them;
        the referenced unit is resolved immediately and the stored factor is
        relative to the base unit.
        """
        registry = UnitRegistry()
        for definition in definitions:
            if definition.is_base:
                registry.register(definition.name, definition.aliases, base=True)
                continue

            if definition.value is not None:
                amount_text, ref_name = split_amount(definition.value)
                amount = parse_amount(amount_text)
                if amount <= 0:
                    raise UnitRegistrationError(
                        f"Unit '{definition.name}' must be worth a positive amount, "
                        f"got {definition.value!r}"
                    )
                ref = registry.resolve(ref_name)
                # 1 unit == amount ref  =>  units per base == ref per base / amount
                factor = ref.factor / amount
            else:
                factor = definition.factor
            registry.register(definition.name, definition.aliases, factor=factor)
        return cls(registry)

    # -------------------------- factors ------------------------------------
    def factor(self, from_unit: object, to_unit: object) -> Fraction:
        """Multiplier converting a magnitude in ``from_unit`` into ``to_unit``."""
        src = self.registry.resolve(from_unit)
        dst = self.registry.resolve(to_unit)
        if src.name == dst.name:
            return _IDENTITY

        key = (src.name, dst.name)
        with self._lock:
            cached = self._factors.get(key)
            if cached is None:
                # from -> base -> to
                cached = dst.factor / src.factor
                self._factors[key] = cached
        return cached

    def convert(self, value: Decimal, from_unit: object, to_unit: object) -> Decimal:
        return scale(value, self.factor(from_unit, to_unit))

    # -------------------------- registry views -----------------------------
    @property
    def base_unit(self) -> Unit:
        return self.registry.base_unit

    def resolve(self, name: object) -> Unit:
        return self.registry.resolve(name)

    def units(self) -> List[str]:
        return self.registry.units()

    def units_with_aliases(self) -> List[str]:
        return self.registry.units_with_aliases()

    def is_valid(self, name: object) -> bool:
        return self.registry.is_valid(name)

    def __repr__(self) -> str:
        return f"<Conversion base={self.base_unit.name!r} units={self.units()!r}>"


# ---------------------------------------------------------------------------
# Per-type cache
# ---------------------------------------------------------------------------
_CONVERSIONS: "weakref.WeakKeyDictionary[type, Conversion]" = weakref.WeakKeyDictionary()
_CONVERSIONS_LOCK = threading.Lock()


def conversion_for(quantity_type: "type[Measurable]") -> Conversion:
    """Return the cached `Conversion` of ``quantity_type``, building it once."""
    conversion = _CONVERSIONS.get(quantity_type)
    if conversion is not None:
        return conversion

    with _CONVERSIONS_LOCK:
        conversion = _CONVERSIONS.get(quantity_type)
        if conversion is None:
            conversion = Conversion.from_definitions(quantity_type.unit_definitions)
            _CONVERSIONS[quantity_type] = conversion
            logger.debug(
                "Built unit conversion for %s with units %s",
                quantity_type.__qualname__,
                conversion.units(),
            )
    return conversion


__all__ = ["Conversion", "conversion_for"]
