from measurable.units.conversion import Conversion, conversion_for
from measurable.units.registry import UnitRegistry, normalize_unit_name
from measurable.units.unit import Unit, UnitDefinition, base_unit, unit

__all__ = [
    "Conversion",
    "conversion_for",
    "UnitRegistry",
    "normalize_unit_name",
    "Unit",
    "UnitDefinition",
    "base_unit",
    "unit",
]
