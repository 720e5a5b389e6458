"""
measurable.quantities
=====================

Ready-made quantity types for everyday weights and lengths.

Imperial units are defined through their exact metric equivalents
(1 lb = 0.45359237 kg, 1 in = 25.4 mm), so every factor is an exact rational
and conversions between, say, feet and miles introduce no drift.
"""

from __future__ import annotations

from measurable.core.measurable import Measurable
from measurable.units.unit import base_unit, unit


class Weight(Measurable):
    """Mass, based on the gram."""

    __slots__ = ()

    unit_definitions = (
        base_unit("g", aliases=("gram", "grams", "gramme", "grammes")),
        unit("mg", aliases=("milligram", "milligrams"), value="0.001 g"),
        unit("kg", aliases=("kilogram", "kilograms", "kilo", "kilos"), value="1000 g"),
        unit("t", aliases=("tonne", "tonnes", "metric_ton"), value="1000 kg"),
        unit("lb", aliases=("lbs", "pound", "pounds"), value="453.59237 g"),
        unit("oz", aliases=("ounce", "ounces"), value="1/16 lb"),
    )


class Length(Measurable):
    """Distance, based on the metre."""

    __slots__ = ()

    unit_definitions = (
        base_unit("m", aliases=("meter", "meters", "metre", "metres")),
        unit("mm", aliases=("millimeter", "millimeters", "millimetre", "millimetres"), value="0.001 m"),
        unit("cm", aliases=("centimeter", "centimeters", "centimetre", "centimetres"), value="0.01 m"),
        unit("km", aliases=("kilometer", "kilometers", "kilometre", "kilometres"), value="1000 m"),
        unit("in", aliases=("inch", "inches"), value="0.0254 m"),
        unit("ft", aliases=("foot", "feet"), value="12 in"),
        unit("yd", aliases=("yard", "yards"), value="3 ft"),
        unit("mi", aliases=("mile", "miles"), value="1760 yd"),
    )


__all__ = ["Weight", "Length"]
