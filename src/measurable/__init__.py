"""
measurable: exact, unit-aware quantities.

A `Measurable` pairs a `decimal.Decimal` magnitude with a unit drawn from its
quantity type's registry. Values of one type convert, compare and add across
units without binary rounding; values of different types never mix.
"""

import logging
from importlib import metadata as _metadata


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("measurable")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from measurable.core.measurable import Measurable  # noqa: E402
from measurable.errors import (  # noqa: E402
    InvalidValueError,
    UnitError,
    UnitRegistrationError,
    UnknownUnitError,
)
from measurable.quantities import Length, Weight  # noqa: E402
from measurable.units import Conversion, UnitRegistry, base_unit, unit  # noqa: E402

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Measurable",
    "Weight",
    "Length",
    "Conversion",
    "UnitRegistry",
    "base_unit",
    "unit",
    "UnitError",
    "UnknownUnitError",
    "InvalidValueError",
    "UnitRegistrationError",
]
