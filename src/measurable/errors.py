"""
measurable.errors
=================

Exception hierarchy shared by the decimal, unit and quantity layers.

Every data error raised by the package derives from `UnitError`, which itself
is a `ValueError` so callers that already guard numeric parsing with
``except ValueError`` keep working.
"""

from __future__ import annotations


class UnitError(ValueError):
    """Base class for invalid values, unknown units and bad unit declarations."""


class UnknownUnitError(UnitError):
    """Raised when a unit name or alias does not resolve in a registry."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown unit: {name!r}")


class InvalidValueError(UnitError):
    """Raised when a magnitude cannot be parsed into a finite decimal."""


class UnitRegistrationError(UnitError):
    """Raised when a unit declaration conflicts with the registry's invariants."""


__all__ = [
    "UnitError",
    "UnknownUnitError",
    "InvalidValueError",
    "UnitRegistrationError",
]
