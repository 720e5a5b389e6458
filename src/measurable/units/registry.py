"""
measurable.units.registry
=========================

A thread-safe registry of the units of one quantity type.

Key properties
--------------
- Canonical names and aliases share one case-insensitive namespace.
- Lookups accept any string-like name (str, str-valued Enum members, objects
  with a meaningful ``str()``) and normalize it once.
- Exactly one base unit; every other unit carries its factor relative to it.
- Registries are sealed once populated and are read-only afterwards.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from measurable.errors import UnitRegistrationError, UnknownUnitError
from measurable.units.unit import FactorLike, Unit, coerce_factor

logger = logging.getLogger(__name__)


def normalize_unit_name(name: object) -> str:
    """Normalize a user-provided unit name into its lookup key.

    Rules:
    - Enum members are replaced by their value.
    - Anything that is not a string goes through ``str()``.
    - Strip surrounding whitespace, Unicode normalize to NFC, casefold.
    """
    if isinstance(name, Enum):
        name = name.value
    text = name if isinstance(name, str) else str(name)
    return unicodedata.normalize("NFC", text.strip()).casefold()


class UnitRegistry:
    """Registry mapping every canonical name and alias to its `Unit`."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}    # canonical name -> unit
        self._lookup: Dict[str, Unit] = {}   # normalized name/alias -> unit
        self._base: Optional[Unit] = None
        self._sealed = False

    def __contains__(self, name: object) -> bool:
        return self.is_valid(name)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        with self._lock:
            return iter(list(self._units.values()))

    # -------------------------- public API ---------------------------------
    def register(
        self,
        name: str,
        aliases: Iterable[str] = (),
        *,
        base: bool = False,
        factor: Optional[FactorLike] = None,
    ) -> Unit:
        """Register a unit under its canonical name and aliases.

        ``factor`` is the number of this unit in one base unit. The base unit
        takes no factor (or exactly 1); every other unit requires one.
        """
        if name is None or not str(name).strip():
            raise UnitRegistrationError("Unit name cannot be blank")
        name = str(name).strip()
        aliases = tuple(str(a).strip() for a in aliases if a is not None)
        if any(not a for a in aliases):
            raise UnitRegistrationError(f"Aliases of unit '{name}' cannot be blank")

        if base:
            resolved_factor = coerce_factor(1 if factor is None else factor)
            if resolved_factor != 1:
                raise UnitRegistrationError(
                    f"Base unit '{name}' must have a factor of 1, got {factor!r}"
                )
        else:
            if factor is None:
                raise UnitRegistrationError(f"Unit '{name}' requires a conversion factor")
            resolved_factor = coerce_factor(factor)

        keys = [normalize_unit_name(n) for n in (name, *aliases)]

        # The whole check-and-set runs under the lock.
        with self._lock:
            if self._sealed:
                raise UnitRegistrationError(
                    f"Cannot register unit '{name}': the registry is sealed"
                )
            if base and self._base is not None:
                raise UnitRegistrationError(
                    f"Cannot register '{name}' as base unit: "
                    f"'{self._base.name}' is already the base unit"
                )

            seen: set[str] = set()
            for spelling, key in zip((name, *aliases), keys):
                if key in seen:
                    raise UnitRegistrationError(
                        f"Cannot register unit '{name}': '{spelling}' is declared twice"
                    )
                seen.add(key)
                existing = self._lookup.get(key)
                if existing is not None:
                    raise UnitRegistrationError(
                        f"Cannot register unit '{name}': '{spelling}' "
                        f"already refers to unit '{existing.name}'"
                    )

            new_unit = Unit(name, aliases, resolved_factor, base)
            self._units[name] = new_unit
            for key in keys:
                self._lookup[key] = new_unit
            if base:
                self._base = new_unit
            return new_unit

    def resolve(self, name: object) -> Unit:
        """Look up a unit by canonical name or alias (case-insensitive).

        Raises `UnknownUnitError` if nothing matches.
        """
        if name is None:
            raise UnknownUnitError(name)
        if isinstance(name, Unit):
            name = name.name
        with self._lock:
            found = self._lookup.get(normalize_unit_name(name))
        if found is None:
            raise UnknownUnitError(name)
        return found

    def is_valid(self, name: object) -> bool:
        try:
            self.resolve(name)
            return True
        except UnknownUnitError:
            return False

    def units(self) -> List[str]:
        """Sorted canonical unit names."""
        with self._lock:
            return sorted(set(self._units))

    def units_with_aliases(self) -> List[str]:
        """Sorted canonical names and aliases, without duplicates."""
        with self._lock:
            names = {n for u in self._units.values() for n in u.names}
        return sorted(names)

    @property
    def base_unit(self) -> Unit:
        with self._lock:
            if self._base is None:
                raise UnitRegistrationError("No base unit has been registered")
            return self._base

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Freeze the registry. Requires a base unit to have been registered."""
        with self._lock:
            if self._sealed:
                return
            if self._base is None:
                raise UnitRegistrationError("Cannot seal a unit registry without a base unit")
            self._sealed = True
            base_name, count = self._base.name, len(self._units)
        logger.debug("Sealed unit registry with base '%s' and %d unit(s)", base_name, count)


__all__ = ["UnitRegistry", "normalize_unit_name"]
