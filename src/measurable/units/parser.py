"""
measurable.units.parser
=======================

Parsing of ``"<amount> <unit>"`` strings such as ``"10 kg"``,
``"3/2 magic_missile"`` or ``"-1.5e3 m"``.

The parser only splits and reads the amount; it never touches a registry.
Resolving the unit name is left to the caller so the same grammar serves
unit declarations (``value="12 in"``) and `Measurable.parse`.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Pattern, Tuple

from measurable.errors import UnitError

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

# amount := NUMBER ['/' NUMBER]
# unit   := non-blank remainder that does not start like a number
_AMOUNT_UNIT_RE: Pattern[str] = re.compile(
    rf"""
    \A\s*
    (?P<amount>{_NUMBER}(?:\s*/\s*{_NUMBER})?)
    \s*
    (?P<unit>[^\d\s.+\-/](?:.*\S)?)
    \s*\Z
    """,
    re.X,
)


def split_amount(text: str) -> Tuple[str, str]:
    """
    Split ``text`` into its amount and unit parts.

    Raises `UnitError` when ``text`` does not start with a number followed by
    a unit name.
    """
    m = _AMOUNT_UNIT_RE.match(text)
    if not m:
        raise UnitError(f"Cannot parse amount and unit from {text!r}")
    return m.group("amount"), m.group("unit")


def parse_amount(amount: str) -> Fraction:
    """Read a decimal literal or a ``p/q`` ratio as an exact `Fraction`."""
    numerator, sep, denominator = amount.partition("/")
    try:
        value = Fraction(numerator.strip())
        if sep:
            value /= Fraction(denominator.strip())
    except ValueError as exc:
        raise UnitError(f"Invalid amount: {amount!r}") from exc
    except ZeroDivisionError as exc:
        raise UnitError(f"Amount has a zero denominator: {amount!r}") from exc
    return value


def is_ratio(amount: str) -> bool:
    return "/" in amount


__all__ = ["split_amount", "parse_amount", "is_ratio"]
