"""
measurable.core.decimals
========================

Exact base-10 magnitudes for measurable values.

All magnitudes are stored as `decimal.Decimal`. Binary floats are never fed to
the decimal constructor directly: they are first turned into their shortest
round-tripping text (``repr``) so that ``9.1234572342342`` is stored with the
digits a human wrote instead of the binary approximation
``9.12345723423419960...``.

Scaling by a rational factor is exact whenever the result terminates in
base 10. Only results that cannot be written as a finite decimal (a third,
say) and plain division are rounded, following the active `decimal` context,
so callers can widen or narrow it with ``decimal.localcontext()``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction
from math import isfinite
from typing import Union

from measurable.errors import InvalidValueError

DecimalLike = Union[int, float, str, Decimal, Fraction]

# Types accepted as raw numeric literals in comparisons against a measurable.
NUMERIC_TYPES = (int, float, Decimal, Fraction)

_ONE = Fraction(1)


def is_numeric(value: object) -> bool:
    """True for raw numbers usable as literals (bools are excluded)."""
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


def parse_decimal(value: DecimalLike) -> Decimal:
    """
    Normalize ``value`` into a finite `Decimal`.

    Parameters
    ----------
    value : int, float, str, Decimal or Fraction
        The magnitude to parse. Strings must hold a decimal literal
        (surrounding whitespace is ignored).

    Returns
    -------
    Decimal
        The parsed magnitude, preserving every supplied digit.

    Raises
    ------
    InvalidValueError
        If ``value`` is None, a blank string, unparseable, not finite, or of
        an unsupported type.
    """
    if value is None:
        raise InvalidValueError("Decimal value cannot be None")

    if isinstance(value, bool):
        raise InvalidValueError(f"Cannot use a boolean as a decimal value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, float):
        if not isfinite(value):
            raise InvalidValueError(f"Decimal value must be finite, got {value!r}")
        # repr() gives the shortest text that round-trips to the same float
        result = Decimal(repr(value))
    elif isinstance(value, Fraction):
        return fraction_to_decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidValueError("Decimal value cannot be blank")
        try:
            result = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidValueError(f"Invalid decimal value: {value!r}") from exc
    else:
        raise InvalidValueError(
            f"Cannot convert {type(value).__name__} to a decimal value"
        )

    if not result.is_finite():
        raise InvalidValueError(f"Decimal value must be finite, got {value!r}")
    return result


def format_decimal(value: Decimal) -> str:
    """
    Render ``value`` in plain positional notation without trailing zeros.

    >>> format_decimal(Decimal("10.0"))
    '10'
    >>> format_decimal(Decimal("1.2340"))
    '1.234'
    >>> format_decimal(Decimal("1E+3"))
    '1000'

    Every stored digit is printed; no context rounding is applied.
    """
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def is_zero(value: Decimal) -> bool:
    return value.is_zero()


def sign(value: Decimal) -> int:
    """Return -1, 0 or 1 depending on the sign of ``value``."""
    if value.is_zero():
        return 0
    return -1 if value.is_signed() else 1


def compare_decimals(a: Decimal, b: Decimal) -> int:
    """Three-way comparison of two decimals, returning -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_scaled(a: Decimal, b: Decimal, factor: Fraction) -> int:
    """Three-way comparison of ``a`` against ``b * factor``, computed exactly."""
    return compare_decimals(Fraction(a), Fraction(b) * factor)  # type: ignore[arg-type]


def fraction_to_decimal(value: Fraction) -> Decimal:
    """
    Turn ``value`` into a `Decimal`.

    Fractions whose denominator only has the prime factors 2 and 5 terminate
    in base 10 and are converted digit for digit. Any other fraction is
    divided out in the active decimal context.

    >>> fraction_to_decimal(Fraction(1, 8))
    Decimal('0.125')
    """
    den = value.denominator
    twos = fives = 0
    while den % 2 == 0:
        den //= 2
        twos += 1
    while den % 5 == 0:
        den //= 5
        fives += 1
    if den != 1:
        return Decimal(value.numerator) / Decimal(value.denominator)

    shift = max(twos, fives)
    digits = value.numerator * (10 ** shift // value.denominator)
    # Decimal(int) and the tuple constructor are both exact.
    sign_bit, coefficient, exponent = Decimal(digits).as_tuple()
    return Decimal((sign_bit, coefficient, exponent - shift))


def scale(value: Decimal, factor: Fraction) -> Decimal:
    """
    Multiply ``value`` by the exact rational ``factor``.

    A factor of exactly one returns ``value`` untouched. Otherwise the product
    is formed as a `Fraction` and converted with `fraction_to_decimal`, so the
    active context only matters when the product does not terminate.
    """
    if factor == _ONE:
        return value
    return fraction_to_decimal(Fraction(value) * factor)


__all__ = [
    "DecimalLike",
    "NUMERIC_TYPES",
    "is_numeric",
    "parse_decimal",
    "format_decimal",
    "is_zero",
    "sign",
    "compare_decimals",
    "compare_scaled",
    "fraction_to_decimal",
    "scale",
]
