"""
measurable.core.utils
=====================

Small naming helpers used by the quantity layer.
"""

from __future__ import annotations

import re
from typing import Pattern

# Boundaries inside CamelCase identifiers: "VeryComplex" -> "Very|Complex",
# "HTTPRequest" -> "HTTP|Request", "Utf8Text" -> "Utf8|Text".
_CAMEL_BOUNDARY_RE: Pattern[str] = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])"
)
_SEPARATORS_RE: Pattern[str] = re.compile(r"[\s_]+")


def humanize_name(name: str) -> str:
    """
    Turn a class name into a lower-cased, space separated label.

    >>> humanize_name("VeryComplexThing")
    'very complex thing'
    >>> humanize_name("Magic")
    'magic'
    """
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", name)
    spaced = _SEPARATORS_RE.sub(" ", spaced)
    return spaced.strip().lower()


def is_blank(value: object) -> bool:
    """True for None and for strings holding only whitespace."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
