"""Conversions between decimal feet and feet-inches notation.

Used to present engine output to people; the detector itself only works in
decimal feet. Rounding is half-up throughout so that 6.5 inches shows as 7.
"""

import math
import re
from typing import Optional

_QUOTE_TRANSLATION = str.maketrans(
    {
        "’": "'",  # right single quotation mark
        "′": "'",  # prime
        "”": '"',  # right double quotation mark
        "″": '"',  # double prime
    }
)

_NUMBER = r"\d+(?:\.\d+)?"
FEET_PATTERN = re.compile(rf"({_NUMBER})\s*'")
INCHES_PATTERN = re.compile(rf"({_NUMBER})\s*\"")
BARE_NUMBER_PATTERN = re.compile(rf"^({_NUMBER})$")
FEET_SUFFIX_PATTERN = re.compile(rf"^({_NUMBER})\s*ft$")
INCHES_SUFFIX_PATTERN = re.compile(rf"^({_NUMBER})\s*in$")

SUPPORTED_FRACTIONS = (1, 2, 4, 8, 16)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _normalize_quotes(text: str) -> str:
    return text.translate(_QUOTE_TRANSLATION)


def feet_to_feet_inches(feet: float) -> str:
    """Format decimal feet as feet and whole inches.

    Examples:
        10.5  -> 10' 6"
        10.0  -> 10'
        9.99  -> 10'
    """
    whole_feet = math.floor(feet)
    inches = _round_half_up((feet - whole_feet) * 12)

    if inches == 12:
        whole_feet += 1
        inches = 0
    if inches == 0:
        return f"{whole_feet}'"
    return f"{whole_feet}' {inches}\""


def feet_inches_to_feet(text: str) -> float:
    """Parse feet-inches notation into decimal feet.

    Either part may be missing and defaults to zero: ``10' 6"`` is 10.5,
    ``10'`` is 10.0 and ``6"`` is 0.5.
    """
    normalized = _normalize_quotes(text.strip())

    feet_match = FEET_PATTERN.search(normalized)
    inches_match = INCHES_PATTERN.search(normalized)

    feet = float(feet_match.group(1)) if feet_match else 0.0
    inches = float(inches_match.group(1)) if inches_match else 0.0
    return feet + inches / 12


def parse_user_input(text: str) -> Optional[float]:
    """Parse a length typed by a user into decimal feet.

    Accepts ``10``, ``10.5``, ``10ft``, ``126 in``, ``10'``, ``10' 6"`` and
    ``6"``. Anything else returns None; there is no numeric fallback.
    """
    normalized = _normalize_quotes(text.strip().lower())
    if not normalized:
        return None

    match = BARE_NUMBER_PATTERN.match(normalized) or FEET_SUFFIX_PATTERN.match(normalized)
    if match:
        return float(match.group(1))

    match = INCHES_SUFFIX_PATTERN.match(normalized)
    if match:
        return float(match.group(1)) / 12

    if "'" in normalized or '"' in normalized:
        if not (FEET_PATTERN.search(normalized) or INCHES_PATTERN.search(normalized)):
            return None
        return feet_inches_to_feet(normalized)

    return None


def round_to_fraction(feet: float, fraction: int = 1) -> float:
    """Round decimal feet to the nearest 1/``fraction`` of an inch."""
    if fraction not in SUPPORTED_FRACTIONS:
        raise ValueError(
            f"fraction must be one of {SUPPORTED_FRACTIONS}, got {fraction}"
        )
    inches = feet * 12
    return _round_half_up(inches * fraction) / fraction / 12


def format_area(sqft: float) -> str:
    if sqft < 10:
        return f"{sqft:.1f} sq ft"
    return f"{_round_half_up(sqft)} sq ft"


def format_feet(feet: float, precision: int = 2) -> str:
    return f"{feet:.{precision}f}'"


def format_dimension(feet: float) -> str:
    """Display form of a length; currently feet-inches."""
    return feet_to_feet_inches(feet)
