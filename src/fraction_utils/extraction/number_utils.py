import math
from decimal import Decimal
from fractions import Fraction

from fraction_utils.errors import InvalidConfigurationError

# Longest digit run treated as a number. Kept under the interpreter's default
# int/str conversion limit (4300 digits); longer runs are left as text.
MAX_DIGITS = 4000


def _is_integer(text: str) -> bool:
    """Check if a string is a run of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Fraction:
    """Parse a fraction string (e.g., '1/2') into an exact Fraction.

    Raises:
        ValueError: If the text is not shaped like ``numerator/denominator``
            or either part is longer than MAX_DIGITS.
        ZeroDivisionError: If the denominator is zero.
    """
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    if len(numerator_str) > MAX_DIGITS or len(denominator_str) > MAX_DIGITS:
        raise ValueError(f"Fraction has more than {MAX_DIGITS} digits")

    denominator = int(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return Fraction(int(numerator_str), denominator)


def _round_half_up(value: Fraction, places: int) -> Decimal:
    """Round an exact value to ``places`` decimal digits, ties away from zero.

    The rounding happens on the rational value itself, so repeating
    fractions such as 2/3 never pick up binary floating point error.
    """
    scale = 10**places
    scaled = abs(value) * scale
    rounded = math.floor(scaled + Fraction(1, 2))
    if value < 0:
        rounded = -rounded
    return Decimal(rounded).scaleb(-places)


def _format_decimal(value: Decimal) -> str:
    """Format a Decimal like a float literal: '6.25', '0.5', '2.0'."""
    text = f"{value.normalize():f}"
    if "." not in text:
        text += ".0"
    return text


def _validate_places(places) -> int:
    """Check that ``places`` is a usable number of decimal places."""
    if not isinstance(places, int) or isinstance(places, bool) or places < 0:
        raise InvalidConfigurationError(
            f"`places` must be a non-negative int, got {places!r}"
        )
    return places
