"""Fraction extraction from free-form text."""

import logging
import re
from typing import Iterable, List, Optional, Union

from fraction_utils.errors import InvalidConfigurationError
from fraction_utils.extraction.models import FractionMatch
from fraction_utils.extraction.number_utils import MAX_DIGITS

logger = logging.getLogger(__name__)

# --- Constants ---

DEFAULT_WHOLE_FRACTION_SEP = (" ", "-")

# ASCII digits only; other numeral systems are not handled
FRACTION_PATTERN = re.compile(r"[0-9]+/[0-9]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")

# --- Classes ---


class FractionExtractor:
    """Find fractions such as '1/2', '1 1/2' and '1-1/2' in a string.

    Args:
        whole_fraction_sep: Strings that may sit between a whole number and
            a fraction, marking them to be extracted together. With the
            default ``(" ", "-")`` both "1 1/2" and "1-1/2" are extracted with
            1 as the whole number and "1/2" as the fraction. With ``[" "]``,
            "1-1/2" yields only the bare fraction "1/2" (whole number 0).

    Examples:
        >>> extractor = FractionExtractor()
        >>> [m.to_dict() for m in extractor.scan("6-1/4 x 9")]
        [{'whole': 6, 'fraction': '1/4', 'position': range(0, 5)}]
    """

    def __init__(
        self, whole_fraction_sep: Union[str, Iterable[str]] = DEFAULT_WHOLE_FRACTION_SEP
    ):
        self.whole_fraction_sep = _normalize_separators(whole_fraction_sep)
        self._pattern = _compile_pattern(self.whole_fraction_sep)

    def __call__(self, text: Optional[str]) -> List[FractionMatch]:
        return self.scan(text)

    def __repr__(self) -> str:
        return f"FractionExtractor(whole_fraction_sep={list(self.whole_fraction_sep)!r})"

    def scan(self, text: Optional[str]) -> List[FractionMatch]:
        """Return all fractions in ``text``, ordered left to right.

        Matches never overlap. Fractions that cannot be converted (zero
        denominator, too many digits) are returned too, and a warning is
        logged for each. A whole number longer than MAX_DIGITS is not
        converted: that whole number and its fraction are left as text.

        Args:
            text: String to search. Empty strings and None yield no matches.

        Returns:
            List of FractionMatch objects with positions in ``text``.
        """
        if not text or not FRACTION_PATTERN.search(text):
            return []

        matches = []
        for found in self._pattern.finditer(text):
            whole = found.groupdict().get("whole")
            if whole is not None and len(whole) > MAX_DIGITS:
                logger.warning(
                    f"Unconvertible fraction: whole number has more than {MAX_DIGITS} digits"
                )
                continue
            matches.append(
                FractionMatch(
                    found.group("fraction"),
                    range(found.start(), found.end()),
                    whole=int(whole) if whole else 0,
                )
            )

        for match in matches:
            if not match.convertible:
                logger.warning(
                    f"Unconvertible fraction: {text[match.position.start:match.position.stop]}"
                )
        return matches


# --- Functions ---


def _compile_pattern(separators: tuple) -> re.Pattern:
    """Build the ``[<whole><sep>]<numerator>/<denominator>`` pattern.

    Matches only start at the beginning of a digit run, so "12/3" is never
    read as "2/3". Separators are tried longest first so a multi-character
    separator wins over its prefix.
    """
    fraction = r"(?P<fraction>[0-9]+/[0-9]+)"
    if not separators:
        return re.compile(r"(?<![0-9])" + fraction)

    alternatives = "|".join(
        re.escape(sep) for sep in sorted(separators, key=len, reverse=True)
    )
    return re.compile(rf"(?<![0-9])(?:(?P<whole>[0-9]+)(?:{alternatives}))?" + fraction)


def _normalize_separators(whole_fraction_sep) -> tuple:
    """Validate separators, accepting a single string or an iterable of them."""
    if isinstance(whole_fraction_sep, str):
        whole_fraction_sep = [whole_fraction_sep]
    try:
        separators = tuple(whole_fraction_sep)
    except TypeError:
        raise InvalidConfigurationError(
            "`whole_fraction_sep` must be a string or a list of strings"
        ) from None

    for sep in separators:
        if not isinstance(sep, str) or not sep:
            raise InvalidConfigurationError(
                f"Invalid whole/fraction separator: {sep!r}"
            )
        if DIGITS_PATTERN.search(sep) or "/" in sep:
            raise InvalidConfigurationError(
                f"Whole/fraction separator may not contain digits or '/': {sep!r}"
            )
    return separators
