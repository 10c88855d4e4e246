"""Splice decimal values back into text in place of extracted fractions."""

from typing import Iterable, Optional

from fraction_utils.extraction.models import FractionMatch
from fraction_utils.extraction.number_utils import _validate_places
from fraction_utils.extraction.parsing import FractionExtractor


class DecimalReplacer:
    """Replace each convertible fraction in a string with its decimal.

    All match positions refer to the original string, so replacements are
    applied from right to left: replacing a span never moves the spans to
    its left, whatever the length of the decimal text.

    Args:
        places: Default number of decimal places to keep.
    """

    def __init__(self, places: int = 4):
        self.places = _validate_places(places)

    def apply(
        self,
        text: str,
        matches: Iterable[FractionMatch],
        places: Optional[int] = None,
    ) -> str:
        """Return ``text`` with every convertible match replaced.

        Args:
            text: The string the matches were extracted from.
            matches: Matches from a single scan of ``text``, in any order.
            places: Decimal places, overriding the replacer default.

        Returns:
            The rewritten string. Non-convertible matches are left as they are.
        """
        places = self.places if places is None else _validate_places(places)
        result = text
        for match in sorted(matches, reverse=True):
            result = match.replace_in(result, places)
        return result


def replace_fractions(
    text: Optional[str],
    extractor: Optional[FractionExtractor] = None,
    places: int = 4,
) -> Optional[str]:
    """Scan ``text`` for fractions and replace them with decimals.

    Examples:
        >>> replace_fractions("6-1/4 x 9-1/4")
        '6.25 x 9.25'
        >>> replace_fractions("about 1/0 inch")
        'about 1/0 inch'
    """
    if not text:
        return text
    extractor = extractor or FractionExtractor()
    matches = extractor.scan(text)
    if not matches:
        return text
    return DecimalReplacer(places).apply(text, matches)
