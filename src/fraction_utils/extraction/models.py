import dataclasses
import functools
from fractions import Fraction
from typing import Optional

from fraction_utils.errors import InvalidArgumentError
from fraction_utils.extraction.number_utils import (
    _format_decimal,
    _parse_fraction,
    _round_half_up,
    _validate_places,
)


@functools.total_ordering
@dataclasses.dataclass(frozen=True)
class FractionMatch:
    """One fraction found in a source string, e.g. '1 1/2' or '3/4'.

    Matches may hold fractions that cannot be converted (like '1/0'); those
    are kept so callers can leave the original text in place.

    Attributes:
        fraction: The raw ``numerator/denominator`` text.
        position: Half-open span of the match in the original string,
            including any whole number and separator.
        whole: Whole number preceding the fraction, 0 when there is none.
    """

    fraction: str
    position: range
    whole: int = 0

    def __post_init__(self):
        if not isinstance(self.fraction, str):
            raise InvalidArgumentError("`fraction` must be a str")
        if not isinstance(self.whole, int) or isinstance(self.whole, bool):
            raise InvalidArgumentError("`whole` must be an int")
        if self.whole < 0:
            raise InvalidArgumentError("`whole` must not be negative")
        if not isinstance(self.position, range):
            raise InvalidArgumentError("`position` must be a range")

    def __lt__(self, other: "FractionMatch") -> bool:
        if not isinstance(other, FractionMatch):
            return NotImplemented
        return self.position.start < other.position.start

    @property
    def convertible(self) -> bool:
        """Whether the fraction has a usable (non-zero) denominator."""
        return self.value is not None

    @property
    def value(self) -> Optional[Fraction]:
        """Exact value of whole + fraction, or None if not convertible."""
        try:
            return self.whole + _parse_fraction(self.fraction)
        except (ValueError, ZeroDivisionError):
            return None

    def decimal(self, places: int = 4) -> Optional[str]:
        """Return the value rounded to ``places`` digits as a string.

        Examples:
            >>> FractionMatch("2/3", range(0, 3), whole=1).decimal()
            '1.6667'
            >>> FractionMatch("1/2", range(0, 3)).decimal()
            '0.5'
        """
        places = _validate_places(places)
        value = self.value
        if value is None:
            return None
        return _format_decimal(_round_half_up(value, places))

    def decimal_value(self) -> Optional[float]:
        """Return the unrounded value as a float, or None if not convertible."""
        value = self.value
        if value is None:
            return None
        return float(value)

    def replace_in(self, text: str, places: int = 4) -> str:
        """Return ``text`` with this match's span replaced by its decimal.

        The span is read against ``text`` as given, so it must be the
        string (or an unchanged prefix of the string) the match came from.
        """
        replacement = self.decimal(places)
        if replacement is None:
            return text
        return text[: self.position.start] + replacement + text[self.position.stop :]

    def to_dict(self) -> dict:
        return {"whole": self.whole, "fraction": self.fraction, "position": self.position}
