"""Fraction extraction and decimal replacement utilities."""

from .models import FractionMatch
from .parsing import DEFAULT_WHOLE_FRACTION_SEP, FractionExtractor
from .replacement import DecimalReplacer, replace_fractions

__all__ = [
    "FractionMatch",
    "FractionExtractor",
    "DEFAULT_WHOLE_FRACTION_SEP",
    "DecimalReplacer",
    "replace_fractions",
]
