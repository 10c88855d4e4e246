"""Fraction Utils - Convert fractions embedded in text fields to decimals."""

__version__ = "0.1.0"

from . import extraction, transforms
from .errors import InvalidArgumentError, InvalidConfigurationError
from .extraction import DecimalReplacer, FractionExtractor, FractionMatch
from .transforms import ToDecimal

__all__ = [
    "extraction",
    "transforms",
    "FractionMatch",
    "FractionExtractor",
    "DecimalReplacer",
    "ToDecimal",
    "InvalidConfigurationError",
    "InvalidArgumentError",
]
