"""Record and DataFrame transforms."""

from .dataframe import convert_dataframe, process_records
from .to_decimal import ToDecimal

__all__ = [
    "ToDecimal",
    "convert_dataframe",
    "process_records",
]
