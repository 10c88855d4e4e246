"""Record transform converting fractions in field values to decimals."""

import re
from typing import Iterable, List, Optional, Union

from fraction_utils.errors import InvalidConfigurationError
from fraction_utils.extraction.parsing import (
    DEFAULT_WHOLE_FRACTION_SEP,
    FractionExtractor,
)
from fraction_utils.extraction.replacement import DecimalReplacer

TARGET_FORMATS = ("string", "float")

# A converted value that is nothing but a decimal number
FLOATABLE_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

FieldNames = Union[str, Iterable[str]]


class ToDecimal:
    """Convert fractions like "1 1/4" in record fields to decimals like "1.25".

    Records are mappings of field name to value (a string or None). Only the
    configured fields are read, and only their targets are written.

    Args:
        fields: Source field name, or list of names. Without ``targets`` the
            converted values are written back into these fields.
        targets: Target field name(s). If given, there must be one target per
            source field; a target may equal its source.
        places: Number of decimal places to keep.
        whole_fraction_sep: Separators allowed between a whole number and a
            fraction. See FractionExtractor.
        delete_sources: Remove source fields once written to a different
            target. Has no effect without ``targets``.
        target_format: "string" (the usual case) or "float". With "float", a
            converted value that is a bare number is written as a float; use
            it only when fields hold a single fraction each.

    Examples:
        >>> xform = ToDecimal(fields="dim")
        >>> xform.process({"dim": "6-1/4 x 9-1/4"})
        {'dim': '6.25 x 9.25'}
        >>> xform = ToDecimal(fields=["w", "h"], targets=["width", "height"])
        >>> xform.process({"w": "8 1/2", "h": "11"})
        {'w': '8 1/2', 'h': '11', 'width': '8.5', 'height': '11'}
    """

    def __init__(
        self,
        fields: FieldNames,
        targets: Optional[FieldNames] = None,
        places: int = 4,
        whole_fraction_sep: FieldNames = DEFAULT_WHOLE_FRACTION_SEP,
        delete_sources: bool = False,
        target_format: str = "string",
    ):
        self.fields = _as_field_list(fields, "fields")
        if not self.fields:
            raise InvalidConfigurationError("At least one field is required")

        self.targets = _as_field_list(targets, "targets") if targets is not None else None
        if self.targets is not None and len(self.targets) != len(self.fields):
            raise InvalidConfigurationError(
                f"Got {len(self.fields)} fields but {len(self.targets)} targets; "
                "give one target per field"
            )

        if target_format not in TARGET_FORMATS:
            raise InvalidConfigurationError(
                f"`target_format` must be one of {TARGET_FORMATS}, got {target_format!r}"
            )

        self.target_format = target_format
        self.delete_sources = bool(delete_sources)
        self.replacer = DecimalReplacer(places)
        self.extractor = FractionExtractor(whole_fraction_sep=whole_fraction_sep)

    @property
    def places(self) -> int:
        return self.replacer.places

    def __call__(self, record: dict) -> dict:
        return self.process(record)

    def process(self, record: dict) -> dict:
        """Convert the configured fields of ``record`` in place and return it."""
        for field, target in zip(self.fields, self.target_fields):
            record[target] = self._convert(record.get(field))

        if self.delete_sources and self.targets is not None:
            for field, target in zip(self.fields, self.targets):
                if target != field:
                    record.pop(field, None)
        return record

    @property
    def target_fields(self) -> List[str]:
        return self.targets if self.targets is not None else self.fields

    def _convert(self, value):
        if not value or not isinstance(value, str):
            return value

        matches = self.extractor.scan(value)
        if not matches:
            return value

        replaced = self.replacer.apply(value, matches)
        return self._format(replaced)

    def _format(self, value: str):
        if self.target_format == "float" and FLOATABLE_PATTERN.fullmatch(value):
            return float(value)
        return value


def _as_field_list(names: FieldNames, option: str) -> List[str]:
    if isinstance(names, str):
        return [names]
    try:
        names = list(names)
    except TypeError:
        raise InvalidConfigurationError(
            f"`{option}` must be a field name or a list of field names"
        ) from None
    for name in names:
        if not isinstance(name, str) or not name:
            raise InvalidConfigurationError(f"Invalid field name in `{option}`: {name!r}")
    return names
