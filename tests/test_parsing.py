import logging
import time

import pytest

from fraction_utils.errors import InvalidConfigurationError
from fraction_utils.extraction.models import FractionMatch
from fraction_utils.extraction.number_utils import MAX_DIGITS
from fraction_utils.extraction.parsing import FractionExtractor


def fraction(fraction, start, stop, whole=0):
    return FractionMatch(fraction=fraction, position=range(start, stop), whole=whole)


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "2/3 x 9-7/8 x 1/4, 20, 3 3/4",
            [
                fraction("2/3", 0, 3),
                fraction("7/8", 6, 11, whole=9),
                fraction("1/4", 14, 17),
                fraction("3/4", 23, 28, whole=3),
            ],
        ),
        (
            "6-1/2 x 9-1/4 and height unknown",
            [fraction("1/2", 0, 5, whole=6), fraction("1/4", 8, 13, whole=9)],
        ),
        ("6-1/4 x 9-1/4", [fraction("1/4", 0, 5, whole=6), fraction("1/4", 8, 13, whole=9)]),
        ("10 5/8x13", [fraction("5/8", 0, 6, whole=10)]),
        ("123", []),
        ("measures 1/4ft", [fraction("1/4", 9, 12)]),
        ("7/16-1/4", [fraction("7/16", 0, 4), fraction("1/4", 5, 8)]),
        ("12 3 4/5", [fraction("4/5", 3, 8, whole=3)]),
        ("1/x 3/4", [fraction("3/4", 4, 7)]),
    ],
)
def test_scan_with_defaults(text, expected):
    assert FractionExtractor().scan(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "2/3 x 9-7/8 x 1/4, 20, 3 3/4",
            [
                fraction("2/3", 0, 3),
                fraction("7/8", 8, 11),
                fraction("1/4", 14, 17),
                fraction("3/4", 23, 28, whole=3),
            ],
        ),
        (
            "6-2/3 x 9-1/4 and height unknown",
            [fraction("2/3", 2, 5), fraction("1/4", 10, 13)],
        ),
        ("123", []),
        ("measures 1/4ft", [fraction("1/4", 9, 12)]),
        ("7/16-1/4", [fraction("7/16", 0, 4), fraction("1/4", 5, 8)]),
    ],
)
def test_scan_with_space_separator_only(text, expected):
    assert FractionExtractor(whole_fraction_sep=[" "]).scan(text) == expected


def test_scan_with_multi_character_separator():
    extractor = FractionExtractor(whole_fraction_sep=[" and ", " "])
    assert extractor.scan("2 and 1/2 in") == [fraction("1/2", 0, 9, whole=2)]


def test_scan_with_no_separators():
    extractor = FractionExtractor(whole_fraction_sep=[])
    assert extractor.scan("1 1/2") == [fraction("1/2", 2, 5)]


@pytest.mark.parametrize("text", [None, "", "foo", "no fractions 1 2 3", "1/", "/2", "½ cup"])
def test_scan_without_fractions(text):
    assert FractionExtractor().scan(text) == []


def test_scan_returns_left_to_right_non_overlapping():
    matches = FractionExtractor().scan("1/2 1/3 1 1/4 1-1/5 1/6")
    assert matches == sorted(matches)
    for left, right in zip(matches, matches[1:]):
        assert left.position.stop <= right.position.start


def test_scan_is_deterministic():
    extractor = FractionExtractor()
    text = "2/3 x 9-7/8 x 1/4, 20, 3 3/4"
    assert extractor.scan(text) == extractor.scan(text)


def test_scan_ignores_non_ascii_digits():
    assert FractionExtractor().scan("١/٢ and 1/2") == [fraction("1/2", 8, 11)]


def test_scan_unconvertible_fraction_logs_warning(caplog):
    """Test that unconvertible fractions are returned and reported."""
    with caplog.at_level(logging.WARNING, logger="fraction_utils.extraction.parsing"):
        result = FractionExtractor().scan("copy 1/0")

    assert result == [fraction("1/0", 5, 8)]
    assert "Unconvertible fraction: 1/0" in caplog.text


def test_scan_long_text_is_linear():
    """Test that long runs of digits and separators scan in one pass."""
    text = "1 " * 40000 + "1/2"
    start = time.perf_counter()
    result = FractionExtractor().scan(text)
    elapsed = time.perf_counter() - start

    assert result == [fraction("1/2", 79998, 80003, whole=1)]
    assert elapsed < 2


def test_scan_many_fractions():
    text = "1/2 " * 20000
    result = FractionExtractor(whole_fraction_sep=[]).scan(text)
    assert len(result) == 20000
    assert result[-1] == fraction("1/2", 79996, 79999)


def test_scan_skips_oversized_whole_number(caplog):
    """Test that a whole number too long to convert leaves the expression as text."""
    text = "9" * (MAX_DIGITS + 1) + " 1/2 and 1/4"
    with caplog.at_level(logging.WARNING, logger="fraction_utils.extraction.parsing"):
        result = FractionExtractor().scan(text)

    assert result == [fraction("1/4", len(text) - 3, len(text))]
    assert f"more than {MAX_DIGITS} digits" in caplog.text


def test_scan_oversized_fraction_is_unconvertible(caplog):
    text = "1/" + "3" * (MAX_DIGITS + 1)
    with caplog.at_level(logging.WARNING, logger="fraction_utils.extraction.parsing"):
        result = FractionExtractor().scan(text)

    assert result == [fraction(text, 0, len(text))]
    assert not result[0].convertible
    assert "Unconvertible fraction" in caplog.text


def test_extractor_is_callable():
    assert FractionExtractor()("1/2") == [fraction("1/2", 0, 3)]


def test_single_string_separator():
    extractor = FractionExtractor(whole_fraction_sep="-")
    assert extractor.whole_fraction_sep == ("-",)


@pytest.mark.parametrize("separators", [[""], [None], ["1"], ["/"], 5])
def test_invalid_separators(separators):
    with pytest.raises(InvalidConfigurationError):
        FractionExtractor(whole_fraction_sep=separators)
