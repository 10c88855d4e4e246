#!/usr/bin/env python3
"""
Convert fractions in CSV columns to decimals.

Reads a CSV file, replaces fractions such as "6-1/4 x 9-1/4" in the given
columns with decimals ("6.25 x 9.25"), and writes the result to a new CSV.

Usage:
    python convert_fractions_csv.py objects.csv --fields dimensions
    python convert_fractions_csv.py objects.csv --fields w h --targets width height --delete-sources
"""

import argparse
import logging
import pathlib
import sys

import pandas as pd

from fraction_utils import InvalidConfigurationError, ToDecimal
from fraction_utils.transforms import convert_dataframe

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Replace fractions in CSV columns with decimal values"
    )
    parser.add_argument("input", type=str, help="Path to the input CSV file")
    parser.add_argument(
        "--fields",
        nargs="+",
        required=True,
        help="Columns whose fractions should be converted",
    )
    parser.add_argument(
        "--targets",
        nargs="+",
        default=None,
        help="Columns to write converted values to (one per field)",
    )
    parser.add_argument(
        "--places",
        type=int,
        default=4,
        help="Number of decimal places to keep",
    )
    parser.add_argument(
        "--sep",
        action="append",
        default=None,
        help="Separator between a whole number and a fraction (repeatable, "
        "default: space and hyphen)",
    )
    parser.add_argument(
        "--delete-sources",
        action="store_true",
        help="Drop source columns that were written to a different target",
    )
    parser.add_argument(
        "--target-format",
        type=str,
        choices=["string", "float"],
        default="string",
        help="Write bare numbers as floats instead of strings",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV path (default: <input>_decimal.csv)",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main function to convert fractions in a CSV file."""
    args = parse_args(argv)

    options = {
        "fields": args.fields,
        "targets": args.targets,
        "places": args.places,
        "delete_sources": args.delete_sources,
        "target_format": args.target_format,
    }
    if args.sep:
        options["whole_fraction_sep"] = args.sep

    try:
        xform = ToDecimal(**options)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid options: {e}")
        return 1

    input_path = pathlib.Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    output_path = (
        pathlib.Path(args.output)
        if args.output
        else input_path.with_name(f"{input_path.stem}_decimal.csv")
    )

    # Read everything as text so "1/2" and "007" survive untouched
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False, na_values=[""])
    missing = [field for field in args.fields if field not in df.columns]
    if missing:
        logger.warning(f"Columns not found in {input_path.name}: {', '.join(missing)}")

    print(f"Converting fractions in {len(df)} rows of {input_path}...")
    converted = convert_dataframe(df, xform, show_progress=args.progress)
    converted.to_csv(output_path, index=False)

    print("Successfully converted fractions:")
    print(f"  - File: {output_path}")
    print(f"  - Rows: {len(converted)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
