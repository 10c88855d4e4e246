"""Apply record transforms to batches of records and pandas DataFrames."""

from typing import Callable, Iterable, List

import pandas as pd
from tqdm import tqdm

RecordTransform = Callable[[dict], dict]


def process_records(
    records: Iterable[dict],
    transform: RecordTransform,
    show_progress: bool = False,
) -> List[dict]:
    """Run ``transform`` over each record and collect the results.

    Args:
        records: Record dicts; each is mutated by the transform.
        transform: Callable taking and returning one record, e.g. ToDecimal.
        show_progress: Display a tqdm progress bar.

    Returns:
        The transformed records, in input order.
    """
    records = list(records)
    iterator = tqdm(records, desc="Converting fractions") if show_progress else records
    return [transform(record) for record in iterator]


def convert_dataframe(
    df: pd.DataFrame,
    transform: RecordTransform,
    show_progress: bool = False,
) -> pd.DataFrame:
    """Run a record transform over every row of a DataFrame.

    Missing values (NaN/None) reach the transform as None. Existing columns
    keep their order; columns added by the transform are appended and
    columns it removes are dropped, for empty frames too. The input
    DataFrame is not modified.

    Args:
        df: Source rows.
        transform: Callable taking and returning one record dict.
        show_progress: Display a tqdm progress bar.

    Returns:
        A new DataFrame with the transformed rows.
    """
    if df.empty:
        # Run the transform on an all-missing row to learn the output columns
        template = transform({column: None for column in df.columns})
        columns = _output_columns(df.columns, [template])
        return pd.DataFrame(columns=columns, index=df.index, dtype=object)

    records = [
        {column: (None if _is_missing(value) else value) for column, value in row.items()}
        for row in df.to_dict(orient="records")
    ]
    converted = process_records(records, transform, show_progress=show_progress)
    columns = _output_columns(df.columns, converted)
    return pd.DataFrame(converted, columns=columns, index=df.index)


def _output_columns(source_columns, records: List[dict]) -> list:
    """Source columns still present, in order, followed by any new ones."""
    columns = [column for column in source_columns if any(column in r for r in records)]
    for record in records:
        for column in record:
            if column not in columns:
                columns.append(column)
    return columns


def _is_missing(value) -> bool:
    return value is None or (pd.api.types.is_scalar(value) and pd.isna(value))
