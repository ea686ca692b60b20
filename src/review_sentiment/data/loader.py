"""Load delimited review datasets into DataFrames."""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from ..utils.logging import get_logger, json_log

log = get_logger(__name__)

REVIEW_COLUMN = 'Review'
SENTIMENT_COLUMN = 'Sentiment'


class TrainingDataError(ValueError):
    """Raised when a dataset cannot be used for training."""


def load_reviews(
    path: str | Path,
    separator: str = '\t',
    has_header: bool = False,
) -> pd.DataFrame:
    """
    Read a two-column review dataset.

    Each line holds the review text and its sentiment label split at
    ``separator``. No quoting is applied, so quote characters stay part of
    the review text.

    Args:
        path: Dataset file path.
        separator: Field separator.
        has_header: Skip the first row when True.

    Returns:
        DataFrame with ``Review`` and ``Sentiment`` string columns.

    Raises:
        FileNotFoundError: If the file does not exist.
        TrainingDataError: If the file contains no records, rows do not have
            exactly two fields, or a row has no sentiment label.
        pandas.errors.ParserError: If a later row has more fields than the first.
    """
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f'Dataset not found: {data_path}')

    # Without ``names`` the first row fixes the field count, so pandas never
    # folds an extra leading field into the index.
    try:
        df = pd.read_csv(
            data_path,
            sep=separator,
            header=0 if has_header else None,
            dtype=str,
            quoting=csv.QUOTE_NONE,
            keep_default_na=False,
            on_bad_lines='error',
        )
    except pd.errors.EmptyDataError as exc:
        raise TrainingDataError(f'Dataset is empty: {data_path}') from exc

    if df.empty:
        raise TrainingDataError(f'Dataset is empty: {data_path}')

    if df.shape[1] != 2:
        raise TrainingDataError(
            f'Expected 2 fields per row in {data_path}, found {df.shape[1]}'
        )
    df.columns = [REVIEW_COLUMN, SENTIMENT_COLUMN]

    missing = df[SENTIMENT_COLUMN].isna() | (df[SENTIMENT_COLUMN].str.strip() == '')
    if missing.any():
        first_row = int(missing.idxmax()) + 1
        raise TrainingDataError(
            f'{int(missing.sum())} row(s) without a sentiment label in {data_path} '
            f'(first at data row {first_row})'
        )

    log.info(
        json_log(
            'data.loaded',
            component='data.loader',
            path=str(data_path),
            rows=len(df),
            labels=label_vocabulary(df[SENTIMENT_COLUMN]),
        )
    )
    return df


def label_vocabulary(labels: pd.Series) -> list[str]:
    """Return the distinct labels in the order the classifier encodes them."""
    return sorted(labels.astype(str).unique().tolist())
