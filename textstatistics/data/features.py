"""Batch readability features for text datasets.

Reads a table of texts (Parquet or CSV), computes a ReadabilityReport for
every row and stores the numeric results in a derived features dataset.
The features dataset is fully regenerable from its input.
"""

import logging
from pathlib import Path
from typing import Optional

import polars as pl

from textstatistics.text.scoring import ReadabilityScorer

logger = logging.getLogger(__name__)

DEFAULT_TEXT_COLUMN = "text"
DEFAULT_ID_COLUMN = "id"

FEATURES_SCHEMA = {
    "id": pl.String,
    "word_count": pl.Int64,
    "sentence_count": pl.Int64,
    "letter_count": pl.Int64,
    "syllable_count": pl.Int64,
    "long_word_count": pl.Int64,
    "average_words_per_sentence": pl.Float64,
    "average_syllables_per_word": pl.Float64,
    "percentage_long_words": pl.Float64,
    "flesch_kincaid_reading_ease": pl.Float64,
    "flesch_kincaid_grade_level": pl.Float64,
    "gunning_fog_score": pl.Float64,
    "coleman_liau_index": pl.Float64,
    "smog_index": pl.Float64,
    "automated_readability_index": pl.Float64,
    "average_grade_level": pl.Float64,
}

_READERS = {
    ".parquet": pl.read_parquet,
    ".csv": pl.read_csv,
}


def compute_features_for_row(
    row: dict,
    scorer: ReadabilityScorer,
    text_column: str = DEFAULT_TEXT_COLUMN,
    id_column: str = DEFAULT_ID_COLUMN,
) -> dict:
    """
    Compute readability features for a single row.

    Args:
        row: Dictionary with at least the text column
        scorer: Scorer used to compute the report
        text_column: Name of the column holding the text
        id_column: Name of the column holding the row identifier

    Returns:
        Dictionary with one entry per FEATURES_SCHEMA column. Rows with
        empty text get zero counts and NaN scores.
    """
    report = scorer.report(row.get(text_column) or "")
    features = report.to_dict()
    features.pop("reading_ease_band")

    row_id = row.get(id_column)
    features["id"] = None if row_id is None else str(row_id)
    return features


def build_features(
    df: pl.DataFrame,
    text_column: str = DEFAULT_TEXT_COLUMN,
    id_column: str = DEFAULT_ID_COLUMN,
    scorer: Optional[ReadabilityScorer] = None,
) -> pl.DataFrame:
    """
    Build the features dataset for a frame of texts.

    Args:
        df: Input frame containing the text column
        text_column: Name of the column holding the text
        id_column: Name of the column holding the row identifier; the row
            index is used when the column is missing
        scorer: Optional scorer, defaults to a fresh ReadabilityScorer

    Returns:
        DataFrame with FEATURES_SCHEMA, one row per input row

    Raises:
        ValueError: If the text column is missing
    """
    if text_column not in df.columns:
        raise ValueError(f"Text column '{text_column}' not found in dataset")

    df = df.with_columns(pl.col(text_column).cast(pl.String))

    if id_column not in df.columns:
        df = df.with_row_index(id_column)

    scorer = scorer or ReadabilityScorer()
    total_rows = len(df)
    logger.info(f"Computing readability features for {total_rows} rows")

    features_records = []
    for idx, row in enumerate(df.iter_rows(named=True), start=1):
        features_records.append(compute_features_for_row(row, scorer, text_column, id_column))

        if idx % 100 == 0 or idx == total_rows:
            logger.info(f"Processed {idx}/{total_rows} rows")

    features_df = pl.DataFrame(features_records, schema=FEATURES_SCHEMA)
    return features_df.select(list(FEATURES_SCHEMA))


def read_texts(input_path: str) -> pl.DataFrame:
    """
    Read a text dataset from Parquet or CSV.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file extension is not supported
    """
    filepath = Path(input_path)
    if not filepath.exists():
        raise FileNotFoundError(f"Dataset file not found: {input_path}")

    reader = _READERS.get(filepath.suffix.lower())
    if reader is None:
        supported = ", ".join(sorted(_READERS))
        raise ValueError(f"Unsupported dataset format '{filepath.suffix}' (expected {supported})")

    return reader(filepath)


def build_features_file(
    input_path: str,
    output_path: str,
    text_column: str = DEFAULT_TEXT_COLUMN,
    id_column: str = DEFAULT_ID_COLUMN,
) -> pl.DataFrame:
    """
    Build the features dataset from a file and write it to Parquet.

    Args:
        input_path: Path to a Parquet or CSV file of texts
        output_path: Path where the features dataset will be written
        text_column: Name of the column holding the text
        id_column: Name of the column holding the row identifier

    Returns:
        The features DataFrame that was written
    """
    logger.info(f"Reading text dataset: {input_path}")
    texts_df = read_texts(input_path)

    if len(texts_df) == 0:
        logger.warning("No rows found in the dataset")

    features_df = build_features(texts_df, text_column, id_column)

    output_filepath = Path(output_path)
    output_filepath.parent.mkdir(parents=True, exist_ok=True)
    features_df.write_parquet(output_filepath)
    logger.info(f"Wrote features dataset with {len(features_df)} rows: {output_path}")

    return features_df
