"""Tests for batch readability features."""
import logging
import math

import polars as pl
import pytest

from textstatistics.data.features import (
    FEATURES_SCHEMA,
    build_features,
    build_features_file,
    read_texts,
)


@pytest.fixture
def texts_df(simple_text, golden_text):
    return pl.DataFrame({"id": ["simple", "golden", "empty"], "text": [simple_text, golden_text, ""]})


class TestBuildFeatures:
    """Scoring a frame of texts."""

    def test_schema(self, texts_df):
        features = build_features(texts_df)
        assert features.columns == list(FEATURES_SCHEMA)
        assert dict(features.schema) == FEATURES_SCHEMA

    def test_values(self, texts_df):
        features = build_features(texts_df)
        assert features["id"].to_list() == ["simple", "golden", "empty"]
        assert features["word_count"].to_list() == [9, 9, 0]
        assert features["flesch_kincaid_reading_ease"][0] == 98.9
        assert features["flesch_kincaid_reading_ease"][1] == -60.9
        assert features["long_word_count"][1] == 6

    def test_empty_text_gives_nan(self, texts_df):
        features = build_features(texts_df)
        assert math.isnan(features["flesch_kincaid_reading_ease"][2])

    def test_missing_id_column_uses_row_index(self, simple_text):
        features = build_features(pl.DataFrame({"text": [simple_text, simple_text]}))
        assert features["id"].to_list() == ["0", "1"]

    def test_custom_columns(self, simple_text):
        df = pl.DataFrame({"doc": [7], "body": [simple_text]})
        features = build_features(df, text_column="body", id_column="doc")
        assert features["id"].to_list() == ["7"]
        assert features["sentence_count"].to_list() == [2]

    def test_numeric_text_column_is_scored_as_text(self):
        """An all-numeric text column is read as strings instead of failing."""
        features = build_features(pl.DataFrame({"id": ["a", "b"], "text": [42, None]}))
        assert features["id"].to_list() == ["a", "b"]
        assert features["word_count"].to_list() == [1, 0]

    def test_progress_is_logged_at_info(self, caplog, simple_text):
        with caplog.at_level(logging.INFO, logger="textstatistics.data.features"):
            build_features(pl.DataFrame({"text": [simple_text]}))
        assert "Processed 1/1 rows" in caplog.text

    def test_missing_text_column(self):
        with pytest.raises(ValueError, match="Text column 'text' not found"):
            build_features(pl.DataFrame({"body": ["Hello."]}))


class TestBuildFeaturesFile:
    """Reading texts from disk and writing Parquet."""

    def test_csv_round_trip(self, tmp_path, texts_df):
        input_path = tmp_path / "texts.csv"
        output_path = tmp_path / "out" / "features.parquet"
        texts_df.write_csv(input_path)

        written = build_features_file(str(input_path), str(output_path))

        assert output_path.exists()
        stored = pl.read_parquet(output_path)
        assert stored["word_count"].to_list() == written["word_count"].to_list()
        assert stored["word_count"][0] == 9

    def test_parquet_input(self, tmp_path, texts_df):
        input_path = tmp_path / "texts.parquet"
        texts_df.write_parquet(input_path)

        written = build_features_file(str(input_path), str(tmp_path / "features.parquet"))
        assert len(written) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_texts(str(tmp_path / "missing.parquet"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "texts.txt"
        path.write_text("Hello.")
        with pytest.raises(ValueError, match="Unsupported dataset format"):
            read_texts(str(path))
