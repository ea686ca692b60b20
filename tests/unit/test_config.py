from __future__ import annotations

from pathlib import Path

import pytest

from review_sentiment.config import (
    DEFAULT_MODEL_PATH,
    AppConfig,
    PipelineConfig,
    load_app_config,
)


def test_defaults_match_compiled_constants() -> None:
    cfg = AppConfig()

    assert cfg.pipeline.l1_regularization == 0.03125
    assert cfg.pipeline.l2_regularization == 0.4058975
    assert cfg.pipeline.feature_column == 'Features'
    assert cfg.pipeline.label_column == 'SentimentKey'
    assert cfg.data.separator == '\t'
    assert cfg.data.has_header is False
    assert cfg.model.path == DEFAULT_MODEL_PATH


def test_load_app_config_resolves_relative_paths(tmp_path: Path) -> None:
    config_path = tmp_path / 'configs' / 'model.yaml'
    config_path.parent.mkdir()
    config_path.write_text(
        """
pipeline:
  l1_regularization: 0.0
  l2_regularization: 1.0
  word_ngram_range: [1, 3]
data:
  path: ../data/reviews.tsv
  separator: "|"
  has_header: true
model:
  path: ../out/model.joblib
""",
        encoding='utf-8',
    )

    cfg = load_app_config(config_path)

    assert cfg.pipeline.l1_regularization == 0.0
    assert cfg.pipeline.l2_regularization == 1.0
    assert cfg.pipeline.word_ngram_range == (1, 3)
    assert cfg.pipeline.char_ngram_range == (3, 3)
    assert cfg.data.path == (tmp_path / 'data' / 'reviews.tsv').resolve()
    assert cfg.data.separator == '|'
    assert cfg.data.has_header is True
    assert cfg.model.path == (tmp_path / 'out' / 'model.joblib').resolve()


def test_load_app_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / 'empty.yaml'
    config_path.write_text('', encoding='utf-8')

    cfg = load_app_config(config_path)

    assert cfg.pipeline == PipelineConfig()
    assert cfg.model.path == (tmp_path / DEFAULT_MODEL_PATH).resolve()


def test_load_app_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match='Config file not found'):
        load_app_config(tmp_path / 'missing.yaml')


def test_pipeline_config_rejects_zero_regularization() -> None:
    with pytest.raises(ValueError, match='must be positive'):
        PipelineConfig(l1_regularization=0.0, l2_regularization=0.0)


def test_pipeline_config_rejects_negative_weight() -> None:
    with pytest.raises(ValueError, match='non-negative'):
        PipelineConfig(l1_regularization=-0.1)


def test_load_app_config_rejects_bad_ngram_range(tmp_path: Path) -> None:
    config_path = tmp_path / 'bad.yaml'
    config_path.write_text('pipeline:\n  word_ngram_range: [2, 1]\n', encoding='utf-8')

    with pytest.raises(ValueError, match='Invalid n-gram range'):
        load_app_config(config_path)
