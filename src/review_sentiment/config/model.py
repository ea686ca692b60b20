"""Config models and loaders for training and prediction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_DATA_PATH = Path('InputData/yelp_labelled.txt')
DEFAULT_MODEL_PATH = Path('Model.joblib')


@dataclass(frozen=True)
class PipelineConfig:
    l1_regularization: float = 0.03125
    l2_regularization: float = 0.4058975
    feature_column: str = 'Features'
    label_column: str = 'SentimentKey'
    word_ngram_range: tuple[int, int] = (1, 2)
    char_ngram_range: tuple[int, int] = (3, 3)
    max_iter: int = 1000

    def __post_init__(self) -> None:
        if self.l1_regularization < 0 or self.l2_regularization < 0:
            raise ValueError('regularization weights must be non-negative')
        if self.l1_regularization + self.l2_regularization <= 0:
            raise ValueError('l1_regularization + l2_regularization must be positive')


@dataclass(frozen=True)
class DataConfig:
    path: Path = DEFAULT_DATA_PATH
    separator: str = '\t'
    has_header: bool = False


@dataclass(frozen=True)
class ModelConfig:
    path: Path = DEFAULT_MODEL_PATH


@dataclass(frozen=True)
class AppConfig:
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    data: DataConfig = field(default_factory=DataConfig)
    model: ModelConfig = field(default_factory=ModelConfig)


def load_app_config(config_path: str | Path) -> AppConfig:
    """Load an application config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    base_dir = cfg_path.parent

    pipeline_section = data.get('pipeline') or {}
    data_section = data.get('data') or {}
    model_section = data.get('model') or {}

    defaults = PipelineConfig()
    pipeline = PipelineConfig(
        l1_regularization=float(
            pipeline_section.get('l1_regularization', defaults.l1_regularization)
        ),
        l2_regularization=float(
            pipeline_section.get('l2_regularization', defaults.l2_regularization)
        ),
        feature_column=pipeline_section.get('feature_column', defaults.feature_column),
        label_column=pipeline_section.get('label_column', defaults.label_column),
        word_ngram_range=_ensure_range(
            pipeline_section.get('word_ngram_range', defaults.word_ngram_range)
        ),
        char_ngram_range=_ensure_range(
            pipeline_section.get('char_ngram_range', defaults.char_ngram_range)
        ),
        max_iter=int(pipeline_section.get('max_iter', defaults.max_iter)),
    )

    data_cfg = DataConfig(
        path=_resolve_path(base_dir, data_section.get('path', DEFAULT_DATA_PATH)),
        separator=data_section.get('separator', '\t'),
        has_header=bool(data_section.get('has_header', False)),
    )

    model = ModelConfig(
        path=_resolve_path(base_dir, model_section.get('path', DEFAULT_MODEL_PATH)),
    )

    return AppConfig(pipeline=pipeline, data=data_cfg, model=model)


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _ensure_range(value: list[int] | tuple[int, int]) -> tuple[int, int]:
    low, high = (int(v) for v in value)
    if low < 1 or high < low:
        raise ValueError(f'Invalid n-gram range: {value}')
    return (low, high)
