"""Configuration utilities for review_sentiment."""

from .model import (
    DEFAULT_DATA_PATH,
    DEFAULT_MODEL_PATH,
    AppConfig,
    DataConfig,
    ModelConfig,
    PipelineConfig,
    load_app_config,
)

__all__ = [
    'DEFAULT_DATA_PATH',
    'DEFAULT_MODEL_PATH',
    'AppConfig',
    'DataConfig',
    'ModelConfig',
    'PipelineConfig',
    'load_app_config',
]
