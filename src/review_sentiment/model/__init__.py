"""Review sentiment model: pipeline, artifact, engine and wrapper."""

from .artifact import ModelArtifact, ModelLoadError, load_artifact, save_artifact
from .engine import PredictionEngine
from .pipeline import build_pipeline
from .review_model import ReviewSentimentModel, TrainingResult, sorted_label_scores
from .schemas import (
    EmptyCommentError,
    LabelScore,
    ModelInput,
    ModelOutput,
    validate_comment,
)

__all__ = [
    'ModelArtifact',
    'ModelLoadError',
    'load_artifact',
    'save_artifact',
    'PredictionEngine',
    'build_pipeline',
    'ReviewSentimentModel',
    'TrainingResult',
    'sorted_label_scores',
    'EmptyCommentError',
    'LabelScore',
    'ModelInput',
    'ModelOutput',
    'validate_comment',
]
