"""Model wrapper: train the review sentiment pipeline and score comments."""

from __future__ import annotations

import platform
import threading
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

import sklearn

from ..config import PipelineConfig
from ..data.loader import (
    REVIEW_COLUMN,
    SENTIMENT_COLUMN,
    TrainingDataError,
    label_vocabulary,
    load_reviews,
)
from ..utils.logging import get_logger, json_log
from .artifact import load_artifact, save_artifact
from .engine import PredictionEngine
from .pipeline import build_pipeline
from .schemas import LabelScore, ModelInput, ModelOutput, validate_comment

log = get_logger(__name__)

MODEL_NAME = 'review_sentiment_maxent'


@dataclass(frozen=True)
class TrainingResult:
    """Summary of a completed training run."""

    artifact_path: Path
    n_rows: int
    labels: tuple[str, ...]


class ReviewSentimentModel:
    """Owns the artifact path, trains the pipeline and serves predictions.

    The prediction engine is created on first use and cached. A successful
    :meth:`train` discards the cached engine so later predictions use the
    freshly written artifact.
    """

    def __init__(self, model_path: str | Path, config: PipelineConfig | None = None) -> None:
        self.model_path = Path(model_path)
        self.config = config or PipelineConfig()
        self._engine: PredictionEngine | None = None
        self._engine_lock = threading.Lock()

    def train(
        self,
        input_path: str | Path,
        separator: str = '\t',
        has_header: bool = False,
    ) -> TrainingResult:
        """Fit the pipeline on ``input_path`` and overwrite the artifact."""
        df = load_reviews(input_path, separator=separator, has_header=has_header)
        labels = label_vocabulary(df[SENTIMENT_COLUMN])
        if len(labels) < 2:
            raise TrainingDataError(
                f'Training data needs at least two distinct labels, found {labels}'
            )

        pipeline = build_pipeline(self.config)

        log.info(
            json_log(
                'train.start',
                component='model',
                input=str(input_path),
                rows=len(df),
                labels=labels,
            )
        )
        pipeline.fit(df[REVIEW_COLUMN], df[SENTIMENT_COLUMN])
        log.info(json_log('train.completed', component='model', input=str(input_path)))

        schema = {
            'columns': [REVIEW_COLUMN, SENTIMENT_COLUMN],
            'separator': separator,
            'has_header': has_header,
            'feature_column': self.config.feature_column,
            'label_column': self.config.label_column,
        }
        metadata = {
            'model_name': MODEL_NAME,
            'trained_at': datetime.now(UTC).isoformat(),
            'python_version': platform.python_version(),
            'sklearn_version': sklearn.__version__,
            'n_rows': len(df),
            'l1_regularization': self.config.l1_regularization,
            'l2_regularization': self.config.l2_regularization,
        }
        path = save_artifact(pipeline, self.model_path, schema=schema, metadata=metadata)

        with self._engine_lock:
            self._engine = None

        return TrainingResult(artifact_path=path, n_rows=len(df), labels=tuple(labels))

    @property
    def prediction_engine(self) -> PredictionEngine:
        """Engine for the artifact on disk, loaded on first access."""
        engine = self._engine
        if engine is not None:
            return engine
        with self._engine_lock:
            if self._engine is None:
                self._engine = self._create_prediction_engine()
            return self._engine

    def _create_prediction_engine(self) -> PredictionEngine:
        artifact = load_artifact(self.model_path)
        return PredictionEngine(artifact, label_column=self.config.label_column)

    def predict(self, text: str | None) -> ModelOutput:
        comment = validate_comment(text)
        return self.prediction_engine.predict(ModelInput(review=comment))

    def predict_labels(self, text: str | None) -> list[LabelScore]:
        """
        Score ``text`` against every known label.

        Returns:
            One ``LabelScore`` per label, highest score first. Equal scores
            keep label-key order.
        """
        comment = validate_comment(text)
        engine = self.prediction_engine
        result = engine.predict(ModelInput(review=comment))
        return sorted_label_scores(engine.labels, result.score)


def sorted_label_scores(labels: tuple[str, ...] | list[str], scores) -> list[LabelScore]:
    """Pair labels with scores by index and sort by descending score (stable)."""
    if len(labels) != len(scores):
        raise ValueError(f'Got {len(scores)} scores for {len(labels)} labels')
    pairs = [LabelScore(label=label, score=float(score)) for label, score in zip(labels, scores)]
    return sorted(pairs, key=lambda pair: pair.score, reverse=True)
