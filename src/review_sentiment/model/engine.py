"""Single-item prediction engine bound to one loaded artifact."""

from __future__ import annotations

import threading

import numpy as np

from ..utils.logging import get_logger, json_log
from .artifact import ModelArtifact, ModelLoadError
from .pipeline import CLASSIFIER_STEP, FEATURIZE_STEP
from .schemas import ModelInput, ModelOutput

log = get_logger(__name__)


class PredictionEngine:
    """Score one review at a time against a fitted pipeline.

    Calls to :meth:`predict` are serialized, so one engine can be shared
    between threads.
    """

    def __init__(self, artifact: ModelArtifact, label_column: str = 'SentimentKey') -> None:
        self._artifact = artifact
        self._label_column = label_column
        self._lock = threading.Lock()
        try:
            self._featurizer = artifact.model.named_steps[FEATURIZE_STEP]
            self._classifier = artifact.model.named_steps[CLASSIFIER_STEP]
        except KeyError as exc:
            raise ModelLoadError(f'Pipeline step missing from artifact: {exc}') from exc
        self._labels = self._resolve_labels()
        log.info(
            json_log(
                'engine.created',
                component='model.engine',
                labels=list(self._labels),
            )
        )

    @property
    def labels(self) -> tuple[str, ...]:
        """Label vocabulary, ordered by label key."""
        return self._labels

    @property
    def artifact(self) -> ModelArtifact:
        return self._artifact

    def _resolve_labels(self) -> tuple[str, ...]:
        if self._artifact.labels:
            return tuple(self._artifact.labels)
        classes = getattr(self._classifier, 'classes_', None)
        if classes is None or len(classes) == 0:
            raise ModelLoadError(f"'{self._label_column}' column not found.")
        return tuple(str(label) for label in classes)

    def predict(self, model_input: ModelInput) -> ModelOutput:
        with self._lock:
            matrix = self._featurizer.transform([model_input.review])
            score = self._classifier.predict_proba(matrix)[0]

        review_features = matrix.toarray().ravel().astype(np.float32)
        predicted_key = int(np.argmax(score))
        sentiment_key = None
        if model_input.sentiment is not None and model_input.sentiment in self._labels:
            sentiment_key = self._labels.index(model_input.sentiment)

        return ModelOutput(
            review_features=review_features,
            sentiment_key=sentiment_key,
            features=review_features,
            predicted_label_key=predicted_key,
            predicted_label=self._labels[predicted_key],
            score=score.astype(np.float32),
        )
