"""Record shapes for model input and output."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

REVIEW_FEATURES_COLUMN = 'ReviewFeatures'


class EmptyCommentError(ValueError):
    """Raised when a comment to classify is missing or blank."""


@dataclass(frozen=True)
class ModelInput:
    """A labeled review row, or an unlabeled one at prediction time."""

    review: str
    sentiment: str | None = None


@dataclass(frozen=True)
class ModelOutput:
    """Scoring result for a single review."""

    review_features: np.ndarray
    sentiment_key: int | None
    features: np.ndarray
    predicted_label_key: int
    predicted_label: str
    score: np.ndarray


@dataclass(frozen=True)
class LabelScore:
    label: str
    score: float


def validate_comment(text: str | None) -> str:
    """Return ``text`` unchanged, or raise if it is missing or blank."""
    if text is None or not text.strip():
        raise EmptyCommentError('Comment must be a non-empty string')
    return text
