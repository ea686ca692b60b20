"""Dataset loading for review_sentiment."""

from .loader import (
    REVIEW_COLUMN,
    SENTIMENT_COLUMN,
    TrainingDataError,
    label_vocabulary,
    load_reviews,
)

__all__ = [
    'REVIEW_COLUMN',
    'SENTIMENT_COLUMN',
    'TrainingDataError',
    'label_vocabulary',
    'load_reviews',
]
