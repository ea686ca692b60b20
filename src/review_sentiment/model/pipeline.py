"""Build the untrained featurization + maximum-entropy pipeline."""

from __future__ import annotations

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import FeatureUnion, Pipeline

from ..config import PipelineConfig
from ..utils.logging import get_logger, json_log

log = get_logger(__name__)


FEATURIZE_STEP = 'featurize'
CLASSIFIER_STEP = 'maxent'


def _build_featurizer(config: PipelineConfig) -> FeatureUnion:
    """
    Word n-grams and character tri-grams, concatenated into one vector.

    Each block is TF-IDF weighted and L2-normalized on its own.
    """
    transformers = [
        (
            'words',
            TfidfVectorizer(
                lowercase=True,
                ngram_range=config.word_ngram_range,
                sublinear_tf=True,
            ),
        ),
        (
            'chars',
            TfidfVectorizer(
                lowercase=True,
                analyzer='char_wb',
                ngram_range=config.char_ngram_range,
                sublinear_tf=True,
            ),
        ),
    ]
    return FeatureUnion(transformers)


def _build_classifier(config: PipelineConfig) -> LogisticRegression:
    """
    Map L1/L2 weights onto scikit-learn's elastic-net parameterization.

    sklearn minimizes ``C * sum(loss) + l1_ratio * |w|_1 + (1 - l1_ratio) / 2 * |w|^2``;
    dividing ``sum(loss) + l1 * |w|_1 + l2 / 2 * |w|^2`` by ``l1 + l2`` gives
    ``C = 1 / (l1 + l2)`` and ``l1_ratio = l1 / (l1 + l2)``. The penalty kind
    follows from ``l1_ratio`` alone.
    """
    l1 = config.l1_regularization
    l2 = config.l2_regularization
    total = l1 + l2

    if l1 == 0:
        return LogisticRegression(
            C=1.0 / total,
            l1_ratio=0.0,
            solver='lbfgs',
            max_iter=config.max_iter,
        )

    return LogisticRegression(
        C=1.0 / total,
        l1_ratio=l1 / total,
        solver='saga',
        max_iter=config.max_iter,
    )


def build_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """
    Return the untrained review sentiment pipeline.

    Stages: featurize text, concatenate feature blocks, fit a multinomial
    logistic regression on the encoded label. The classifier encodes labels
    into keys (sorted vocabulary, exposed as ``classes_``) and decodes its
    predictions back into label strings.
    """
    cfg = config or PipelineConfig()
    log.debug(
        json_log(
            'pipeline.build',
            component='model.pipeline',
            l1=cfg.l1_regularization,
            l2=cfg.l2_regularization,
            word_ngram_range=cfg.word_ngram_range,
            char_ngram_range=cfg.char_ngram_range,
        )
    )
    return Pipeline(
        [
            (FEATURIZE_STEP, _build_featurizer(cfg)),
            (CLASSIFIER_STEP, _build_classifier(cfg)),
        ]
    )
