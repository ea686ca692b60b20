"""Persist and load the trained model artifact."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import joblib
from sklearn.pipeline import Pipeline

from ..utils.logging import get_logger, json_log

log = get_logger(__name__)

ARTIFACT_FORMAT = 'review-sentiment/1'


class ModelLoadError(RuntimeError):
    """Raised when model loading fails."""


@dataclass(frozen=True)
class ModelArtifact:
    """Container for a fitted pipeline, its input schema and metadata."""

    model: Pipeline
    labels: tuple[str, ...]
    schema: dict[str, Any]
    metadata: dict[str, Any]


def save_artifact(
    pipeline: Pipeline,
    path: str | Path,
    schema: dict[str, Any],
    metadata: dict[str, Any] | None = None,
) -> Path:
    """
    Write the fitted pipeline to a single joblib file, replacing any existing one.

    The bundle is dumped to a temporary file next to ``path`` and moved into
    place once complete.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    bundle = {
        'format': ARTIFACT_FORMAT,
        'pipeline': pipeline,
        'labels': [str(label) for label in pipeline.classes_],
        'schema': dict(schema),
        'metadata': dict(metadata or {}),
    }

    fd, tmp_name = tempfile.mkstemp(prefix=f'.{target.name}.', dir=target.parent)
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        joblib.dump(bundle, tmp_path, compress=3)
        tmp_path.chmod(_default_file_mode())
        os.replace(tmp_path, target)
    finally:
        tmp_path.unlink(missing_ok=True)

    log.info(
        json_log(
            'artifact.saved',
            component='model.artifact',
            path=str(target),
            bytes=target.stat().st_size,
        )
    )
    return target


def load_artifact(path: str | Path) -> ModelArtifact:
    """
    Load a model artifact written by :func:`save_artifact`.

    Raises:
        ModelLoadError: If the file is missing, corrupted, or not an artifact bundle.
    """
    artifact_path = Path(path)
    if not artifact_path.exists():
        raise ModelLoadError(f'Model file not found: {artifact_path}')

    try:
        bundle = joblib.load(artifact_path)
    except Exception as exc:
        raise ModelLoadError(f'Failed to load model: {exc}') from exc

    if not isinstance(bundle, dict) or bundle.get('format') != ARTIFACT_FORMAT:
        raise ModelLoadError(f'Not a review sentiment artifact: {artifact_path}')

    pipeline = bundle.get('pipeline')
    if not isinstance(pipeline, Pipeline):
        raise ModelLoadError(f'Artifact has no fitted pipeline: {artifact_path}')

    metadata = bundle.get('metadata') or {}
    log.info(
        json_log(
            'model.loaded',
            component='model.artifact',
            path=str(artifact_path),
            model_name=metadata.get('model_name', 'unknown'),
            trained_at=metadata.get('trained_at'),
        )
    )

    return ModelArtifact(
        model=pipeline,
        labels=tuple(bundle.get('labels') or ()),
        schema=bundle.get('schema') or {},
        metadata=metadata,
    )


def _default_file_mode() -> int:
    """Mode a plain ``open(path, 'w')`` would create under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
