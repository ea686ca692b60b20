"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import Any


def json_log(message: str, **extra: Any) -> str:
    """Return a JSON-formatted log string."""
    payload = {'ts': time.time(), 'msg': message, **extra}
    return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Return a stdout logger emitting one JSON object per line.

    Modules log their events through :func:`json_log`: dataset loading
    (``data.loaded``), training (``train.start``/``train.completed``),
    artifact I/O (``artifact.saved``/``model.loaded``), prediction engine
    creation (``engine.created``) and CLI entry (``cli.train.start``/
    ``cli.predict.start``). Set ``REVIEW_SENTIMENT_DEBUG`` to also see
    ``pipeline.build``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)

    level = logging.DEBUG if os.getenv('REVIEW_SENTIMENT_DEBUG') else logging.INFO
    logger.setLevel(level)
    return logger
