"""Shared fixtures for review_sentiment tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

REVIEW_ROWS = [
    ('great food and friendly staff', '1'),
    ('amazing service, loved it', '1'),
    ('the best burger in town', '1'),
    ('wonderful place, highly recommended', '1'),
    ('terrible food and rude staff', '0'),
    ('awful service, never again', '0'),
    ('the worst burger I ever had', '0'),
    ('disgusting place, not recommended', '0'),
]

DatasetWriter = Callable[..., Path]


def _write_dataset(
    path: Path,
    rows: Sequence[tuple[str, str]],
    separator: str = '\t',
    header: str | None = None,
) -> Path:
    lines = [header] if header else []
    lines.extend(f'{text}{separator}{label}' for text, label in rows)
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def review_rows() -> list[tuple[str, str]]:
    return list(REVIEW_ROWS)


@pytest.fixture
def make_dataset(tmp_path: Path) -> DatasetWriter:
    """Return a helper writing rows to ``tmp_path/<name>``."""

    def _make(name: str, rows, separator: str = '\t', header: str | None = None) -> Path:
        return _write_dataset(tmp_path / name, rows, separator=separator, header=header)

    return _make


@pytest.fixture
def toy_dataset(make_dataset: DatasetWriter) -> Path:
    return make_dataset('toy.txt', [('great service', '1'), ('terrible experience', '0')])


@pytest.fixture
def reviews_dataset(make_dataset: DatasetWriter) -> Path:
    return make_dataset('reviews.txt', REVIEW_ROWS)
