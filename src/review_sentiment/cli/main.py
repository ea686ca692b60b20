"""Command-line interface for review_sentiment."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from ..config import AppConfig, load_app_config
from ..model import EmptyCommentError, ModelLoadError, ReviewSentimentModel
from ..utils import get_logger, json_log

app = typer.Typer(help='Review sentiment binary classification example.')

log = get_logger(__name__)


def _resolve_path(value: Path | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser().resolve()


def _load_config(
    config: Path | None,
    input_path: Path | None,
    model_path: Path | None,
    separator: str | None,
    has_header: bool | None,
) -> AppConfig:
    cfg = load_app_config(config) if config is not None else AppConfig()

    data_overrides: dict[str, object] = {}
    if input_path is not None:
        data_overrides['path'] = _resolve_path(input_path)
    if separator is not None:
        data_overrides['separator'] = separator.replace('\\t', '\t')
    if has_header is not None:
        data_overrides['has_header'] = has_header
    if data_overrides:
        cfg = replace(cfg, data=replace(cfg.data, **data_overrides))

    if model_path is not None:
        cfg = replace(cfg, model=replace(cfg.model, path=_resolve_path(model_path)))
    return cfg


@app.command()
def run(
    train: Annotated[
        bool,
        typer.Option('--train', help='Train the model instead of classifying a comment.'),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            '--config',
            '-c',
            exists=True,
            readable=True,
            help='Path to model configuration YAML.',
        ),
    ] = None,
    input_path: Annotated[
        Path | None,
        typer.Option('--input', '-i', help='Training dataset override.'),
    ] = None,
    model_path: Annotated[
        Path | None,
        typer.Option('--model', '-m', help='Model artifact path override.'),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option('--separator', help='Dataset field separator (default: tab).'),
    ] = None,
    has_header: Annotated[
        bool | None,
        typer.Option('--has-header/--no-header', help='Whether the dataset has a header row.'),
    ] = None,
) -> None:
    """Train the sentiment model, or classify one comment read from stdin."""
    cfg = _load_config(config, input_path, model_path, separator, has_header)
    model = ReviewSentimentModel(cfg.model.path, cfg.pipeline)

    typer.echo('--- BINARY CLASSIFICATION EXAMPLE')

    if train:
        _train(model, cfg)
    else:
        _predict(model)


def _train(model: ReviewSentimentModel, cfg: AppConfig) -> None:
    log.info(
        json_log(
            'cli.train.start',
            component='cli',
            input=str(cfg.data.path),
            model=str(cfg.model.path),
        )
    )
    typer.echo('Training...')
    result = model.train(
        cfg.data.path,
        separator=cfg.data.separator,
        has_header=cfg.data.has_header,
    )
    typer.echo(f'Model trained. Artifact written to {result.artifact_path}')


def _predict(model: ReviewSentimentModel) -> None:
    typer.echo('Enter a comment to classify:')
    comment = sys.stdin.readline().rstrip('\r\n')
    log.info(json_log('cli.predict.start', component='cli', input_length=len(comment)))

    try:
        scores = model.predict_labels(comment)
    except (EmptyCommentError, ModelLoadError) as exc:
        typer.echo(f'Error: {exc}', err=True)
        raise typer.Exit(code=1) from exc

    for item in scores:
        typer.echo(f'{item.label}\t{item.score:.4f}')


def main() -> None:
    app()


if __name__ == '__main__':
    main()
