"""Typer CLI definition for embedmatch."""

import json
import logging
from pathlib import Path
from typing import Any

import typer

from .config import generate_config, get_config_path, load_config
from .embeddings.parser import parse_embedding, parse_embedding_list
from .engine import ComparisonEngine
from .errors import EmbeddingError, InvalidFormat

app = typer.Typer(help="Compare face embeddings and decide whether they match")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def read_embedding_arg(value: str) -> str:
    """Resolve a CLI embedding argument to JSON text.

    Args:
        value: Inline JSON text, or "@path" to read the text from a file

    Returns:
        The JSON text

    Raises:
        OSError: If the referenced file cannot be read
        InvalidFormat: If the referenced file is not UTF-8 text
    """
    if value.startswith("@"):
        path = Path(value[1:]).expanduser()
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormat(
                f"Embedding file is not valid UTF-8 text: {path}", original_error=e
            ) from e
    return value


def configure_logging(debug: bool, level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
    )


def _report_error(message: str, error: Exception, debug: bool) -> None:
    if debug:
        typer.echo(f"Debug - {message}: {error!r}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def compare(
    embedding1: str = typer.Argument(..., help="JSON array of numbers, or @file"),
    embedding2: str = typer.Argument(..., help="JSON array of numbers, or @file"),
    threshold: float | None = typer.Option(
        None,
        "-t",
        "--threshold",
        min=0.0,
        max=1.0,
        help="Similarity threshold for a match (0.0-1.0, from config if omitted)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show verbose error messages"),
) -> None:
    """Compare two embeddings and print the comparison result as JSON."""
    config = load_config()
    configure_logging(debug, config.logging.level)

    try:
        first = parse_embedding(read_embedding_arg(embedding1))
        second = parse_embedding(read_embedding_arg(embedding2))
        result = ComparisonEngine.from_config(config).compare(first, second, threshold)
    except (EmbeddingError, OSError) as e:
        _report_error("Comparison failed", e, debug)
        raise typer.Exit(1) from e

    _echo_json(result.to_dict())


@app.command()
def batch(
    query: str = typer.Argument(..., help="Query embedding: JSON array, or @file"),
    candidates: str = typer.Argument(
        ..., help="JSON array of stored embeddings, or @file"
    ),
    threshold: float | None = typer.Option(
        None,
        "-t",
        "--threshold",
        min=0.0,
        max=1.0,
        help="Similarity threshold for a match (0.0-1.0, from config if omitted)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show verbose error messages"),
) -> None:
    """Compare one embedding against many stored embeddings."""
    config = load_config()
    configure_logging(debug, config.logging.level)

    try:
        query_embedding = parse_embedding(read_embedding_arg(query))
        stored = parse_embedding_list(read_embedding_arg(candidates))
    except (EmbeddingError, OSError) as e:
        _report_error("Batch comparison failed", e, debug)
        raise typer.Exit(1) from e

    result = ComparisonEngine.from_config(config).compare_many(
        query_embedding, stored, threshold
    )
    _echo_json(result.to_dict())


@app.command("threshold")
def show_threshold() -> None:
    """Print the configured default similarity threshold."""
    typer.echo(str(load_config().matching.threshold))


@app.command("init-config")
def init_config(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        typer.echo(f"Config already exists at {config_path} (use --force)", err=True)
        raise typer.Exit(1)

    path = generate_config(config_path)
    typer.echo(f"Wrote default config to {path}")
