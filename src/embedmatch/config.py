"""Configuration management for embedmatch.

Loads configuration from ~/.config/embedmatch/config.toml, or the file
named by EMBEDMATCH_CONFIG. Priority chain: CLI flags > env vars > config
file > built-in defaults.
"""

import logging
import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .embeddings.models import EMBEDDING_DIM

DEFAULT_SIMILARITY_THRESHOLD = 0.6
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_CONFIG = """\
# embedmatch configuration

[matching]
# Cosine similarity at or above which two embeddings are a match (0.0-1.0)
threshold = 0.6

[embedding]
# Dimension of embeddings produced by the inference service.
# Comparisons only require both vectors to have equal length.
dimension = 512

[logging]
# DEBUG, INFO, WARNING or ERROR
level = "WARNING"

# Environment overrides:
#   EMBEDMATCH_SIMILARITY_THRESHOLD
#   EMBEDMATCH_EMBEDDING_DIM
#   EMBEDMATCH_LOG_LEVEL
"""


def get_config_path() -> Path:
    """Return the config file path, honouring EMBEDMATCH_CONFIG."""
    override = os.getenv("EMBEDMATCH_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "embedmatch" / "config.toml"


@dataclass(frozen=True)
class MatchingConfig:
    """Match decision configuration."""

    threshold: float


@dataclass(frozen=True)
class EmbeddingConfig:
    """Embedding shape configuration."""

    dimension: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration for the CLI."""

    level: str


@dataclass(frozen=True)
class EmbedmatchConfig:
    """Top-level embedmatch configuration."""

    matching: MatchingConfig
    embedding: EmbeddingConfig
    logging: LoggingConfig


_cached_config: EmbedmatchConfig | None = None


def generate_config(path: Path | None = None) -> Path:
    """Write the default config file and return its path."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG)
    return config_path


def reset_config() -> None:
    """Drop the cached configuration so the next load re-reads it."""
    global _cached_config
    _cached_config = None


def _fail(errors: list[str], config_path: Path) -> None:
    print(f"Invalid config values: {', '.join(errors)}", file=sys.stderr)
    print(f"Edit {config_path} or delete it to regenerate.", file=sys.stderr)
    raise SystemExit(1)


def load_config() -> EmbedmatchConfig:
    """Load configuration from config file with env var overrides.

    A missing config file is not an error: built-in defaults are used.

    Returns:
        Loaded and validated EmbedmatchConfig.

    Raises:
        SystemExit: If the config file is unreadable or a value is invalid.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    config_path = get_config_path()
    data: dict = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            _fail([f"malformed TOML ({e})"], config_path)
        except (OSError, UnicodeDecodeError) as e:
            _fail([f"unreadable config file ({e})"], config_path)

    matching = data.get("matching", {})
    embedding = data.get("embedding", {})
    logging_cfg = data.get("logging", {})

    # Env vars override config file values
    threshold_str = os.getenv(
        "EMBEDMATCH_SIMILARITY_THRESHOLD",
        str(matching.get("threshold", DEFAULT_SIMILARITY_THRESHOLD)),
    )
    dimension_str = os.getenv(
        "EMBEDMATCH_EMBEDDING_DIM", str(embedding.get("dimension", EMBEDDING_DIM))
    )
    level = os.getenv(
        "EMBEDMATCH_LOG_LEVEL", str(logging_cfg.get("level", DEFAULT_LOG_LEVEL))
    ).upper()

    errors = []
    try:
        threshold = float(threshold_str)
        if not 0.0 <= threshold <= 1.0:
            errors.append(f"matching.threshold must be between 0.0 and 1.0, got {threshold}")
    except ValueError:
        errors.append(f"matching.threshold is not a number: {threshold_str!r}")

    try:
        dimension = int(dimension_str)
        if dimension <= 0:
            errors.append(f"embedding.dimension must be positive, got {dimension}")
    except ValueError:
        errors.append(f"embedding.dimension is not an integer: {dimension_str!r}")

    if not isinstance(logging.getLevelName(level), int):
        errors.append(f"logging.level is not a known level: {level!r}")

    if errors:
        _fail(errors, config_path)

    _cached_config = EmbedmatchConfig(
        matching=MatchingConfig(threshold=threshold),
        embedding=EmbeddingConfig(dimension=dimension),
        logging=LoggingConfig(level=level),
    )

    return _cached_config
