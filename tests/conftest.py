"""Pytest configuration and fixtures for embedmatch tests."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import embedmatch.config


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch, tmp_path) -> Generator[Path]:
    """Point every test at a private config path with no env overrides."""
    config_path = tmp_path / "embedmatch" / "config.toml"
    monkeypatch.setenv("EMBEDMATCH_CONFIG", str(config_path))
    monkeypatch.delenv("EMBEDMATCH_SIMILARITY_THRESHOLD", raising=False)
    monkeypatch.delenv("EMBEDMATCH_EMBEDDING_DIM", raising=False)
    monkeypatch.delenv("EMBEDMATCH_LOG_LEVEL", raising=False)

    embedmatch.config.reset_config()
    yield config_path
    embedmatch.config.reset_config()
