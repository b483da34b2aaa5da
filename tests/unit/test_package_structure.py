"""Test package structure and imports."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))


def test_package_imports() -> None:
    """Test that embedmatch package can be imported."""
    import embedmatch

    assert embedmatch.__version__ == "0.1.0"


def test_lazy_exports() -> None:
    """Test that top-level names resolve to their implementations."""
    import embedmatch
    from embedmatch.api import compare_embeddings
    from embedmatch.engine import ComparisonEngine

    assert embedmatch.compare_embeddings is compare_embeddings
    assert embedmatch.ComparisonEngine is ComparisonEngine


def test_unknown_attribute_raises() -> None:
    """Test that unknown top-level names raise AttributeError."""
    import embedmatch

    with pytest.raises(AttributeError, match="has no attribute 'missing_name'"):
        embedmatch.missing_name  # noqa: B018


def test_main_module_imports() -> None:
    """Test that main module can be imported without error."""
    from embedmatch.__main__ import main

    # Should be able to import the main function
    assert callable(main)
