"""embedmatch - embedding comparison engine for face verification."""

__version__ = "0.1.0"
__all__ = ["ComparisonEngine", "compare_embeddings"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "compare_embeddings":
        from .api import compare_embeddings

        return compare_embeddings
    if name == "ComparisonEngine":
        from .engine import ComparisonEngine

        return ComparisonEngine
    raise AttributeError(f"module 'embedmatch' has no attribute {name!r}")
