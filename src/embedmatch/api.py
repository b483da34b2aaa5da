"""High-level API for embedmatch library usage."""

from .config import EmbedmatchConfig, load_config
from .embeddings.models import ComparisonResult, Embedding
from .embeddings.parser import parse_embedding
from .engine import ComparisonEngine


def compare_embeddings(
    embedding1: Embedding | str,
    embedding2: Embedding | str,
    threshold: float | None = None,
    config: EmbedmatchConfig | None = None,
) -> ComparisonResult:
    """Compare two embeddings using the configured default threshold.

    Args:
        embedding1: First embedding, or its JSON text
        embedding2: Second embedding, or its JSON text (e.g. as persisted)
        threshold: Per-call similarity threshold (0.0-1.0)
        config: Configuration to use; loaded from disk/env if omitted

    Returns:
        ComparisonResult for the pair

    Raises:
        InvalidFormat: If a JSON text side cannot be parsed
        InvalidEmbedding: If either vector fails validation
        DimensionMismatch: If the vectors have different lengths
    """
    engine = ComparisonEngine.from_config(config or load_config())

    if isinstance(embedding1, str):
        embedding1 = parse_embedding(embedding1)
    if isinstance(embedding2, str):
        embedding2 = parse_embedding(embedding2)

    return engine.compare(embedding1, embedding2, threshold)
