"""Distance and similarity metrics between two embeddings."""

import logging

import numpy as np

from .embeddings.models import Embedding
from .embeddings.validator import is_valid
from .errors import DimensionMismatch, InvalidEmbedding

logger = logging.getLogger(__name__)


def _prepare(embedding1: Embedding, embedding2: Embedding) -> tuple[np.ndarray, np.ndarray]:
    """Validate a pair of embeddings and convert them to float64 arrays.

    Raises:
        InvalidEmbedding: If either vector fails validation
        DimensionMismatch: If the vectors have different lengths
    """
    if not is_valid(embedding1, embedding2):
        raise InvalidEmbedding("Invalid embedding vectors provided")

    if len(embedding1) != len(embedding2):
        raise DimensionMismatch(
            f"Embedding vectors must have the same length, "
            f"got {len(embedding1)} and {len(embedding2)}",
            expected=len(embedding1),
            actual=len(embedding2),
        )

    # np.asarray copies lists and never writes back into caller arrays
    return (
        np.asarray(embedding1, dtype=np.float64),
        np.asarray(embedding2, dtype=np.float64),
    )


def cosine_similarity(embedding1: Embedding, embedding2: Embedding) -> float:
    """Calculate cosine similarity between two embeddings.

    A zero-magnitude vector is maximally dissimilar to everything, including
    another zero vector, so 0.0 is returned instead of dividing by zero.

    The raw cosine lies in [-1, 1] but the result is clamped to [0, 1]:
    anti-correlated vectors score the same as orthogonal ones.

    Args:
        embedding1: First embedding vector
        embedding2: Second embedding vector

    Returns:
        Cosine similarity score between 0.0 and 1.0

    Raises:
        InvalidEmbedding: If either vector fails validation
        DimensionMismatch: If the vectors have different lengths
    """
    try:
        a, b = _prepare(embedding1, embedding2)

        scale1 = float(np.max(np.abs(a)))
        scale2 = float(np.max(np.abs(b)))

        if scale1 == 0.0 or scale2 == 0.0:
            logger.warning("Zero magnitude embedding vector detected")
            return 0.0

        # Cosine ignores magnitude; rescale so squaring large values cannot overflow
        a = a / scale1
        b = b / scale2
        magnitude1 = float(np.sqrt(np.dot(a, a)))
        magnitude2 = float(np.sqrt(np.dot(b, b)))

        similarity = float(np.dot(a, b)) / (magnitude1 * magnitude2)
        clamped = max(0.0, min(1.0, similarity))

        logger.debug(f"Cosine similarity calculated: {clamped:.6f}")
        return clamped
    except (InvalidEmbedding, DimensionMismatch) as e:
        logger.error(f"Failed to calculate cosine similarity: {e}")
        raise


def euclidean_distance(embedding1: Embedding, embedding2: Embedding) -> float:
    """Calculate Euclidean (L2) distance between two embeddings.

    Raises:
        InvalidEmbedding: If either vector fails validation
        DimensionMismatch: If the vectors have different lengths
    """
    try:
        a, b = _prepare(embedding1, embedding2)
        diff = a - b
        scale = float(np.max(np.abs(diff)))
        if scale == 0.0:
            distance = 0.0
        elif not np.isfinite(scale):
            distance = float("inf")
        else:
            diff = diff / scale
            distance = scale * float(np.sqrt(np.dot(diff, diff)))

        logger.debug(f"Euclidean distance calculated: {distance:.6f}")
        return distance
    except (InvalidEmbedding, DimensionMismatch) as e:
        logger.error(f"Failed to calculate Euclidean distance: {e}")
        raise


def manhattan_distance(embedding1: Embedding, embedding2: Embedding) -> float:
    """Calculate Manhattan (L1) distance between two embeddings.

    Raises:
        InvalidEmbedding: If either vector fails validation
        DimensionMismatch: If the vectors have different lengths
    """
    try:
        a, b = _prepare(embedding1, embedding2)
        distance = float(np.sum(np.abs(a - b)))

        logger.debug(f"Manhattan distance calculated: {distance:.6f}")
        return distance
    except (InvalidEmbedding, DimensionMismatch) as e:
        logger.error(f"Failed to calculate Manhattan distance: {e}")
        raise
