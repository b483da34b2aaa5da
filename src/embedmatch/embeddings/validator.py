"""Well-formedness checks for candidate embeddings."""

import logging
import math
from collections.abc import Sequence
from numbers import Real

import numpy as np

logger = logging.getLogger(__name__)


def is_finite_number(value: object) -> bool:
    """Check that a single element is a finite real number.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large to convert to float
        return False


def is_valid_embedding(embedding: object) -> bool:
    """Check that a single vector is a non-empty sequence of finite reals.

    Args:
        embedding: Candidate vector (list, tuple or 1-D numpy array)

    Returns:
        True if the vector can be compared, False otherwise. Never raises.
    """
    if isinstance(embedding, np.ndarray):
        if embedding.ndim != 1 or embedding.size == 0:
            return False
        # Only integer and floating dtypes; bool, complex and object are out
        if embedding.dtype.kind not in "iuf":
            return False
        return bool(np.isfinite(embedding).all())

    if isinstance(embedding, (str, bytes, bytearray)):
        return False
    if not isinstance(embedding, Sequence):
        return False
    if len(embedding) == 0:
        return False

    return all(is_finite_number(value) for value in embedding)


def is_valid(embedding1: object, embedding2: object) -> bool:
    """Check that both embeddings are well-formed.

    Args:
        embedding1: First candidate vector
        embedding2: Second candidate vector

    Returns:
        True if both embeddings are valid. Returns False on any violation
        rather than raising; callers wanting a hard failure wrap this check.
    """
    valid1 = is_valid_embedding(embedding1)
    valid2 = is_valid_embedding(embedding2)
    if not (valid1 and valid2):
        logger.debug(
            f"Embedding validation failed (first valid: {valid1}, second valid: {valid2})"
        )
        return False
    return True
