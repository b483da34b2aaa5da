"""Deserialization of externally supplied embedding text."""

import json
import logging
from typing import Any

from ..errors import InvalidFormat
from .validator import is_finite_number

logger = logging.getLogger(__name__)


def parse_embedding(text: object) -> list[float]:
    """Parse a JSON array of numbers into an embedding.

    The decoded list is returned as-is: no normalization or rescaling.

    Args:
        text: JSON text such as "[0.1, 0.2, 0.3]"

    Returns:
        Decoded list of numbers

    Raises:
        InvalidFormat: If text is not a string, not JSON, not a non-empty
            array, or contains anything other than finite numbers
    """
    if not isinstance(text, str):
        raise InvalidFormat("Embedding must be a JSON string")

    try:
        embedding = json.loads(text)
    except ValueError as e:
        raise InvalidFormat(
            "Invalid embedding format. Please provide a valid JSON array of numbers.",
            original_error=e,
        ) from e

    if not isinstance(embedding, list):
        raise InvalidFormat("Embedding must be an array")

    if len(embedding) == 0:
        raise InvalidFormat("Embedding array cannot be empty")

    # json.loads accepts NaN/Infinity tokens, so finiteness is checked too
    if not all(is_finite_number(value) for value in embedding):
        raise InvalidFormat("All embedding values must be valid numbers")

    logger.debug(f"Successfully parsed embedding with {len(embedding)} dimensions")
    return embedding


def parse_embedding_list(text: object) -> list[Any]:
    """Parse a JSON array of stored embeddings for batch comparison.

    Items may be inline arrays or strings holding a JSON array. They are
    returned undecoded so that one malformed item does not fail the batch;
    ``ComparisonEngine.compare_many`` reports each item separately.

    Raises:
        InvalidFormat: If text is not a string, not JSON, or not an array
    """
    if not isinstance(text, str):
        raise InvalidFormat("Stored embeddings must be a JSON string")

    try:
        items = json.loads(text)
    except ValueError as e:
        raise InvalidFormat("Invalid stored embeddings format", original_error=e) from e

    if not isinstance(items, list):
        raise InvalidFormat("Stored embeddings must be an array")

    logger.debug(f"Parsed {len(items)} stored embeddings")
    return items
