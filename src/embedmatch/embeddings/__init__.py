"""Embedding types, validation and parsing."""

from .models import EMBEDDING_DIM, ComparisonResult, Embedding
from .parser import parse_embedding, parse_embedding_list
from .validator import is_valid, is_valid_embedding

__all__ = [
    "EMBEDDING_DIM",
    "ComparisonResult",
    "Embedding",
    "is_valid",
    "is_valid_embedding",
    "parse_embedding",
    "parse_embedding_list",
]
