"""Embedding types and comparison result models."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

import numpy as np

# Default dimension of face embeddings produced by the inference service
EMBEDDING_DIM = 512

# Type aliases for clarity
Embedding: TypeAlias = Sequence[float] | np.ndarray  # Shape: (n,)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two embeddings.

    Attributes:
        is_match: True when similarity >= threshold
        similarity: Cosine similarity clamped to [0.0, 1.0]
        euclidean_distance: L2 distance between the vectors
        manhattan_distance: L1 distance between the vectors
        threshold: Threshold used for this comparison
        confidence: How decisively the comparison falls on its side (0.0-1.0)
    """

    is_match: bool
    similarity: float
    euclidean_distance: float
    manhattan_distance: float
    threshold: float
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used by request handlers."""
        return {
            "isMatch": self.is_match,
            "similarity": self.similarity,
            "euclideanDistance": self.euclidean_distance,
            "manhattanDistance": self.manhattan_distance,
            "threshold": self.threshold,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class BatchEntry:
    """Comparison of the query against one candidate in a batch.

    Exactly one of ``result`` and ``error`` is set.
    """

    index: int
    result: ComparisonResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> dict[str, Any]:
        if self.result is None:
            return {
                "embeddingIndex": self.index,
                "isMatch": False,
                "similarity": 0.0,
                "confidence": 0.0,
                "error": self.error,
            }
        return {
            "embeddingIndex": self.index,
            "isMatch": self.result.is_match,
            "similarity": self.result.similarity,
            "confidence": self.result.confidence,
        }


@dataclass(frozen=True)
class BatchComparison:
    """Results of comparing one query embedding against many candidates."""

    threshold: float
    entries: list[BatchEntry] = field(default_factory=list)

    @property
    def best_match(self) -> BatchEntry | None:
        """Successful entry with the highest similarity, earliest index on ties."""
        best: BatchEntry | None = None
        for entry in self.entries:
            if entry.result is None:
                continue
            if best is None or entry.result.similarity > best.result.similarity:  # type: ignore[union-attr]
                best = entry
        return best

    @property
    def matches(self) -> list[BatchEntry]:
        return [e for e in self.entries if e.result is not None and e.result.is_match]

    @property
    def failed(self) -> list[BatchEntry]:
        return [e for e in self.entries if e.result is None]

    def to_dict(self) -> dict[str, Any]:
        best = self.best_match
        return {
            "threshold": self.threshold,
            "comparisons": [entry.to_dict() for entry in self.entries],
            "bestMatch": best.to_dict() if best is not None else None,
            "summary": {
                "totalCandidates": len(self.entries),
                "successfulComparisons": len(self.entries) - len(self.failed),
                "failedComparisons": len(self.failed),
                "matches": len(self.matches),
            },
        }
