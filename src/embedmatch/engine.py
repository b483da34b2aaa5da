"""Match decision and confidence scoring for embedding comparisons."""

import logging
import threading
from collections.abc import Sequence
from numbers import Real

from .config import DEFAULT_SIMILARITY_THRESHOLD, EmbedmatchConfig
from .embeddings.models import BatchComparison, BatchEntry, ComparisonResult, Embedding
from .embeddings.parser import parse_embedding
from .errors import EmbeddingError, ValidationError
from .metrics import cosine_similarity, euclidean_distance, manhattan_distance
from .result import Err, Ok

logger = logging.getLogger(__name__)


def _is_valid_threshold(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return 0.0 <= value <= 1.0


def calculate_confidence(similarity: float, threshold: float) -> float:
    """Calculate confidence score based on similarity and threshold.

    For matches, confidence grows with the similarity above the threshold,
    starting from the threshold itself. For non-matches, it is the fraction
    of the threshold that the similarity reached.

    Args:
        similarity: Clamped cosine similarity (0.0-1.0)
        threshold: Threshold used for the decision (0.0-1.0)

    Returns:
        Confidence score between 0.0 and 1.0
    """
    if similarity >= threshold:
        # similarity == threshold == 1, no excess range to scale over
        if threshold >= 1.0:
            return 1.0
        excess_similarity = similarity - threshold
        max_excess = 1.0 - threshold
        return min(1.0, threshold + (excess_similarity / max_excess) * (1.0 - threshold))

    if threshold <= 0.0:
        return 0.0
    return similarity / threshold


class ComparisonEngine:
    """Decide whether two embeddings match.

    Holds a default similarity threshold that individual calls may override.
    The default is read once per comparison and swapped under a lock, so
    concurrent ``set_threshold`` and ``compare`` calls never see a torn value.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
        dimension: int | None = None,
    ):
        """Initialize engine with a default threshold.

        Args:
            threshold: Default similarity threshold (0.0 to 1.0)
            dimension: Expected embedding dimension; other lengths still
                compare but are logged as a warning

        Raises:
            ValidationError: If threshold is outside [0.0, 1.0]
        """
        if not _is_valid_threshold(threshold):
            raise ValidationError(
                f"Similarity threshold must be a number between 0 and 1, got {threshold!r}",
                value=threshold,
            )
        self._threshold = float(threshold)
        self._lock = threading.Lock()
        self.dimension = dimension

    @classmethod
    def from_config(cls, config: EmbedmatchConfig) -> "ComparisonEngine":
        """Build an engine using the configured threshold and dimension."""
        return cls(
            threshold=config.matching.threshold,
            dimension=config.embedding.dimension,
        )

    @property
    def threshold(self) -> float:
        """Current default similarity threshold."""
        with self._lock:
            return self._threshold

    def set_threshold(self, threshold: float) -> None:
        """Replace the default similarity threshold.

        Comparisons already running keep the threshold they started with.

        Raises:
            ValidationError: If threshold is not a number between 0 and 1
        """
        if not _is_valid_threshold(threshold):
            raise ValidationError(
                "Similarity threshold must be a number between 0 and 1",
                value=threshold,
            )
        with self._lock:
            self._threshold = float(threshold)
        logger.info(f"Similarity threshold updated to: {threshold}")

    def _resolve_threshold(self, threshold: float | None) -> float:
        if threshold is None:
            return self.threshold
        if _is_valid_threshold(threshold):
            return float(threshold)
        default = self.threshold
        logger.warning(f"Ignoring invalid threshold {threshold!r}, using default {default}")
        return default

    def compare(
        self,
        embedding1: Embedding,
        embedding2: Embedding,
        threshold: float | None = None,
    ) -> ComparisonResult:
        """Compare two embeddings and determine if they match.

        Args:
            embedding1: First embedding vector
            embedding2: Second embedding vector
            threshold: Per-call threshold; the engine default when None or invalid

        Returns:
            ComparisonResult with match decision, metrics and confidence

        Raises:
            InvalidEmbedding: If either vector fails validation
            DimensionMismatch: If the vectors have different lengths
        """
        effective_threshold = self._resolve_threshold(threshold)

        similarity = cosine_similarity(embedding1, embedding2)
        euclidean = euclidean_distance(embedding1, embedding2)
        manhattan = manhattan_distance(embedding1, embedding2)

        if self.dimension is not None and len(embedding1) != self.dimension:
            logger.warning(
                f"Compared embeddings have {len(embedding1)} dimensions, "
                f"expected {self.dimension}"
            )

        is_match = similarity >= effective_threshold
        result = ComparisonResult(
            is_match=is_match,
            similarity=similarity,
            euclidean_distance=euclidean,
            manhattan_distance=manhattan,
            threshold=effective_threshold,
            confidence=calculate_confidence(similarity, effective_threshold),
        )

        logger.info(
            f"Comparison result: {'MATCH' if is_match else 'NO MATCH'} "
            f"(similarity: {similarity:.4f}, threshold: {effective_threshold})"
        )
        return result

    def try_compare(
        self,
        embedding1: Embedding,
        embedding2: Embedding,
        threshold: float | None = None,
    ) -> Ok[ComparisonResult] | Err:
        """Compare two embeddings, returning failures instead of raising them."""
        try:
            return Ok(self.compare(embedding1, embedding2, threshold))
        except EmbeddingError as e:
            return Err(e)

    def compare_many(
        self,
        query: Embedding,
        candidates: Sequence[Embedding | str],
        threshold: float | None = None,
    ) -> BatchComparison:
        """Compare a query embedding against many stored candidates.

        Candidates may be embeddings or JSON text. A candidate that cannot be
        parsed or compared is recorded as a failed entry; the rest of the
        batch still runs.

        Args:
            query: Embedding to compare against every candidate
            candidates: Stored embeddings, inline or serialized
            threshold: Per-call threshold shared by the whole batch

        Returns:
            BatchComparison with one entry per candidate
        """
        effective_threshold = self._resolve_threshold(threshold)

        entries = []
        for index, candidate in enumerate(candidates):
            try:
                if isinstance(candidate, str):
                    candidate = parse_embedding(candidate)
                result = self.compare(query, candidate, effective_threshold)
                entries.append(BatchEntry(index=index, result=result))
            except EmbeddingError as e:
                logger.warning(f"Failed to compare with embedding {index}: {e}")
                entries.append(BatchEntry(index=index, error=str(e)))

        batch = BatchComparison(threshold=effective_threshold, entries=entries)
        logger.info(
            f"Batch comparison completed: {len(entries)} candidates, "
            f"{len(batch.matches)} matches, {len(batch.failed)} failed"
        )
        return batch
