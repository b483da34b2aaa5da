"""Custom embedding comparison exceptions."""


class EmbeddingError(Exception):
    """Base exception for embedding comparison errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class InvalidEmbedding(EmbeddingError):
    """Exception raised when an input vector fails validation.

    This typically occurs when:
    - The input is not a sequence (scalar, None, string, mapping)
    - The sequence is empty
    - An element is NaN, infinite, boolean or otherwise non-numeric
    """

    pass


class DimensionMismatch(EmbeddingError):
    """Exception raised when two compared vectors have different lengths."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.expected = expected
        self.actual = actual


class InvalidFormat(EmbeddingError):
    """Exception raised when serialized embedding text cannot be decoded.

    This typically occurs when:
    - The payload is not a string
    - The text is not valid JSON or not a JSON array
    - The array is empty or holds non-numeric values
    """

    pass


class ValidationError(EmbeddingError):
    """Exception raised for an out-of-range similarity threshold."""

    def __init__(
        self,
        message: str,
        value: object = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.value = value
