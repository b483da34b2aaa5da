"""Unit tests for embedding text parsing."""

import json
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from embedmatch.embeddings.parser import parse_embedding, parse_embedding_list
from embedmatch.errors import EmbeddingError, InvalidFormat


class TestParseEmbedding:
    """Test JSON embedding deserialization."""

    def test_parses_array_of_floats(self) -> None:
        assert parse_embedding("[0.1,0.2,0.3]") == [0.1, 0.2, 0.3]

    def test_returns_values_unchanged(self) -> None:
        """Test that no normalization or rescaling is applied."""
        assert parse_embedding("[3, 4, -12.5]") == [3, 4, -12.5]

    def test_tolerates_whitespace(self) -> None:
        assert parse_embedding("  [ 1.0 , 2.0 ]\n") == [1.0, 2.0]

    @pytest.mark.parametrize("text", ["not json", "[0.1, 0.2", ""])
    def test_rejects_invalid_json(self, text) -> None:
        with pytest.raises(InvalidFormat, match="valid JSON array"):
            parse_embedding(text)

    def test_invalid_json_keeps_decoder_error(self) -> None:
        with pytest.raises(InvalidFormat) as exc_info:
            parse_embedding("not json")

        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_rejects_empty_array(self) -> None:
        with pytest.raises(InvalidFormat, match="cannot be empty"):
            parse_embedding("[]")

    @pytest.mark.parametrize("text", ['"str"', "0.5", '{"a": 1}', "null"])
    def test_rejects_non_array(self, text) -> None:
        with pytest.raises(InvalidFormat, match="must be an array"):
            parse_embedding(text)

    @pytest.mark.parametrize(
        "text", ['["a","b"]', "[0.1, null]", "[true, false]", "[[0.1], [0.2]]"]
    )
    def test_rejects_non_numeric_elements(self, text) -> None:
        with pytest.raises(InvalidFormat, match="valid numbers"):
            parse_embedding(text)

    @pytest.mark.parametrize("text", ["[NaN, 0.1]", "[Infinity]", "[-Infinity, 1]"])
    def test_rejects_non_finite_tokens(self, text) -> None:
        """Test that Python's non-standard JSON tokens are rejected."""
        with pytest.raises(InvalidFormat):
            parse_embedding(text)

    @pytest.mark.parametrize("payload", [None, 42, [0.1, 0.2], b"[0.1]"])
    def test_rejects_non_string_payload(self, payload) -> None:
        with pytest.raises(InvalidFormat, match="JSON string"):
            parse_embedding(payload)

    def test_invalid_format_is_embedding_error(self) -> None:
        with pytest.raises(EmbeddingError):
            parse_embedding("[]")


class TestParseEmbeddingList:
    """Test decoding of stored embedding batches."""

    def test_returns_items_undecoded(self) -> None:
        items = parse_embedding_list('[[0.1, 0.2], "[0.3, 0.4]", "bad"]')
        assert items == [[0.1, 0.2], "[0.3, 0.4]", "bad"]

    def test_empty_batch_is_allowed(self) -> None:
        assert parse_embedding_list("[]") == []

    def test_rejects_non_array(self) -> None:
        with pytest.raises(InvalidFormat, match="must be an array"):
            parse_embedding_list('{"embeddings": []}')

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(InvalidFormat, match="Invalid stored embeddings format"):
            parse_embedding_list("[[0.1]")

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidFormat):
            parse_embedding_list([[0.1]])
