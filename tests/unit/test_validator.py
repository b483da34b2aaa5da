"""Unit tests for embedding validation rules."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from embedmatch.embeddings.validator import is_finite_number, is_valid, is_valid_embedding


class TestIsFiniteNumber:
    """Test element-level number checks."""

    @pytest.mark.parametrize("value", [0, 1, -3, 0.5, -1e-9, np.float32(0.25), np.int64(7)])
    def test_accepts_finite_reals(self, value) -> None:
        """Test that ints, floats and numpy scalars are accepted."""
        assert is_finite_number(value) is True

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), True, False, "0.1", None, 1 + 2j, [0.1], 10**400],
    )
    def test_rejects_non_finite_and_non_numeric(self, value) -> None:
        """Test that NaN, infinities, booleans and non-numbers are rejected."""
        assert is_finite_number(value) is False


class TestIsValidEmbedding:
    """Test single-vector validation."""

    def test_list_of_floats_is_valid(self) -> None:
        assert is_valid_embedding([0.1, 0.2, 0.3]) is True

    def test_tuple_and_mixed_ints_are_valid(self) -> None:
        assert is_valid_embedding((1, 0.5, -2)) is True

    def test_numpy_float_array_is_valid(self) -> None:
        assert is_valid_embedding(np.array([0.1, 0.2], dtype=np.float32)) is True

    def test_numpy_int_array_is_valid(self) -> None:
        assert is_valid_embedding(np.array([1, 2, 3])) is True

    @pytest.mark.parametrize("value", [None, 0.5, 3, "[0.1, 0.2]", b"\x00", {0: 0.1}, {0.1, 0.2}])
    def test_non_sequences_are_invalid(self, value) -> None:
        """Test that scalars, strings, mappings and sets are rejected."""
        assert is_valid_embedding(value) is False

    def test_empty_sequences_are_invalid(self) -> None:
        assert is_valid_embedding([]) is False
        assert is_valid_embedding(()) is False
        assert is_valid_embedding(np.array([])) is False

    def test_nan_element_is_invalid(self) -> None:
        assert is_valid_embedding([0.1, float("nan"), 0.3]) is False

    def test_infinite_element_is_invalid(self) -> None:
        assert is_valid_embedding([0.1, float("inf")]) is False

    def test_non_numeric_element_is_invalid(self) -> None:
        assert is_valid_embedding(["a", "b"]) is False
        assert is_valid_embedding([0.1, None]) is False
        assert is_valid_embedding([True, False]) is False

    def test_numpy_nan_is_invalid(self) -> None:
        assert is_valid_embedding(np.array([0.1, np.nan])) is False

    def test_numpy_two_dimensional_is_invalid(self) -> None:
        assert is_valid_embedding(np.ones((2, 3))) is False

    def test_numpy_bool_and_complex_dtypes_are_invalid(self) -> None:
        assert is_valid_embedding(np.array([True, False])) is False
        assert is_valid_embedding(np.array([1 + 1j, 2 + 0j])) is False


class TestIsValid:
    """Test pairwise validation contract."""

    def test_both_valid(self) -> None:
        assert is_valid([0.1, 0.2], [0.3, 0.4]) is True

    def test_lengths_are_not_checked(self) -> None:
        """Test that unequal lengths pass validation (checked by metrics)."""
        assert is_valid([0.1, 0.2], [0.3]) is True

    def test_one_invalid_side_fails(self) -> None:
        assert is_valid([0.1, 0.2], None) is False
        assert is_valid([], [0.1]) is False
        assert is_valid([0.1], [float("nan")]) is False

    def test_never_raises_on_odd_input(self) -> None:
        """Test that arbitrary objects produce False rather than an exception."""
        assert is_valid(object(), object()) is False
        assert is_valid(42, "text") is False
