"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_shape
    - as_fixed_array: full chain, error ordering
"""

import numpy as np
import pytest

from smallmat.core.exceptions import DimensionError, ValidationError
from smallmat.core.validation import (
    as_fixed_array,
    check_array,
    check_finite,
    check_ndim,
    check_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "v")
        assert np.issubdtype(result.dtype, np.floating)

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "v")
        assert result.dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="v: non-numeric"):
            check_array(["a", "b"], "v")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1, "a", None], dtype=object), "v")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="v:"):
            check_array([[1.0, 2.0], [3.0]], "v")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "v")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "v")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf]), "v")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality and shape
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "m")
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_ndim(np.zeros(3), 2, "m")

    def test_check_shape(self):
        check_shape(np.zeros((3, 3)), (3, 3), "m")
        with pytest.raises(DimensionError, match=r"expected shape \(3, 3\), got \(3, 4\)"):
            check_shape(np.zeros((3, 4)), (3, 3), "m")


class TestAsFixedArray:

    def test_valid_input(self):
        result = as_fixed_array([[1, 2], [3, 4]], (2, 2), "m")
        assert result.shape == (2, 2)
        assert np.issubdtype(result.dtype, np.floating)

    def test_dimension_reported_before_shape(self):
        with pytest.raises(DimensionError, match="expected 2D array"):
            as_fixed_array([1.0, 2.0, 3.0, 4.0], (2, 2), "m")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            as_fixed_array([[1.0, np.nan], [0.0, 1.0]], (2, 2), "m")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            as_fixed_array(np.eye(3), (2, 2), "m")
