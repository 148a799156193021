"""
Tolerance-aware comparison of matrices and vectors.

Dataclass equality on Mat2f/Mat3f/Mat4f is exact. Identities that only
hold up to rounding, such as multiply(m, inverse(m)) == IDENTITY, are
checked with these helpers instead.
"""

from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from smallmat.core.exceptions import DimensionError, ValidationError
from smallmat.core.protocols import SquareMatrix
from smallmat.core.tolerances import DEFAULT, ToleranceTier
from smallmat.vector.generic import Vec2, Vec3, Vec4

Comparable = Union[SquareMatrix, Vec2, Vec3, Vec4]


def _as_array(value: Comparable, name: str) -> NDArray[np.floating[Any]]:
    if isinstance(value, SquareMatrix):
        return value.to_array()
    if isinstance(value, (Vec2, Vec3, Vec4)):
        return np.array(value.to_tuple(), dtype=np.float64)
    raise ValidationError(
        f"{name}: expected a matrix or vector, got {type(value).__name__}"
    )


def _pair(a: Comparable, b: Comparable) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    left = _as_array(a, "a")
    right = _as_array(b, "b")
    if left.shape != right.shape:
        raise DimensionError(
            f"cannot compare shapes {left.shape} and {right.shape}"
        )
    return left, right


def allclose(a: Comparable, b: Comparable, tolerance: ToleranceTier = DEFAULT) -> bool:
    """
    True if every element of a and b agrees within tolerance.

    Raises:
        DimensionError: If a and b have different sizes
    """
    left, right = _pair(a, b)
    return bool(np.allclose(left, right, rtol=tolerance.rtol, atol=tolerance.atol))


def assert_allclose(a: Comparable, b: Comparable, tolerance: ToleranceTier = DEFAULT) -> None:
    """
    Assert elementwise agreement within tolerance.

    Raises:
        AssertionError: With numpy's mismatch report if values differ
        DimensionError: If a and b have different sizes
    """
    left, right = _pair(a, b)
    np.testing.assert_allclose(
        left, right, rtol=tolerance.rtol, atol=tolerance.atol,
        err_msg=f"tolerance tier: {tolerance.name}",
    )
