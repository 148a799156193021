"""
2×2 float matrices.

A Mat2f is two column vectors, x and y, so element (row i, col j) is
column j's component i. All operations are pure functions returning new
values. The determinant here is also the minor primitive used by
mat3f.inverse.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from smallmat.core.result import Result
from smallmat.core.validation import as_fixed_array
from smallmat.matrix._common import warn_if_near_singular
from smallmat.vector import vec2f
from smallmat.vector.generic import Vec2
from smallmat.vector.vec2f import Vec2f


@dataclass(frozen=True)
class Mat2f:
    """Column-major 2×2 matrix with columns x and y."""

    x: Vec2f
    y: Vec2f

    @property
    def dimension(self) -> int:
        return 2

    @property
    def columns(self) -> tuple[Vec2f, Vec2f]:
        return (self.x, self.y)

    def to_array(self) -> NDArray[np.floating[Any]]:
        return to_array(self)

    def __add__(self, other: Mat2f) -> Mat2f:
        if not isinstance(other, Mat2f):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Mat2f) -> Mat2f:
        if not isinstance(other, Mat2f):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> Mat2f:
        return negate(self)

    def __mul__(self, k: float) -> Mat2f:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: float) -> Mat2f:
        return self.__mul__(k)

    @overload
    def __matmul__(self, other: Mat2f) -> Mat2f: ...

    @overload
    def __matmul__(self, other: Vec2f) -> Vec2f: ...

    def __matmul__(self, other):
        if isinstance(other, Mat2f):
            return multiply(self, other)
        if isinstance(other, Vec2):
            return mul_vec2(self, other)
        return NotImplemented


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------

def new(a: float, b: float, c: float, d: float) -> Mat2f:
    """
    Build from four scalars in column-major order.

    new(a, b, c, d) has column x = (a, b) and column y = (c, d), i.e. the
    matrix

        | a  c |
        | b  d |
    """
    return Mat2f(vec2f.new(a, b), vec2f.new(c, d))


def from_cols(x: Vec2f, y: Vec2f) -> Mat2f:
    return Mat2f(x, y)


def from_diagonal(v: Vec2f) -> Mat2f:
    return new(v.x, 0.0, 0.0, v.y)


def from_angle(theta: float) -> Mat2f:
    """Counter-clockwise rotation by theta radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    return new(c, s, -s, c)


def from_scale_angle(scale: Vec2f, theta: float) -> Mat2f:
    """
    Rotation by theta with column x scaled by scale.x and column y by scale.y.

    Same as multiply(from_angle(theta), from_diagonal(scale)) without the
    extra product.
    """
    c = math.cos(theta)
    s = math.sin(theta)
    return new(c * scale.x, s * scale.x, -s * scale.y, c * scale.y)


IDENTITY = new(1.0, 0.0, 0.0, 1.0)
ZERO = new(0.0, 0.0, 0.0, 0.0)


def from_array(array: ArrayLike, name: str = "array") -> Mat2f:
    """
    Build a Mat2f from a (2, 2) array-like indexed [row, col].

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (2, 2)
    """
    m = as_fixed_array(array, (2, 2), name)
    return new(m[0, 0], m[1, 0], m[0, 1], m[1, 1])


def to_array(mat: Mat2f) -> NDArray[np.floating[Any]]:
    """Float64 array of shape (2, 2) indexed [row, col]."""
    return np.array(
        [[mat.x.x, mat.y.x],
         [mat.x.y, mat.y.y]],
        dtype=np.float64,
    )


# ---------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------

def transpose(mat: Mat2f) -> Mat2f:
    return new(mat.x.x, mat.y.x, mat.x.y, mat.y.y)


def determinant(mat: Mat2f) -> float:
    return mat.x.x * mat.y.y - mat.x.y * mat.y.x


def inverse(mat: Mat2f, *, warn_below: float | None = None) -> Result[Mat2f]:
    """
    Inverse of mat.

    Fails only when the determinant is exactly 0.0. A tiny nonzero
    determinant still inverts, possibly to very large entries.

    Args:
        mat: Matrix to invert
        warn_below: If given, emit NearSingularWarning when
            0 < |determinant| < warn_below

    Returns:
        Result holding the inverse, or a singular failure
    """
    return _inverse(mat, warn_below)


def _inverse(mat: Mat2f, warn_below: float | None) -> Result[Mat2f]:
    det = determinant(mat)
    if det == 0.0:
        return Result.singular(
            "Mat2f is singular (determinant is 0.0)",
            matrix_name="Mat2f",
            determinant=det,
        )
    warn_if_near_singular(det, warn_below, "Mat2f")
    adjugate = new(mat.y.y, -mat.x.y, -mat.y.x, mat.x.x)
    return Result.ok(scale(adjugate, 1.0 / det))


# ---------------------------------------------------------------------
# Vector transforms
# ---------------------------------------------------------------------

def mul_vec2(mat: Mat2f, v: Vec2f) -> Vec2f:
    return vec2f.new(
        mat.x.x * v.x + mat.y.x * v.y,
        mat.x.y * v.x + mat.y.y * v.y,
    )


def mul_transpose_vec2(mat: Mat2f, rhs: Vec2f) -> Vec2f:
    """Product with the transpose of mat: each column dotted with rhs."""
    return vec2f.new(vec2f.dot(mat.x, rhs), vec2f.dot(mat.y, rhs))


# ---------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------

def negate(mat: Mat2f) -> Mat2f:
    return Mat2f(vec2f.negate(mat.x), vec2f.negate(mat.y))


def add(a: Mat2f, b: Mat2f) -> Mat2f:
    return Mat2f(vec2f.add(a.x, b.x), vec2f.add(a.y, b.y))


def subtract(a: Mat2f, b: Mat2f) -> Mat2f:
    return Mat2f(vec2f.subtract(a.x, b.x), vec2f.subtract(a.y, b.y))


def multiply(a: Mat2f, b: Mat2f) -> Mat2f:
    return Mat2f(mul_vec2(a, b.x), mul_vec2(a, b.y))


def divide(a: Mat2f, b: Mat2f, *, warn_below: float | None = None) -> Result[Mat2f]:
    """a times the inverse of b; fails when b is singular."""
    return _inverse(b, warn_below).map(lambda inv: multiply(a, inv))


def scale(mat: Mat2f, k: float) -> Mat2f:
    return Mat2f(vec2f.scale(mat.x, k), vec2f.scale(mat.y, k))


def scale_diagonal(mat: Mat2f, v: Vec2f) -> Mat2f:
    """multiply(mat, from_diagonal(v)) without building the diagonal matrix."""
    return Mat2f(vec2f.scale(mat.x, v.x), vec2f.scale(mat.y, v.y))
