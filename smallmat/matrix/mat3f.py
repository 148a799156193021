"""
3×3 float matrices.

A Mat3f is three column vectors, x, y and z, so element (row i, col j)
is column j's component i. All operations are pure functions returning
new values.

The inverse is the classic adjugate construction: each cofactor is the
determinant of a 2×2 minor built as a Mat2f, the cofactor matrix is
transposed, and the result is scaled by 1 / determinant.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from smallmat.core.result import Result
from smallmat.core.validation import as_fixed_array
from smallmat.matrix import mat2f
from smallmat.matrix._common import warn_if_near_singular
from smallmat.matrix.mat2f import Mat2f
from smallmat.vector import vec3f, vec4f
from smallmat.vector.generic import Vec3
from smallmat.vector.vec3f import Vec3f
from smallmat.vector.vec4f import Vec4f


@dataclass(frozen=True)
class Mat3f:
    """Column-major 3×3 matrix with columns x, y and z."""

    x: Vec3f
    y: Vec3f
    z: Vec3f

    @property
    def dimension(self) -> int:
        return 3

    @property
    def columns(self) -> tuple[Vec3f, Vec3f, Vec3f]:
        return (self.x, self.y, self.z)

    def to_array(self) -> NDArray[np.floating[Any]]:
        return to_array(self)

    def __add__(self, other: Mat3f) -> Mat3f:
        if not isinstance(other, Mat3f):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Mat3f) -> Mat3f:
        if not isinstance(other, Mat3f):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> Mat3f:
        return negate(self)

    def __mul__(self, k: float) -> Mat3f:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: float) -> Mat3f:
        return self.__mul__(k)

    @overload
    def __matmul__(self, other: Mat3f) -> Mat3f: ...

    @overload
    def __matmul__(self, other: Vec3f) -> Vec3f: ...

    def __matmul__(self, other):
        if isinstance(other, Mat3f):
            return multiply(self, other)
        if isinstance(other, Vec3):
            return mul_vec3(self, other)
        return NotImplemented


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------

def new(
    a: float, b: float, c: float,
    d: float, e: float, f: float,
    g: float, h: float, i: float,
) -> Mat3f:
    """
    Build from nine scalars in column-major order.

    Columns are x = (a, b, c), y = (d, e, f) and z = (g, h, i):

        | a  d  g |
        | b  e  h |
        | c  f  i |
    """
    return Mat3f(vec3f.new(a, b, c), vec3f.new(d, e, f), vec3f.new(g, h, i))


def from_cols(x: Vec3f, y: Vec3f, z: Vec3f) -> Mat3f:
    return Mat3f(x, y, z)


def from_diagonal(v: Vec3f) -> Mat3f:
    return new(
        v.x, 0.0, 0.0,
        0.0, v.y, 0.0,
        0.0, 0.0, v.z,
    )


def from_quaternion(q: Vec4f) -> Mat3f:
    """
    Rotation matrix of quaternion q = (x, y, z, w), w being the scalar part.

    q is normalized first, so any nonzero quaternion gives a proper
    rotation.

    Raises:
        NumericalError: If q is the zero quaternion
    """
    q = vec4f.normalize(q)
    x2 = q.x + q.x
    y2 = q.y + q.y
    z2 = q.z + q.z

    xx = q.x * x2
    xy = q.x * y2
    xz = q.x * z2

    yy = q.y * y2
    yz = q.y * z2
    zz = q.z * z2

    wx = q.w * x2
    wy = q.w * y2
    wz = q.w * z2

    return new(
        1.0 - (yy + zz), xy + wz, xz - wy,
        xy - wz, 1.0 - (xx + zz), yz + wx,
        xz + wy, yz - wx, 1.0 - (xx + yy),
    )


IDENTITY = new(
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)
ZERO = new(
    0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,
)


def from_array(array: ArrayLike, name: str = "array") -> Mat3f:
    """
    Build a Mat3f from a (3, 3) array-like indexed [row, col].

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (3, 3)
    """
    m = as_fixed_array(array, (3, 3), name)
    return new(*(float(v) for v in m.T.ravel()))


def to_array(mat: Mat3f) -> NDArray[np.floating[Any]]:
    """Float64 array of shape (3, 3) indexed [row, col]."""
    return np.array([col.to_tuple() for col in mat.columns], dtype=np.float64).T


# ---------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------

def transpose(mat: Mat3f) -> Mat3f:
    return new(
        mat.x.x, mat.y.x, mat.z.x,
        mat.x.y, mat.y.y, mat.z.y,
        mat.x.z, mat.y.z, mat.z.z,
    )


def determinant(mat: Mat3f) -> float:
    a1, a2, a3 = mat.x.x, mat.x.y, mat.x.z
    b1, b2, b3 = mat.y.x, mat.y.y, mat.y.z
    c1, c2, c3 = mat.z.x, mat.z.y, mat.z.z
    return (
        a1 * b2 * c3
        - a1 * b3 * c2
        - a2 * b1 * c3
        + a2 * b3 * c1
        + a3 * b1 * c2
        - a3 * b2 * c1
    )


def _minor(mat: Mat3f, row: int, col: int) -> Mat2f:
    """The 2×2 matrix left after dropping one row and one column."""
    kept = [
        [v for r, v in enumerate(column) if r != row]
        for c, column in enumerate(mat.columns)
        if c != col
    ]
    return mat2f.new(kept[0][0], kept[0][1], kept[1][0], kept[1][1])


def _cofactor(mat: Mat3f, row: int, col: int) -> float:
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * mat2f.determinant(_minor(mat, row, col))


def inverse(mat: Mat3f, *, warn_below: float | None = None) -> Result[Mat3f]:
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


def _inverse(mat: Mat3f, warn_below: float | None) -> Result[Mat3f]:
    det = determinant(mat)
    if det == 0.0:
        return Result.singular(
            "Mat3f is singular (determinant is 0.0)",
            matrix_name="Mat3f",
            determinant=det,
        )
    warn_if_near_singular(det, warn_below, "Mat3f")
    # adjugate[i][j] = cofactor(j, i); new() takes column j's rows in order
    adjugate = new(*(_cofactor(mat, j, i) for j in range(3) for i in range(3)))
    return Result.ok(scale(adjugate, 1.0 / det))


# ---------------------------------------------------------------------
# Vector transforms
# ---------------------------------------------------------------------

def mul_vec3(mat: Mat3f, v: Vec3f) -> Vec3f:
    return vec3f.new(
        mat.x.x * v.x + mat.y.x * v.y + mat.z.x * v.z,
        mat.x.y * v.x + mat.y.y * v.y + mat.z.y * v.z,
        mat.x.z * v.x + mat.y.z * v.y + mat.z.z * v.z,
    )


def mul_transpose_vec3(mat: Mat3f, rhs: Vec3f) -> Vec3f:
    """Product with the transpose of mat: each column dotted with rhs."""
    return vec3f.new(
        vec3f.dot(mat.x, rhs),
        vec3f.dot(mat.y, rhs),
        vec3f.dot(mat.z, rhs),
    )


# ---------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------

def negate(mat: Mat3f) -> Mat3f:
    return Mat3f(vec3f.negate(mat.x), vec3f.negate(mat.y), vec3f.negate(mat.z))


def add(a: Mat3f, b: Mat3f) -> Mat3f:
    return Mat3f(vec3f.add(a.x, b.x), vec3f.add(a.y, b.y), vec3f.add(a.z, b.z))


def subtract(a: Mat3f, b: Mat3f) -> Mat3f:
    return Mat3f(
        vec3f.subtract(a.x, b.x),
        vec3f.subtract(a.y, b.y),
        vec3f.subtract(a.z, b.z),
    )


def multiply(a: Mat3f, b: Mat3f) -> Mat3f:
    return Mat3f(mul_vec3(a, b.x), mul_vec3(a, b.y), mul_vec3(a, b.z))


def divide(a: Mat3f, b: Mat3f, *, warn_below: float | None = None) -> Result[Mat3f]:
    """a times the inverse of b; fails when b is singular."""
    return _inverse(b, warn_below).map(lambda inv: multiply(a, inv))


def scale(mat: Mat3f, k: float) -> Mat3f:
    return Mat3f(vec3f.scale(mat.x, k), vec3f.scale(mat.y, k), vec3f.scale(mat.z, k))


def scale_diagonal(mat: Mat3f, v: Vec3f) -> Mat3f:
    """multiply(mat, from_diagonal(v)) without building the diagonal matrix."""
    return Mat3f(
        vec3f.scale(mat.x, v.x),
        vec3f.scale(mat.y, v.y),
        vec3f.scale(mat.z, v.z),
    )
