"""
4×4 float matrices.

A Mat4f is four column vectors, x, y, z and w, so element (row i, col j)
is column j's component i.

Only the non-fallible half of the 2×2/3×3 operation set exists here:
there is no inverse, multiply, divide or negate for Mat4f, and the @
operator accepts vectors only.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from smallmat.core.validation import as_fixed_array
from smallmat.vector import vec4f
from smallmat.vector.generic import Vec4
from smallmat.vector.vec4f import Vec4f


@dataclass(frozen=True)
class Mat4f:
    """Column-major 4×4 matrix with columns x, y, z and w."""

    x: Vec4f
    y: Vec4f
    z: Vec4f
    w: Vec4f

    @property
    def dimension(self) -> int:
        return 4

    @property
    def columns(self) -> tuple[Vec4f, Vec4f, Vec4f, Vec4f]:
        return (self.x, self.y, self.z, self.w)

    def to_array(self) -> NDArray[np.floating[Any]]:
        return to_array(self)

    def __add__(self, other: Mat4f) -> Mat4f:
        if not isinstance(other, Mat4f):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Mat4f) -> Mat4f:
        if not isinstance(other, Mat4f):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, k: float) -> Mat4f:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return scale(self, k)

    def __rmul__(self, k: float) -> Mat4f:
        return self.__mul__(k)

    def __matmul__(self, other: Vec4f) -> Vec4f:
        if isinstance(other, Vec4):
            return mul_vec4(self, other)
        return NotImplemented


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------

def new(
    a: float, b: float, c: float, d: float,
    e: float, f: float, g: float, h: float,
    i: float, j: float, k: float, l: float,
    m: float, n: float, o: float, p: float,
) -> Mat4f:
    """
    Build from sixteen scalars in column-major order.

    Every four consecutive arguments form one column:

        | a  e  i  m |
        | b  f  j  n |
        | c  g  k  o |
        | d  h  l  p |
    """
    return Mat4f(
        vec4f.new(a, b, c, d),
        vec4f.new(e, f, g, h),
        vec4f.new(i, j, k, l),
        vec4f.new(m, n, o, p),
    )


def from_cols(x: Vec4f, y: Vec4f, z: Vec4f, w: Vec4f) -> Mat4f:
    return Mat4f(x, y, z, w)


def from_diagonal(v: Vec4f) -> Mat4f:
    return new(
        v.x, 0.0, 0.0, 0.0,
        0.0, v.y, 0.0, 0.0,
        0.0, 0.0, v.z, 0.0,
        0.0, 0.0, 0.0, v.w,
    )


IDENTITY = from_diagonal(vec4f.new(1.0, 1.0, 1.0, 1.0))
ZERO = from_diagonal(vec4f.ZERO)


def from_array(array: ArrayLike, name: str = "array") -> Mat4f:
    """
    Build a Mat4f from a (4, 4) array-like indexed [row, col].

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (4, 4)
    """
    arr = as_fixed_array(array, (4, 4), name)
    return new(*(float(v) for v in arr.T.ravel()))


def to_array(mat: Mat4f) -> NDArray[np.floating[Any]]:
    """Float64 array of shape (4, 4) indexed [row, col]."""
    return np.array([col.to_tuple() for col in mat.columns], dtype=np.float64).T


# ---------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------

def columns(mat: Mat4f) -> Vec4[Vec4f]:
    """The four columns of mat as a Vec4, ready for map."""
    return Vec4(mat.x, mat.y, mat.z, mat.w)


def transpose(mat: Mat4f) -> Mat4f:
    return new(
        mat.x.x, mat.y.x, mat.z.x, mat.w.x,
        mat.x.y, mat.y.y, mat.z.y, mat.w.y,
        mat.x.z, mat.y.z, mat.z.z, mat.w.z,
        mat.x.w, mat.y.w, mat.z.w, mat.w.w,
    )


def diagonal(mat: Mat4f) -> Vec4f:
    return vec4f.new(mat.x.x, mat.y.y, mat.z.z, mat.w.w)


def determinant(mat: Mat4f) -> float:
    """
    Cofactor expansion along the first row.

    mRC is the element at row R, column C. aCD23 is the 2×2 determinant
    of rows 2 and 3 at columns C and D; each is shared by two of the four
    3×3 cofactors.
    """
    m00, m01, m02, m03 = mat.x.x, mat.y.x, mat.z.x, mat.w.x
    m10, m11, m12, m13 = mat.x.y, mat.y.y, mat.z.y, mat.w.y
    m20, m21, m22, m23 = mat.x.z, mat.y.z, mat.z.z, mat.w.z
    m30, m31, m32, m33 = mat.x.w, mat.y.w, mat.z.w, mat.w.w

    a2323 = m22 * m33 - m23 * m32
    a1323 = m21 * m33 - m23 * m31
    a1223 = m21 * m32 - m22 * m31
    a0323 = m20 * m33 - m23 * m30
    a0223 = m20 * m32 - m22 * m30
    a0123 = m20 * m31 - m21 * m30

    return (
        m00 * (m11 * a2323 - m12 * a1323 + m13 * a1223)
        - m01 * (m10 * a2323 - m12 * a0323 + m13 * a0223)
        + m02 * (m10 * a1323 - m11 * a0323 + m13 * a0123)
        - m03 * (m10 * a1223 - m11 * a0223 + m12 * a0123)
    )


# ---------------------------------------------------------------------
# Vector transforms
# ---------------------------------------------------------------------

def mul_vec4(mat: Mat4f, v: Vec4f) -> Vec4f:
    """Sum of the columns, each scaled by the matching component of v."""
    return vec4f.sum([
        vec4f.scale(mat.x, v.x),
        vec4f.scale(mat.y, v.y),
        vec4f.scale(mat.z, v.z),
        vec4f.scale(mat.w, v.w),
    ])


def mul_transpose_vec4(mat: Mat4f, rhs: Vec4f) -> Vec4f:
    """
    Product with the transpose of mat.

    Row i of transpose(mat) is column i of mat, so each column is dotted
    with rhs.
    """
    return columns(mat).map(lambda col: vec4f.dot(col, rhs))


# ---------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------

def add(a: Mat4f, b: Mat4f) -> Mat4f:
    return Mat4f(
        vec4f.add(a.x, b.x),
        vec4f.add(a.y, b.y),
        vec4f.add(a.z, b.z),
        vec4f.add(a.w, b.w),
    )


def subtract(a: Mat4f, b: Mat4f) -> Mat4f:
    return Mat4f(
        vec4f.subtract(a.x, b.x),
        vec4f.subtract(a.y, b.y),
        vec4f.subtract(a.z, b.z),
        vec4f.subtract(a.w, b.w),
    )


def scale(mat: Mat4f, k: float) -> Mat4f:
    return Mat4f(
        vec4f.scale(mat.x, k),
        vec4f.scale(mat.y, k),
        vec4f.scale(mat.z, k),
        vec4f.scale(mat.w, k),
    )
