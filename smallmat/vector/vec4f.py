"""
Float specialization of Vec4.

Free functions over Vec4[float]. A Vec4f also stands in for a quaternion
(x, y, z, w) with w the scalar part; see mat3f.from_quaternion.
"""

from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from smallmat.core.exceptions import NumericalError
from smallmat.core.validation import as_fixed_array
from smallmat.vector.generic import Vec4

Vec4f = Vec4[float]

ZERO: Vec4f = Vec4(0.0, 0.0, 0.0, 0.0)


def new(x: float, y: float, z: float, w: float) -> Vec4f:
    return Vec4(float(x), float(y), float(z), float(w))


def add(a: Vec4f, b: Vec4f) -> Vec4f:
    return a.map2(b, operator.add)


def subtract(a: Vec4f, b: Vec4f) -> Vec4f:
    return a.map2(b, operator.sub)


def scale(v: Vec4f, k: float) -> Vec4f:
    return v.map(lambda c: c * k)


def negate(v: Vec4f) -> Vec4f:
    return v.map(operator.neg)


def dot(a: Vec4f, b: Vec4f) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def length(v: Vec4f) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vec4f) -> Vec4f:
    """
    Scale v to unit length.

    Raises:
        NumericalError: If v has zero length
    """
    mag = length(v)
    if mag == 0.0:
        raise NumericalError(f"cannot normalize a zero-length vector: {v}")
    return scale(v, 1.0 / mag)


def sum(vectors: Iterable[Vec4f]) -> Vec4f:
    """Componentwise sum of a sequence; ZERO for an empty one."""
    return reduce(add, vectors, ZERO)


def to_array(v: Vec4f) -> NDArray[np.floating[Any]]:
    return np.array(v.to_tuple(), dtype=np.float64)


def from_array(array: ArrayLike, name: str = "array") -> Vec4f:
    """
    Build a Vec4f from a length-4 array-like.

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (4,)
    """
    values = as_fixed_array(array, (4,), name)
    return Vec4(*(float(c) for c in values))
