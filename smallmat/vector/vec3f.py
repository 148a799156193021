"""
Float specialization of Vec3.

Free functions over Vec3[float]. Every function returns a new value.
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
from smallmat.vector.generic import Vec3

Vec3f = Vec3[float]

ZERO: Vec3f = Vec3(0.0, 0.0, 0.0)


def new(x: float, y: float, z: float) -> Vec3f:
    return Vec3(float(x), float(y), float(z))


def add(a: Vec3f, b: Vec3f) -> Vec3f:
    return a.map2(b, operator.add)


def subtract(a: Vec3f, b: Vec3f) -> Vec3f:
    return a.map2(b, operator.sub)


def scale(v: Vec3f, k: float) -> Vec3f:
    return v.map(lambda c: c * k)


def negate(v: Vec3f) -> Vec3f:
    return v.map(operator.neg)


def dot(a: Vec3f, b: Vec3f) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3f, b: Vec3f) -> Vec3f:
    """Right-handed cross product a × b."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length(v: Vec3f) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vec3f) -> Vec3f:
    """
    Scale v to unit length.

    Raises:
        NumericalError: If v has zero length
    """
    mag = length(v)
    if mag == 0.0:
        raise NumericalError(f"cannot normalize a zero-length vector: {v}")
    return scale(v, 1.0 / mag)


def sum(vectors: Iterable[Vec3f]) -> Vec3f:
    """Componentwise sum of a sequence; ZERO for an empty one."""
    return reduce(add, vectors, ZERO)


def to_array(v: Vec3f) -> NDArray[np.floating[Any]]:
    return np.array(v.to_tuple(), dtype=np.float64)


def from_array(array: ArrayLike, name: str = "array") -> Vec3f:
    """
    Build a Vec3f from a length-3 array-like.

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (3,)
    """
    values = as_fixed_array(array, (3,), name)
    return Vec3(*(float(c) for c in values))
