"""
Float specialization of Vec2.

Free functions over Vec2[float]. Every function returns a new value.
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
from smallmat.vector.generic import Vec2

Vec2f = Vec2[float]

ZERO: Vec2f = Vec2(0.0, 0.0)


def new(x: float, y: float) -> Vec2f:
    return Vec2(float(x), float(y))


def add(a: Vec2f, b: Vec2f) -> Vec2f:
    return a.map2(b, operator.add)


def subtract(a: Vec2f, b: Vec2f) -> Vec2f:
    return a.map2(b, operator.sub)


def scale(v: Vec2f, k: float) -> Vec2f:
    return v.map(lambda c: c * k)


def negate(v: Vec2f) -> Vec2f:
    return v.map(operator.neg)


def dot(a: Vec2f, b: Vec2f) -> float:
    return a.x * b.x + a.y * b.y


def length(v: Vec2f) -> float:
    return math.hypot(v.x, v.y)


def normalize(v: Vec2f) -> Vec2f:
    """
    Scale v to unit length.

    Raises:
        NumericalError: If v has zero length
    """
    mag = length(v)
    if mag == 0.0:
        raise NumericalError(f"cannot normalize a zero-length vector: {v}")
    return scale(v, 1.0 / mag)


def sum(vectors: Iterable[Vec2f]) -> Vec2f:
    """Componentwise sum of a sequence; ZERO for an empty one."""
    return reduce(add, vectors, ZERO)


def to_array(v: Vec2f) -> NDArray[np.floating[Any]]:
    return np.array(v.to_tuple(), dtype=np.float64)


def from_array(array: ArrayLike, name: str = "array") -> Vec2f:
    """
    Build a Vec2f from a length-2 array-like.

    Raises:
        ValidationError: If input is non-numeric or non-finite
        DimensionError: If input is not shape (2,)
    """
    values = as_fixed_array(array, (2,), name)
    return Vec2(*(float(c) for c in values))
