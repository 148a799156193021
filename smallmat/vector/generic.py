"""
Fixed-arity generic tuples.

Vec2[T], Vec3[T] and Vec4[T] are immutable containers of exactly 2, 3 or 4
components of any type. The float specializations (vec2f, vec3f, vec4f)
are built on them, and matrices use map/map2 to act on whole columns.

Arithmetic operators work whenever the component type supports them.
+ and - take a vector of the same arity; * takes a real scalar.
"""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')


@dataclass(frozen=True)
class Vec2(Generic[T]):
    """Two components, x and y."""

    x: T
    y: T

    def map(self, fn: Callable[[T], U]) -> Vec2[U]:
        return Vec2(fn(self.x), fn(self.y))

    def map2(self, other: Vec2[U], fn: Callable[[T, U], V]) -> Vec2[V]:
        return Vec2(fn(self.x, other.x), fn(self.y, other.y))

    def to_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 2

    def __add__(self, other: Vec2[Any]) -> Vec2[Any]:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.map2(other, operator.add)

    def __sub__(self, other: Vec2[Any]) -> Vec2[Any]:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.map2(other, operator.sub)

    def __neg__(self) -> Vec2[Any]:
        return self.map(operator.neg)

    def __mul__(self, scalar: Any) -> Vec2[Any]:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.map(lambda c: c * scalar)

    def __rmul__(self, scalar: Any) -> Vec2[Any]:
        return self.__mul__(scalar)


@dataclass(frozen=True)
class Vec3(Generic[T]):
    """Three components, x, y and z."""

    x: T
    y: T
    z: T

    def map(self, fn: Callable[[T], U]) -> Vec3[U]:
        return Vec3(fn(self.x), fn(self.y), fn(self.z))

    def map2(self, other: Vec3[U], fn: Callable[[T, U], V]) -> Vec3[V]:
        return Vec3(fn(self.x, other.x), fn(self.y, other.y), fn(self.z, other.z))

    def to_tuple(self) -> tuple[T, T, T]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vec3[Any]) -> Vec3[Any]:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.map2(other, operator.add)

    def __sub__(self, other: Vec3[Any]) -> Vec3[Any]:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.map2(other, operator.sub)

    def __neg__(self) -> Vec3[Any]:
        return self.map(operator.neg)

    def __mul__(self, scalar: Any) -> Vec3[Any]:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.map(lambda c: c * scalar)

    def __rmul__(self, scalar: Any) -> Vec3[Any]:
        return self.__mul__(scalar)


@dataclass(frozen=True)
class Vec4(Generic[T]):
    """Four components, x, y, z and w."""

    x: T
    y: T
    z: T
    w: T

    def map(self, fn: Callable[[T], U]) -> Vec4[U]:
        return Vec4(fn(self.x), fn(self.y), fn(self.z), fn(self.w))

    def map2(self, other: Vec4[U], fn: Callable[[T, U], V]) -> Vec4[V]:
        return Vec4(
            fn(self.x, other.x),
            fn(self.y, other.y),
            fn(self.z, other.z),
            fn(self.w, other.w),
        )

    def to_tuple(self) -> tuple[T, T, T, T]:
        return (self.x, self.y, self.z, self.w)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 4

    def __add__(self, other: Vec4[Any]) -> Vec4[Any]:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.map2(other, operator.add)

    def __sub__(self, other: Vec4[Any]) -> Vec4[Any]:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.map2(other, operator.sub)

    def __neg__(self) -> Vec4[Any]:
        return self.map(operator.neg)

    def __mul__(self, scalar: Any) -> Vec4[Any]:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.map(lambda c: c * scalar)

    def __rmul__(self, scalar: Any) -> Vec4[Any]:
        return self.__mul__(scalar)
