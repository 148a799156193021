"""
Small fixed-size float matrices.

Each size is a module of free functions plus a frozen dataclass:

    mat2f   Mat2f   2×2, rotations by angle, inverse
    mat3f   Mat3f   3×3, rotations from quaternions, inverse via 2×2 minors
    mat4f   Mat4f   4×4, determinant and vector transforms (no inverse)

inverse() and divide() return a Result instead of raising on a singular
matrix.
"""

from smallmat.matrix import mat2f, mat3f, mat4f
from smallmat.matrix.mat2f import Mat2f
from smallmat.matrix.mat3f import Mat3f
from smallmat.matrix.mat4f import Mat4f
from smallmat.matrix.compare import allclose, assert_allclose

__all__ = [
    "mat2f",
    "mat3f",
    "mat4f",
    "Mat2f",
    "Mat3f",
    "Mat4f",
    "allclose",
    "assert_allclose",
]
