"""
smallmat: small fixed-size float matrices for geometry.

Column-major 2×2, 3×3 and 4×4 matrices built from fixed-size vectors,
with construction, transpose, determinant, inverse, arithmetic and
vector transformation. Every value is immutable and every operation is a
pure function.

Submodules:
    core: Exceptions, Result, validation, tolerances
    vector: Vec2/Vec3/Vec4 and their float specializations
    matrix: mat2f, mat3f, mat4f
"""

__version__ = "0.1.0"

from smallmat import core
from smallmat import vector
from smallmat import matrix
from smallmat.core import Result, SingularMatrixError
from smallmat.matrix import Mat2f, Mat3f, Mat4f, mat2f, mat3f, mat4f
from smallmat.vector import vec2f, vec3f, vec4f

__all__ = [
    "__version__",
    "core",
    "vector",
    "matrix",
    "Result",
    "SingularMatrixError",
    "Mat2f",
    "Mat3f",
    "Mat4f",
    "mat2f",
    "mat3f",
    "mat4f",
    "vec2f",
    "vec3f",
    "vec4f",
]
