"""
Fixed-size vectors.

Generic containers (Vec2, Vec3, Vec4) plus float specializations as
modules of free functions:

    from smallmat.vector import vec3f
    vec3f.dot(vec3f.new(1, 0, 0), vec3f.new(0, 1, 0))
"""

from smallmat.vector.generic import Vec2, Vec3, Vec4
from smallmat.vector import vec2f, vec3f, vec4f
from smallmat.vector.vec2f import Vec2f
from smallmat.vector.vec3f import Vec3f
from smallmat.vector.vec4f import Vec4f

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Vec2f",
    "Vec3f",
    "Vec4f",
    "vec2f",
    "vec3f",
    "vec4f",
]
