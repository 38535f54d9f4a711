"""Primitives, their intersection kernels and the scene container."""

from geometry.primitive import Barycentric, HitRecord, Primitive
from geometry.sphere import Sphere
from geometry.triangle import Triangle, Vertex
from geometry.world import Scene

__all__ = [
    "Barycentric",
    "HitRecord",
    "Primitive",
    "Scene",
    "Sphere",
    "Triangle",
    "Vertex",
]
