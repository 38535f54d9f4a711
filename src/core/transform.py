# core/transform.py
import math
from typing import Optional

import numpy as np

from core.ray import Ray
from core.vector import Vector3

def translation_matrix(offset: Vector3) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = offset.astuple()
    return m

def scale_matrix(factors: Vector3) -> np.ndarray:
    return np.diag((float(factors.x), float(factors.y), float(factors.z), 1.0))

def rotation_matrix(angles: Vector3) -> np.ndarray:
    """
    Rotation by Euler angles in radians, applied about X, then Y, then Z.
    """
    cx, sx = math.cos(angles.x), math.sin(angles.x)
    cy, sy = math.cos(angles.y), math.sin(angles.y)
    cz, sz = math.cos(angles.z), math.sin(angles.z)

    rx = np.array([[1.0, 0.0, 0.0],
                   [0.0, cx, -sx],
                   [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy],
                   [0.0, 1.0, 0.0],
                   [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0],
                   [sz, cz, 0.0],
                   [0.0, 0.0, 1.0]])

    m = np.identity(4)
    m[:3, :3] = rz @ ry @ rx
    return m

class Transform:
    """
    Affine object->world transform composed as translation * rotation * scale.

    The inverse is built analytically (scale^-1 * rotation^T * translation^-1)
    so world->object queries never go through a general matrix inversion.
    Instances are immutable: every method is a pure function of its input.
    """

    def __init__(self, translation: Optional[Vector3] = None,
                 rotation: Optional[Vector3] = None,
                 scale: Optional[Vector3] = None):
        self.translation = translation if translation is not None else Vector3(0.0, 0.0, 0.0)
        self.rotation = rotation if rotation is not None else Vector3(0.0, 0.0, 0.0)
        self.scale = scale if scale is not None else Vector3(1.0, 1.0, 1.0)

        if any(abs(s) < 1e-12 for s in self.scale):
            raise ValueError(f"Transform scale components must be non-zero, got {self.scale!r}")

        t = translation_matrix(self.translation)
        r = rotation_matrix(self.rotation)
        s = scale_matrix(self.scale)
        inv_s = scale_matrix(Vector3(1.0 / self.scale.x, 1.0 / self.scale.y, 1.0 / self.scale.z))

        self.matrix = t @ r @ s
        self.inverse = inv_s @ r.T @ translation_matrix(-self.translation)
        # Inverse transpose of the linear part, for normals.
        self.normal_matrix = (r @ inv_s)[:3, :3]

        for m in (self.matrix, self.inverse, self.normal_matrix):
            m.setflags(write=False)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def point_to_object(self, p: Vector3) -> Vector3:
        return Vector3.from_array(self.inverse[:3, :3] @ p.to_array() + self.inverse[:3, 3])

    def vector_to_object(self, v: Vector3) -> Vector3:
        # Directions ignore translation.
        return Vector3.from_array(self.inverse[:3, :3] @ v.to_array())

    def ray_to_object(self, ray: Ray) -> Ray:
        return Ray(self.point_to_object(ray.origin), self.vector_to_object(ray.direction))

    def point_to_world(self, p: Vector3) -> Vector3:
        return Vector3.from_array(self.matrix[:3, :3] @ p.to_array() + self.matrix[:3, 3])

    def vector_to_world(self, v: Vector3) -> Vector3:
        return Vector3.from_array(self.matrix[:3, :3] @ v.to_array())

    def normal_to_world(self, n: Vector3) -> Vector3:
        """Maps an object-space normal to a unit world-space normal."""
        return Vector3.from_array(self.normal_matrix @ n.to_array()).normalize()

    def __repr__(self) -> str:
        return (f"Transform(translation={self.translation!r}, "
                f"rotation={self.rotation!r}, scale={self.scale!r})")
