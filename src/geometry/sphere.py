# geometry/sphere.py
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import NO_HIT
from core.vector import Vector3
from geometry.kernels import ray_sphere_solve
from geometry.primitive import HitRecord, Primitive
from materials.material import Material, reflectance
from renderer.shading import local_illumination

class Sphere(Primitive):
    """
    Represents a sphere of the given radius centred at its object-space
    origin; the transform places (and possibly squashes) it in the world.
    """

    def __init__(self, radius: float, material: Optional[Material] = None,
                 transform: Optional[Transform] = None):
        if radius < 0:
            raise ValueError(f"Sphere radius must be non-negative, got {radius}")
        super().__init__(transform)
        self.radius = float(radius)
        self.material = material

    @classmethod
    def at(cls, center: Vector3, radius: float, material: Optional[Material] = None) -> "Sphere":
        """Untransformed sphere translated to center."""
        return cls(radius, material, Transform(translation=center))

    @property
    def center(self) -> Vector3:
        return self.transform.point_to_world(Vector3(0.0, 0.0, 0.0))

    def intersect(self, ray: Ray, best_t: float = NO_HIT) -> Optional[HitRecord]:
        local = self.transform.ray_to_object(ray)
        t = ray_sphere_solve(local.origin.astuple(), local.direction.astuple(), self.radius)
        if not self.improves_on(t, best_t):
            return None
        return HitRecord(t, self, ray)

    def normal_at(self, surface_pos: Vector3) -> Vector3:
        """
        Unit world normal. Without scaling this is
        (surface_pos - center) / radius.
        """
        if self.radius == 0:
            return Vector3(0.0, 0.0, 0.0)
        local = self.transform.point_to_object(surface_pos) / self.radius
        return self.transform.normal_to_world(local)

    def shade(self, scene, surface_pos: Vector3, hit: HitRecord) -> Vector3:
        ambient, diffuse = reflectance(self.material)
        return local_illumination(scene, surface_pos, self.normal_at(surface_pos), ambient, diffuse)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
