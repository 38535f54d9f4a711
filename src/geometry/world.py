# src/geometry/world.py
from typing import List, Optional

from core.ray import Ray
from core.utils import NO_HIT
from core.vector import Vector3
from geometry.primitive import HitRecord, Primitive
from renderer.lighting import PointLight

class Scene:
    """
    Ordered geometries and lights plus a single ambient light color.
    Geometry order is kept stable so nearest-hit ties always resolve to
    the primitive added first.
    """
    def __init__(self, ambient_light: Optional[Vector3] = None):
        self.ambient_light = ambient_light if ambient_light is not None else Vector3(0.0, 0.0, 0.0)
        self.geometries: List[Primitive] = []
        self.lights: List[PointLight] = []

    def add(self, obj: Primitive):
        self.geometries.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def clear(self):
        self.geometries.clear()
        self.lights.clear()

    def closest_hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Brute-force nearest hit over every geometry.
        """
        hit_record = None
        closest_so_far = NO_HIT
        for obj in self.geometries:
            rec = obj.intersect(ray, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def shade(self, ray: Ray) -> Optional[Vector3]:
        """Color seen along ray, or None if it escapes the scene."""
        rec = self.closest_hit(ray)
        if rec is None:
            return None
        return rec.shade(self)

    def __len__(self) -> int:
        return len(self.geometries)
