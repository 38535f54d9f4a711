# geometry/primitive.py
from typing import NamedTuple, Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import NO_HIT, is_no_hit
from core.vector import Vector3

class Barycentric(NamedTuple):
    alpha: float
    beta: float
    gamma: float

class HitRecord:
    """
    Records details of a ray-primitive intersection.

    A record belongs to a single query: the intersect call builds it and
    the subsequent shade call reads it, so nothing is kept on the primitive.
    """
    __slots__ = ("t", "primitive", "ray", "barycentric")

    def __init__(self, t: float, primitive: "Primitive", ray: Ray,
                 barycentric: Optional[Barycentric] = None):
        self.t = t                      # Ray parameter at intersection (world ray)
        self.primitive = primitive      # Primitive that was hit
        self.ray = ray                  # The world-space ray that was tested
        self.barycentric = barycentric  # Triangle weights, None for spheres

    @property
    def point(self) -> Vector3:
        return self.ray.at(self.t)

    def shade(self, scene) -> Vector3:
        return self.primitive.shade(scene, self.point, self)

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, primitive={self.primitive!r}, barycentric={self.barycentric})"

class Primitive:
    """
    Abstract base for objects that can be intersected and shaded.

    Each primitive owns an object->world Transform. Geometry is stored in
    object space and is never modified by queries.
    """

    def __init__(self, transform: Optional[Transform] = None):
        self.transform = transform if transform is not None else Transform.identity()

    def intersect(self, ray: Ray, best_t: float = NO_HIT) -> Optional[HitRecord]:
        """
        Intersects a world-space ray. Returns a HitRecord only when the hit
        is strictly nearer than best_t (or best_t is the NO_HIT sentinel),
        otherwise None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def shade(self, scene, surface_pos: Vector3, hit: HitRecord) -> Vector3:
        """
        Local illumination color at surface_pos, using data from a hit
        record produced by this primitive's intersect().
        """
        raise NotImplementedError("shade() must be implemented by subclasses.")

    @staticmethod
    def improves_on(t: float, best_t: float) -> bool:
        if is_no_hit(t):
            return False
        return is_no_hit(best_t) or t < best_t
