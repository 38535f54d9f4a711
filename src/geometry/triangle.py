# geometry/triangle.py
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import NO_HIT
from core.uv import UV
from core.vector import Vector3
from geometry.kernels import ray_triangle_solve
from geometry.primitive import Barycentric, HitRecord, Primitive
from materials.material import Material, reflectance
from renderer.shading import local_illumination

class Vertex:
    """A triangle corner in object space."""
    __slots__ = ("position", "normal", "uv", "material")

    def __init__(self, position: Vector3, normal: Optional[Vector3] = None,
                 uv: Optional[UV] = None, material: Optional[Material] = None):
        self.position = position
        self.normal = normal
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.material = material

    def __repr__(self) -> str:
        return f"Vertex({self.position!r}, normal={self.normal!r}, uv={self.uv!r})"

class Triangle(Primitive):
    """
    Triangle with per-vertex normals, texture coordinates and materials,
    interpolated across the face with the barycentric weights of a hit.
    """

    def __init__(self, a: Vertex, b: Vertex, c: Vertex,
                 transform: Optional[Transform] = None):
        super().__init__(transform)
        self.a = a
        self.b = b
        self.c = c

        # Object-space data the kernel needs, as float triples
        self._positions = (a.position.astuple(), b.position.astuple(), c.position.astuple())

        self.face_normal = (b.position - a.position).cross(c.position - a.position).normalize()

    @property
    def vertices(self):
        return (self.a, self.b, self.c)

    def intersect(self, ray: Ray, best_t: float = NO_HIT) -> Optional[HitRecord]:
        local = self.transform.ray_to_object(ray)
        va, vb, vc = self._positions
        t, alpha, beta, gamma = ray_triangle_solve(local.origin.astuple(), local.direction.astuple(),
                                                   va, vb, vc)
        if not self.improves_on(t, best_t):
            return None

        return HitRecord(t, self, ray, Barycentric(alpha, beta, gamma))

    def normal_at(self, weights: Barycentric) -> Vector3:
        """
        World-space shading normal: vertex normals blended with the
        barycentric weights, falling back to the face normal where vertex
        normals are missing or cancel out.
        """
        normals = [v.normal if v.normal is not None else self.face_normal
                   for v in self.vertices]
        blended = (normals[0] * weights.alpha
                   + normals[1] * weights.beta
                   + normals[2] * weights.gamma)
        if blended.length_squared() < 1e-24:
            blended = self.face_normal
        return self.transform.normal_to_world(blended)

    def interpolate_uv(self, hit: HitRecord) -> UV:
        w = hit.barycentric
        return UV.barycentric(self.a.uv, self.b.uv, self.c.uv, w.alpha, w.beta, w.gamma)

    def reflectance_at(self, weights: Barycentric):
        """Ambient and diffuse reflectance blended across the vertices."""
        ambient = Vector3(0.0, 0.0, 0.0)
        diffuse = Vector3(0.0, 0.0, 0.0)
        for vertex, w in zip(self.vertices, weights):
            vertex_ambient, vertex_diffuse = reflectance(vertex.material)
            ambient = ambient + vertex_ambient * w
            diffuse = diffuse + vertex_diffuse * w
        return ambient, diffuse

    def shade(self, scene, surface_pos: Vector3, hit: HitRecord) -> Vector3:
        weights = hit.barycentric
        ambient, diffuse = self.reflectance_at(weights)
        normal = self.normal_at(weights)
        return local_illumination(scene, surface_pos, normal, ambient, diffuse)

    def __repr__(self) -> str:
        return f"Triangle({self.a.position!r}, {self.b.position!r}, {self.c.position!r})"
