# renderer/shading.py
from core.ray import Ray
from core.utils import SHADOW_EPSILON
from core.vector import Vector3
from renderer.lighting import PointLight, attenuation

def is_in_shadow(scene, point: Vector3, light: PointLight) -> bool:
    """
    Casts a shadow ray from point (nudged towards the light) and reports
    whether any scene geometry blocks it before it reaches the light.
    Uses the same intersect routines as primary rays.
    """
    to_light = light.position - point
    distance = to_light.length()
    if distance == 0:
        return False

    direction = to_light / distance
    shadow_ray = Ray(point + direction * SHADOW_EPSILON, direction)
    # Distance from the nudged origin; direction is unit length so t is a distance.
    light_t = distance - SHADOW_EPSILON

    for geometry in scene.geometries:
        hit = geometry.intersect(shadow_ray)
        if hit is not None and hit.t < light_t:
            return True
    return False

def light_contribution(scene, point: Vector3, normal: Vector3, light: PointLight) -> Vector3:
    """
    attenuation(light, d) * max(0, N.L) for one light, or black when the
    point is shadowed or faces away.
    """
    to_light = light.position - point
    distance = to_light.length()
    if distance == 0:
        return Vector3(0.0, 0.0, 0.0)

    cos_theta = max(0.0, normal.dot(to_light / distance))
    if cos_theta == 0.0:
        return Vector3(0.0, 0.0, 0.0)
    if is_in_shadow(scene, point, light):
        return Vector3(0.0, 0.0, 0.0)
    return attenuation(light, distance) * cos_theta

def compute_diffuse(scene, point: Vector3, normal: Vector3) -> Vector3:
    """Sum of the unshadowed, attenuated light arriving at point."""
    total = Vector3(0.0, 0.0, 0.0)
    for light in scene.lights:
        total = total + light_contribution(scene, point, normal, light)
    return total

def local_illumination(scene, point: Vector3, normal: Vector3,
                       ambient_reflectance: Vector3, diffuse_reflectance: Vector3) -> Vector3:
    """
    ambient_reflectance * scene ambient + diffuse_reflectance * sum of
    per-light diffuse terms. The result is linear and unclamped.
    """
    ambient = ambient_reflectance * scene.ambient_light
    diffuse = diffuse_reflectance * compute_diffuse(scene, point, normal)
    return ambient + diffuse
