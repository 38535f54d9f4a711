# materials/material.py
from typing import Optional, Tuple

from core.vector import Vector3

class Material:
    """
    Surface reflectance used by the local illumination model: an ambient
    and a diffuse color, each channel usually in [0, 1].
    """
    __slots__ = ("_ambient", "_diffuse")

    def __init__(self, ambient: Vector3, diffuse: Vector3):
        self._ambient = ambient
        self._diffuse = diffuse

    @property
    def ambient(self) -> Vector3:
        return self._ambient

    @property
    def diffuse(self) -> Vector3:
        return self._diffuse

    def __repr__(self) -> str:
        return f"Material(ambient={self._ambient!r}, diffuse={self._diffuse!r})"

def reflectance(material: Optional[Material]) -> Tuple[Vector3, Vector3]:
    """
    (ambient, diffuse) of a material. A missing material reflects nothing.
    """
    if material is None:
        return Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0)
    return material.ambient, material.diffuse
