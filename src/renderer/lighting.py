# renderer/lighting.py
from core.utils import is_finite_positive
from core.vector import Vector3

class PointLight:
    """
    Point light with constant/linear/quadratic distance falloff.
    """
    __slots__ = ("position", "color", "constant", "linear", "quadratic")

    def __init__(self, position: Vector3, color: Vector3,
                 constant: float = 1.0, linear: float = 0.0, quadratic: float = 0.0):
        if constant < 0 or linear < 0 or quadratic < 0:
            raise ValueError(
                f"Attenuation coefficients must be non-negative, got "
                f"({constant}, {linear}, {quadratic})"
            )
        self.position = position
        self.color = color
        self.constant = constant
        self.linear = linear
        self.quadratic = quadratic

    def __repr__(self) -> str:
        return (f"PointLight(position={self.position!r}, color={self.color!r}, "
                f"attenuation=({self.constant}, {self.linear}, {self.quadratic}))")

def attenuation(light: PointLight, distance: float) -> Vector3:
    """
    Light color scaled by 1 / (c0 + c1*d + c2*d^2).
    A zero or non-finite denominator contributes nothing.
    """
    denominator = light.constant + light.linear * distance + light.quadratic * distance * distance
    if not is_finite_positive(denominator):
        return Vector3(0.0, 0.0, 0.0)
    return light.color * (1.0 / denominator)
