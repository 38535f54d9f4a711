# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __add__(self, other: "UV") -> "UV":
        return UV(self.u + other.u, self.v + other.v)

    def __mul__(self, t: float) -> "UV":
        return UV(self.u * t, self.v * t)

    @staticmethod
    def barycentric(uv0: "UV", uv1: "UV", uv2: "UV",
                    alpha: float, beta: float, gamma: float) -> "UV":
        """Blend three coordinates with barycentric weights."""
        return UV(
            alpha * uv0.u + beta * uv1.u + gamma * uv2.u,
            alpha * uv0.v + beta * uv1.v + gamma * uv2.v
        )

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
