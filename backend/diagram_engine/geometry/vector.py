import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Vec2":
        return cls(float(data["x"]), float(data["y"]))

    @classmethod
    def from_angle(cls, angle: float, radius: float = 1.0) -> "Vec2":
        return cls(math.cos(angle) * radius, math.sin(angle) * radius)


ORIGIN = Vec2(0.0, 0.0)


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def perpendicular(v: Vec2) -> Vec2:
    """Quarter turn of v: (-y, x)."""
    return Vec2(-v.y, v.x)


def normalize(v: Vec2) -> Vec2:
    """
    Unit vector in the direction of v.

    The zero vector has no direction; it is returned unchanged so callers
    never see NaN.
    """
    length = v.length()
    if length == 0.0:
        return ORIGIN
    return Vec2(v.x / length, v.y / length)


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return Vec2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def midpoint(a: Vec2, b: Vec2) -> Vec2:
    return Vec2((a.x + b.x) / 2, (a.y + b.y) / 2)
