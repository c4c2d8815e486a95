# core/ray.py
from core.vector import Point3, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    Rays are never modified after construction.
    """
    __slots__ = ("_origin", "_direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self._origin = origin
        self._direction = direction

    @property
    def origin(self) -> Point3:
        return self._origin

    @property
    def direction(self) -> Vector3:
        return self._direction

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self._origin + self._direction * t

    def __repr__(self) -> str:
        return f"Ray({self._origin!r}, {self._direction!r})"
