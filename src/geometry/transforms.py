# geometry/transforms.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves the wrapped object by offset. The ray is moved by -offset into
    object space and the hit point is moved back; normals are unchanged.
    """
    def __init__(self, offset: Vector3, obj: Hittable):
        self.offset = offset
        self.object = obj

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        offset_ray = Ray(ray.origin - self.offset, ray.direction)
        rec = self.object.hit(offset_ray, ray_t)
        if rec is None:
            return None
        return rec.transformed(rec.p + self.offset)

class RotateY(Hittable):
    """
    Rotates the wrapped object by angle degrees about the Y axis.
    """
    def __init__(self, angle: float, obj: Hittable):
        radians = math.radians(angle)
        self.angle = angle
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.object = obj

    def to_object(self, v: Vector3) -> Vector3:
        """Rotate a world-space vector by -angle."""
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def to_world(self, v: Vector3) -> Vector3:
        """Rotate an object-space vector by +angle."""
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated = Ray(self.to_object(ray.origin), self.to_object(ray.direction))
        rec = self.object.hit(rotated, ray_t)
        if rec is None:
            return None
        # Rotation preserves lengths and dot products, so the normal stays
        # unit length and front_face stays valid for the world-space ray.
        return rec.transformed(self.to_world(rec.p), self.to_world(rec.normal))
