# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    A negative radius flips the normals, which makes a hollow shell when
    nested inside a dielectric sphere.
    """
    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or a == 0 or self.radius == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord(t=root, material=self.material)
        rec.p = ray.at(root)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
