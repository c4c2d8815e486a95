# geometry/quad.py
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

PARALLEL_EPSILON = 1e-8

class Quad(Hittable):
    """
    A planar parallelogram with corner q and edge vectors u and v.

    Points on the quad are q + alpha * u + beta * v for alpha, beta in [0, 1].
    The outward normal follows the right-hand rule, u x v.
    """
    def __init__(self, q: Point3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        if n.length_squared() == 0:
            raise ValueError("quad edges must not be parallel")
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        # w projects a planar offset onto the (alpha, beta) basis.
        self.w = n / n.dot(n)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = ray.at(t)
        planar_hit = intersection - self.q
        alpha = self.w.dot(planar_hit.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hit))
        if not (0.0 <= alpha <= 1.0 and 0.0 <= beta <= 1.0):
            return None

        rec = HitRecord(p=intersection, t=t, material=self.material)
        rec.set_face_normal(ray, self.normal)
        return rec

    def __repr__(self) -> str:
        return f"Quad({self.q!r}, {self.u!r}, {self.v!r})"
