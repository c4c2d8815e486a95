# materials/metal.py
import random
from typing import Optional
from core.ray import Ray
from core.vector import Color3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord

class Metal(Material):
    """
    Metal material with reflective properties. fuzz (clamped to at most 1)
    perturbs the mirror direction to blur reflections.
    """
    __slots__ = ("albedo", "fuzz")

    def __init__(self, albedo: Color3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterRecord(scattered, self.albedo)
        return None  # Absorb the ray if it does not leave the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
