# materials/lambertian.py
import random
from core.ray import Ray
from core.vector import Color3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    __slots__ = ("albedo",)

    def __init__(self, albedo: Color3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterRecord:
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterRecord(Ray(rec.p, scatter_direction), self.albedo)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
