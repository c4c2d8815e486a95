# src/materials/dielectric.py
import math
import random
from core.ray import Ray
from core.vector import Color3
from core.utils import reflect, refract, reflectance
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord

WHITE = Color3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.
    """
    __slots__ = ("refractive_index",)

    def __init__(self, refractive_index: float):
        self.refractive_index = refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterRecord:
        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.refractive_index if rec.front_face else self.refractive_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        # Glass doesn't absorb light
        return ScatterRecord(Ray(rec.p, direction), WHITE)

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"
