# materials/diffuse_light.py
import random
from core.ray import Ray
from core.vector import Color3
from geometry.hittable import HitRecord
from materials.material import Material

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance.
    """
    __slots__ = ("emit",)

    def __init__(self, emit: Color3):
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self) -> Color3:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight({self.emit!r})"
