# materials/material.py
import random
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Color3
from geometry.hittable import HitRecord

BLACK = Color3(0, 0, 0)

class ScatterRecord(NamedTuple):
    """The outgoing ray of a scatter event and the color it is attenuated by."""
    ray: Ray
    attenuation: Color3

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared by every primitive that uses them and are never
    modified while rendering.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterRecord, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self) -> Color3:
        """
        Radiance emitted by the surface. Only lights emit.
        """
        return BLACK
