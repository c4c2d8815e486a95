# materials/presets.py
from core.vector import Color3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight

class MetalPresets:
    """Metals used by the demo scenes."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

class LightPresets:

    @staticmethod
    def warm_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color3(1.0, 0.95, 0.9) * intensity)

class ColorPresets:
    """Common colors for diffuse materials and backgrounds."""

    # Cornell box walls
    CORNELL_RED = Color3(0.65, 0.05, 0.05)
    CORNELL_WHITE = Color3(0.73, 0.73, 0.73)
    CORNELL_GREEN = Color3(0.12, 0.45, 0.15)

    GROUND = Color3(0.8, 0.8, 0.0)
    NAVY = Color3(0.1, 0.2, 0.5)
    GRAY = Color3(0.5, 0.5, 0.5)

    SKY = Color3(0.7, 0.8, 1.0)
    BLACK = Color3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Color3) -> Lambertian:
        return Lambertian(color)
