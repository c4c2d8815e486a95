import math
import random

import pytest

from core.ray import Ray
from core.vector import Color3, Point3, Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.material import ScatterRecord
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets


class FixedRng:
    """Replays fixed values for uniform() and random()."""

    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = iter(uniforms)
        self._randoms = iter(randoms)

    def uniform(self, a, b):
        return next(self._uniforms)

    def random(self):
        return next(self._randoms)


UP = Vector3(0, 1, 0)


def _hit(normal=UP, front_face=True, material=None):
    return HitRecord(p=Point3(0, 0, 0), normal=normal, t=1.0,
                     front_face=front_face, material=material)


def test_lambertian_scatters_from_hit_point_with_albedo():
    albedo = Color3(0.2, 0.4, 0.6)
    mat = Lambertian(albedo)
    rng = random.Random(11)
    ray_in = Ray(Point3(0, 1, 0), Vector3(0, -1, 0))
    for _ in range(100):
        result = mat.scatter(ray_in, _hit(), rng)
        assert isinstance(result, ScatterRecord)
        assert result.attenuation is albedo
        assert result.ray.origin == Point3(0, 0, 0)
        assert not result.ray.direction.near_zero()
        # normal + unit vector never points below the surface
        assert result.ray.direction.dot(UP) >= 0


def test_lambertian_degenerate_direction_falls_back_to_normal():
    mat = Lambertian(Color3(0.5, 0.5, 0.5))
    # The sampled unit vector is exactly -normal.
    rng = FixedRng(uniforms=[0.0, -0.5, 0.0])
    scattered, attenuation = mat.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), _hit(), rng)
    assert scattered.direction == UP


def test_metal_mirror_reflection():
    mat = Metal(Color3(0.9, 0.9, 0.9), fuzz=0.0)
    rng = random.Random(3)
    result = mat.scatter(Ray(Point3(-1, 1, 0), Vector3(1, -1, 0)), _hit(), rng)
    direction = result.ray.direction
    assert direction.x == pytest.approx(math.sqrt(0.5))
    assert direction.y == pytest.approx(math.sqrt(0.5))
    assert direction.z == pytest.approx(0.0)
    assert result.attenuation == Color3(0.9, 0.9, 0.9)


def test_metal_absorbs_reflection_pushed_into_surface():
    mat = Metal(Color3(0.9, 0.9, 0.9), fuzz=1.0)
    # Fuzz vector is straight down, the reflection grazes the surface.
    rng = FixedRng(uniforms=[0.0, -0.5, 0.0])
    ray_in = Ray(Point3(-1, 0.01, 0), Vector3(1, -0.01, 0))
    assert mat.scatter(ray_in, _hit(), rng) is None


def test_metal_scatter_always_leaves_surface():
    mat = Metal(Color3(0.9, 0.9, 0.9), fuzz=0.8)
    rng = random.Random(8)
    ray_in = Ray(Point3(-1, 0.3, 0), Vector3(1, -0.3, 0))
    absorbed = 0
    for _ in range(200):
        result = mat.scatter(ray_in, _hit(), rng)
        if result is None:
            absorbed += 1
        else:
            assert result.ray.direction.dot(UP) > 0
    assert absorbed > 0


def test_metal_fuzz_is_clamped():
    assert Metal(Color3(1, 1, 1), fuzz=5.0).fuzz == 1.0
    assert Metal(Color3(1, 1, 1), fuzz=0.3).fuzz == 0.3


def test_dielectric_head_on_refracts_straight_through():
    mat = Dielectric(1.5)
    rng = FixedRng(randoms=[0.5])
    result = mat.scatter(Ray(Point3(0, 0, 1), Vector3(0, 0, -1)), _hit(Vector3(0, 0, 1)), rng)
    assert result.attenuation == Color3(1, 1, 1)
    assert result.ray.direction.z == pytest.approx(-1.0)
    assert result.ray.direction.x == pytest.approx(0.0)


def test_dielectric_reflects_when_schlick_draw_wins():
    mat = Dielectric(1.5)
    # Head-on reflectance is 0.04.
    rng = FixedRng(randoms=[0.01])
    result = mat.scatter(Ray(Point3(0, 0, 1), Vector3(0, 0, -1)), _hit(Vector3(0, 0, 1)), rng)
    assert result.ray.direction.z == pytest.approx(1.0)


def test_dielectric_total_internal_reflection():
    mat = Dielectric(1.5)
    ray_in = Ray(Point3(-1, 0.2, 0), Vector3(1, -0.2, 0))
    rng = random.Random(0)
    for _ in range(20):
        result = mat.scatter(ray_in, _hit(front_face=False), rng)
        unit = Vector3(1, -0.2, 0).normalize()
        assert result.ray.direction.x == pytest.approx(unit.x)
        assert result.ray.direction.y == pytest.approx(-unit.y)


def test_dielectric_always_scatters():
    mat = Dielectric(1.33)
    rng = random.Random(21)
    for i in range(200):
        direction = Vector3(rng.uniform(-1, 1), -1, rng.uniform(-1, 1))
        hit = _hit(front_face=(i % 2 == 0))
        result = mat.scatter(Ray(Point3(0, 1, 0), direction), hit, rng)
        assert result is not None
        assert result.attenuation == Color3(1, 1, 1)
        assert result.ray.direction.length() == pytest.approx(1.0)


def test_diffuse_light_emits_but_never_scatters():
    light = DiffuseLight(Color3(4, 4, 4))
    assert light.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), _hit(), random.Random(1)) is None
    assert light.emitted() == Color3(4, 4, 4)


def test_non_emissive_materials_emit_black():
    for mat in (Lambertian(Color3(1, 1, 1)), Metal(Color3(1, 1, 1), 0.1), Dielectric(1.5)):
        assert mat.emitted() == Color3(0, 0, 0)


def test_presets():
    assert DielectricPresets.glass().refractive_index == 1.5
    assert DielectricPresets.water().refractive_index == 1.33
    assert MetalPresets.gold().fuzz == 0.1
    assert LightPresets.warm_light().emitted() == Color3(1.0, 0.95, 0.9)
    assert ColorPresets.matte(ColorPresets.GRAY).albedo == ColorPresets.GRAY
