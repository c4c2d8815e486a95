# camera/camera.py
import math
import random
from core.vector import Vector3, Point3, Color3
from core.ray import Ray
from core.interval import Interval
from core.utils import random_in_unit_disk

# Minimum hit distance for secondary rays; avoids shadow acne.
T_MIN = 0.001
BLACK = Color3(0, 0, 0)

class CameraConfigError(ValueError):
    """Raised when a camera configuration cannot produce a valid view."""

class CameraBuilder:
    """
    Collects camera settings before building an immutable Camera.

    Every setting can be passed as a keyword argument or set with the
    chainable method of the same name:

        camera = (Camera.builder(400, 225)
                  .samples_per_pixel(50)
                  .vfov(20)
                  .look_from(Point3(-2, 2, 1))
                  .build())
    """
    DEFAULTS = {
        "samples_per_pixel": 10,
        "max_depth": 10,
        "background": Color3(1.0, 1.0, 1.0),
        "vfov": 90.0,                       # vertical field of view, degrees
        "look_from": Point3(0, 0, -1),
        "look_at": Point3(0, 0, 0),
        "vup": Vector3(0, 1, 0),
        "defocus_angle": 0.0,               # aperture cone angle, degrees
        "focus_dist": 10.0,
    }

    def __init__(self, image_width: int, image_height: int, **settings):
        unknown = set(settings) - set(self.DEFAULTS)
        if unknown:
            raise TypeError(f"Unknown camera settings: {', '.join(sorted(unknown))}")
        self.image_width = image_width
        self.image_height = image_height
        self.settings = dict(self.DEFAULTS)
        self.settings.update(settings)

    def _set(self, name: str, value) -> "CameraBuilder":
        self.settings[name] = value
        return self

    def samples_per_pixel(self, n: int) -> "CameraBuilder":
        return self._set("samples_per_pixel", n)

    def max_depth(self, depth: int) -> "CameraBuilder":
        return self._set("max_depth", depth)

    def background(self, color: Color3) -> "CameraBuilder":
        return self._set("background", color)

    def vfov(self, degrees: float) -> "CameraBuilder":
        return self._set("vfov", degrees)

    def look_from(self, point: Point3) -> "CameraBuilder":
        return self._set("look_from", point)

    def look_at(self, point: Point3) -> "CameraBuilder":
        return self._set("look_at", point)

    def vup(self, up: Vector3) -> "CameraBuilder":
        return self._set("vup", up)

    def defocus_angle(self, degrees: float) -> "CameraBuilder":
        return self._set("defocus_angle", degrees)

    def focus_dist(self, dist: float) -> "CameraBuilder":
        return self._set("focus_dist", dist)

    def validate(self):
        s = self.settings
        if self.image_width <= 0 or self.image_height <= 0:
            raise CameraConfigError(
                f"Image size must be positive, got {self.image_width}x{self.image_height}")
        if s["samples_per_pixel"] < 1:
            raise CameraConfigError("samples_per_pixel must be at least 1")
        if s["max_depth"] < 0:
            raise CameraConfigError("max_depth cannot be negative")
        if not 0.0 < s["vfov"] < 180.0:
            raise CameraConfigError(f"vfov must be in (0, 180) degrees, got {s['vfov']}")
        if not (math.isfinite(s["focus_dist"]) and s["focus_dist"] > 0):
            raise CameraConfigError(f"focus_dist must be positive and finite, got {s['focus_dist']}")
        if not 0.0 <= s["defocus_angle"] < 180.0:
            raise CameraConfigError(
                f"defocus_angle must be in [0, 180) degrees, got {s['defocus_angle']}")
        for name in ("look_from", "look_at", "vup"):
            if not all(math.isfinite(c) for c in s[name]):
                raise CameraConfigError(f"{name} must have finite components, got {s[name]!r}")
        view = s["look_from"] - s["look_at"]
        if view.near_zero(1e-12):
            raise CameraConfigError("look_from and look_at must be different points")
        if s["vup"].cross(view.normalize()).near_zero(1e-12):
            raise CameraConfigError("vup must not be parallel to the view direction")

    def build(self) -> "Camera":
        self.validate()
        return Camera(self.image_width, self.image_height, **self.settings)

class Camera:
    """
    Thin-lens camera that turns pixel coordinates into primary rays and
    integrates radiance along them.

    Build one with Camera.builder(); all derived values are computed once
    and the camera is not modified afterwards, so one instance can be
    shared by every render worker.
    """
    def __init__(self, image_width: int, image_height: int, samples_per_pixel: int,
                 max_depth: int, background: Color3, vfov: float, look_from: Point3,
                 look_at: Point3, vup: Vector3, defocus_angle: float, focus_dist: float):
        self.image_width = image_width
        self.image_height = image_height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.background = background
        self.vfov = vfov
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.center = look_from

        # Viewport dimensions at the focus plane
        h = math.tan(math.radians(vfov) / 2)
        viewport_height = 2.0 * h * focus_dist
        viewport_width = viewport_height * (image_width / image_height)

        # Orthonormal camera basis
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / image_width
        self.pixel_delta_v = viewport_v / image_height

        viewport_upper_left = (self.center - self.w * focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        # Defocus disk basis
        defocus_radius = focus_dist * math.tan(math.radians(defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    @staticmethod
    def builder(image_width: int, image_height: int, **settings) -> CameraBuilder:
        return CameraBuilder(image_width, image_height, **settings)

    @property
    def aspect_ratio(self) -> float:
        return self.image_width / self.image_height

    def render(self, x: int, y: int, world, rng=None) -> Color3:
        """
        Estimates the linear radiance of pixel (x, y) by averaging
        samples_per_pixel independent paths.
        """
        rng = rng or random
        color = Color3(0, 0, 0)
        for _ in range(self.samples_per_pixel):
            ray = self.get_ray(x, y, rng)
            color = color + self.ray_color(ray, self.max_depth, world, rng)
        return color / self.samples_per_pixel

    def ray_color(self, ray: Ray, depth: int, world, rng=random) -> Color3:
        """
        Radiance arriving along ray, following at most depth bounces.
        Lights contribute only when a path happens to reach them.

        The path is followed iteratively: throughput is the product of the
        attenuations so far, and every emitter or background reached adds
        throughput times its radiance.
        """
        color = BLACK
        throughput = Color3(1.0, 1.0, 1.0)
        for _ in range(depth):
            rec = world.hit(ray, Interval(T_MIN, math.inf))
            if rec is None:
                return color + throughput * self.background

            color = color + throughput * rec.material.emitted()
            scatter_result = rec.material.scatter(ray, rec, rng)
            if scatter_result is None:
                return color

            ray, attenuation = scatter_result
            throughput = throughput * attenuation
        return color

    def get_ray(self, x: int, y: int, rng=random) -> Ray:
        """
        Ray through a jittered point inside pixel (x, y), starting on the
        defocus disk when the lens has an aperture.
        """
        offset_u = rng.random() - 0.5
        offset_v = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (x + offset_u)
                        + self.pixel_delta_v * (y + offset_v))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng=random) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
