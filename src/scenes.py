# scenes.py
"""
Demo scenes. Each scene function fills in the view settings of a
CameraBuilder and returns the world to render.
"""
from core.vector import Vector3, Point3, Color3
from camera.camera import CameraBuilder
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.quad import Quad
from geometry.box import make_box
from geometry.transforms import Translate, RotateY
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.diffuse_light import DiffuseLight
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets

def spheres(builder: CameraBuilder) -> HittableList:
    """Three spheres on a large ground sphere, with a shallow depth of field."""
    ground = Lambertian(ColorPresets.GROUND)
    center = Lambertian(ColorPresets.NAVY)
    glass = DielectricPresets.glass()
    metal = Metal(Color3(0.8, 0.6, 0.2), fuzz=0.0)

    world = HittableList([
        Sphere(Point3(0, -100.5, -1), 100, ground),
        Sphere(Point3(0, 0, -1), 0.5, center),
        Sphere(Point3(-1, 0, -1), 0.5, glass),
        # Negative radius flips the normals: a hollow glass bubble.
        Sphere(Point3(-1, 0, -1), -0.4, glass),
        Sphere(Point3(1, 0, -1), 0.5, metal),
    ])

    (builder.background(ColorPresets.SKY)
            .vfov(20)
            .look_from(Point3(-2, 2, 1))
            .look_at(Point3(0, 0, -1))
            .vup(Vector3(0, 1, 0))
            .defocus_angle(3.0)
            .focus_dist(3.4))
    return world

def cornell_box(builder: CameraBuilder) -> HittableList:
    """The Cornell box: colored walls, a ceiling light and two rotated boxes."""
    red = Lambertian(ColorPresets.CORNELL_RED)
    white = Lambertian(ColorPresets.CORNELL_WHITE)
    green = Lambertian(ColorPresets.CORNELL_GREEN)
    light = DiffuseLight(Color3(15, 15, 15))

    world = HittableList([
        Quad(Point3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green),
        Quad(Point3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red),
        Quad(Point3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light),
        Quad(Point3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white),
        Quad(Point3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white),
        Quad(Point3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white),
    ])

    tall_box = make_box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(Vector3(265, 0, 295), RotateY(15, tall_box)))

    short_box = make_box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    world.add(Translate(Vector3(130, 0, 65), RotateY(-18, short_box)))

    (builder.background(ColorPresets.BLACK)
            .vfov(40)
            .look_from(Point3(278, 278, -800))
            .look_at(Point3(278, 278, 0))
            .vup(Vector3(0, 1, 0))
            .defocus_angle(0.0))
    return world

def showcase(builder: CameraBuilder) -> HittableList:
    """Preset metals and dielectrics lit by a small spherical light."""
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)),
        Sphere(Point3(2, 1, 0), 1.0, MetalPresets.gold()),
        Sphere(Point3(-2, 1, 0), 1.0, DielectricPresets.glass()),
        Sphere(Point3(0, 0.7, 2), 0.7, DielectricPresets.water()),
        Sphere(Point3(-3, 1, -3), 1.0, MetalPresets.brushed_metal()),
        Sphere(Point3(0, 6, 2), 0.5, LightPresets.warm_light(20.0)),
    ])

    (builder.background(ColorPresets.SKY * 0.3)
            .vfov(40)
            .look_from(Point3(0, 3, 10))
            .look_at(Point3(0, 1, 0))
            .vup(Vector3(0, 1, 0))
            .defocus_angle(0.6)
            .focus_dist(10.0))
    return world

# name -> (scene function, aspect ratio)
SCENES = {
    "spheres": (spheres, 16 / 9),
    "cornell": (cornell_box, 1.0),
    "showcase": (showcase, 16 / 9),
}
