# geometry/box.py
from core.vector import Point3, Vector3
from geometry.quad import Quad
from geometry.world import HittableList

def make_box(a: Point3, b: Point3, material) -> HittableList:
    """
    Builds the axis-aligned box spanned by two opposite corners as six quads.
    The corners may be given in any order; all outward normals point away
    from the box.
    """
    lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    return HittableList([
        Quad(Point3(lo.x, lo.y, hi.z), dx, dy, material),   # front
        Quad(Point3(hi.x, lo.y, hi.z), -dz, dy, material),  # right
        Quad(Point3(hi.x, lo.y, lo.z), -dx, dy, material),  # back
        Quad(Point3(lo.x, lo.y, lo.z), dz, dy, material),   # left
        Quad(Point3(lo.x, hi.y, hi.z), dx, -dz, material),  # top
        Quad(Point3(lo.x, lo.y, lo.z), dx, dz, material),   # bottom
    ])
