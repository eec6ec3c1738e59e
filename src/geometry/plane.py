# geometry/plane.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, RAY_EPSILON
from materials.material import Material

# Rays whose direction is this close to perpendicular to the normal are
# treated as parallel and never hit.
PARALLEL_EPSILON = 1e-6

class Plane(Hittable):
    """
    An infinite plane through a point. The normal is normalized once on
    construction and is the same everywhere on the surface.
    """
    def __init__(self, point: Vector3, normal: Vector3, material: Material):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray) -> Optional[float]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) <= PARALLEL_EPSILON:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t >= RAY_EPSILON:
            return t
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def __repr__(self) -> str:
        return f"Plane(point={self.point}, normal={self.normal})"
