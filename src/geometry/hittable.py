# geometry/hittable.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

# Minimum accepted ray parameter for a hit. This is a bias chosen for scenes
# at roughly unit scale, not a derived tolerance; it keeps a ray leaving a
# surface from reporting that same surface again.
RAY_EPSILON = 1e-3

class HitRecord:
    """
    Records the nearest ray-object intersection found so far.
    The material is a copy of the hit primitive's material.
    """
    def __init__(self):
        self.t = math.inf       # Ray parameter of the nearest hit
        self.point = None       # Intersection point
        self.normal = None      # Unit surface normal at the intersection
        self.material = None
        self.hit = False

    def __repr__(self) -> str:
        if not self.hit:
            return "HitRecord(miss)"
        return f"HitRecord(t={self.t}, point={self.point}, normal={self.normal})"

class Hittable:
    """
    Interface for shapes a ray can hit. Each shape owns exactly one material.
    """
    material = None

    def intersect(self, ray: Ray) -> Optional[float]:
        """Return the nearest valid ray parameter, or None on a miss."""
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        """Return the unit surface normal at a point on the shape."""
        raise NotImplementedError("normal_at() must be implemented by subclasses.")
