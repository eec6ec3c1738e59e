# src/geometry/world.py
from typing import List
import numpy as np
from core.color import Color, DEFAULT_BACKGROUND
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from geometry.plane import Plane
from geometry.sphere import Sphere
from materials.light import PointLight

# Distance the shadow ray origin is pushed toward the light. Like
# RAY_EPSILON this is an empirical acne bias, tuned for unit-scale scenes.
SHADOW_BIAS = 1e-4

# Object kind tags used in the packed representation.
KIND_SPHERE = 0
KIND_PLANE = 1

class Scene:
    """
    Owns every primitive and light plus the background color.

    Objects are scanned with a linear search: all spheres first, then the
    planes, each group in insertion order. ``add`` keeps ``objects`` in that
    order, so on equal distance a sphere wins over a plane whatever order
    they were added in. Once rendering starts the scene is only read.
    """
    def __init__(self, background: Color = None):
        self.objects: List[Hittable] = []
        self.lights: List[PointLight] = []
        self.background = background if background is not None else DEFAULT_BACKGROUND

    def add(self, obj: Hittable):
        if isinstance(obj, Sphere):
            self.objects.insert(len(self.spheres), obj)
        else:
            self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    @property
    def spheres(self) -> List[Sphere]:
        return [obj for obj in self.objects if isinstance(obj, Sphere)]

    @property
    def planes(self) -> List[Plane]:
        return [obj for obj in self.objects if isinstance(obj, Plane)]

    def intersect(self, ray: Ray) -> HitRecord:
        """
        Nearest-hit query. Only a strictly closer hit replaces the current
        one, so the earliest added object wins a tie.
        """
        rec = HitRecord()
        for obj in self.objects:
            t = obj.intersect(ray)
            if t is not None and t < rec.t:
                rec.t = t
                rec.point = ray.at(t)
                rec.normal = obj.normal_at(rec.point)
                rec.material = obj.material.copy()
                rec.hit = True
        return rec

    def is_in_shadow(self, point: Vector3, light_position: Vector3) -> bool:
        """
        Hard shadow test: True when some object lies between the point and
        the light. The shadow ray starts SHADOW_BIAS along the light
        direction, not along the surface normal.
        """
        to_light = light_position - point
        light_dist = to_light.length()
        if light_dist == 0.0:
            # A light sitting on the point cannot be blocked
            return False
        light_dir = to_light.normalize()

        shadow_ray = Ray(point + light_dir * SHADOW_BIAS, light_dir)
        rec = self.intersect(shadow_ray)
        return rec.hit and rec.t < light_dist

    def pack(self) -> dict:
        """
        Flatten the scene into numpy arrays for the compiled kernels.

        Object rows keep insertion order. For spheres ``geometry`` holds
        (cx, cy, cz, radius, 0, 0); for planes (px, py, pz, nx, ny, nz).
        """
        n = len(self.objects)
        m = len(self.lights)
        kinds = np.zeros(n, dtype=np.int32)
        geometry = np.zeros((n, 6), dtype=np.float64)
        colors = np.zeros((n, 3), dtype=np.int64)
        coefficients = np.zeros((n, 4), dtype=np.float64)

        for i, obj in enumerate(self.objects):
            if isinstance(obj, Sphere):
                kinds[i] = KIND_SPHERE
                geometry[i] = [obj.center.x, obj.center.y, obj.center.z, obj.radius, 0.0, 0.0]
            elif isinstance(obj, Plane):
                kinds[i] = KIND_PLANE
                geometry[i] = [obj.point.x, obj.point.y, obj.point.z,
                               obj.normal.x, obj.normal.y, obj.normal.z]
            else:
                raise ValueError(f"Cannot pack object of type {type(obj).__name__}")
            mat = obj.material
            colors[i] = mat.color.to_tuple()
            coefficients[i] = [mat.ambient, mat.diffuse, mat.specular, mat.shininess]

        light_positions = np.zeros((m, 3), dtype=np.float64)
        light_colors = np.zeros((m, 3), dtype=np.int64)
        light_intensities = np.zeros(m, dtype=np.float64)
        for i, light in enumerate(self.lights):
            light_positions[i] = light.position.to_tuple()
            light_colors[i] = light.color.to_tuple()
            light_intensities[i] = light.intensity

        return {
            "kinds": kinds,
            "geometry": geometry,
            "colors": colors,
            "coefficients": coefficients,
            "light_positions": light_positions,
            "light_colors": light_colors,
            "light_intensities": light_intensities,
            "background": np.array(self.background.to_tuple(), dtype=np.int64),
        }

    def __repr__(self) -> str:
        return f"Scene({len(self.objects)} objects, {len(self.lights)} lights)"
