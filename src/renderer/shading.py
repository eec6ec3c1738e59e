# renderer/shading.py
from core.color import Color
from core.ray import Ray
from geometry.hittable import HitRecord
from geometry.world import Scene

def shade(scene: Scene, ray: Ray, rec: HitRecord) -> Color:
    """
    Blinn-Phong direct lighting for a hit.

    The ambient term is always present. Each light that is not occluded adds
    (diffuse + specular) * intensity; occluded lights add nothing. All sums
    saturate per channel.
    """
    mat = rec.material
    result = mat.color * mat.ambient

    view_dir = (-ray.direction).normalize()
    for light in scene.lights:
        if scene.is_in_shadow(rec.point, light.position):
            continue

        light_dir = (light.position - rec.point).normalize()
        diff = max(0.0, rec.normal.dot(light_dir))
        diffuse = mat.color * (mat.diffuse * diff)

        half_dir = (light_dir + view_dir).normalize()
        spec = max(0.0, rec.normal.dot(half_dir)) ** mat.shininess
        specular = light.color * (mat.specular * spec)

        contrib = (diffuse + specular) * light.intensity
        result = result + contrib

    return result

def trace_ray(scene: Scene, ray: Ray) -> Color:
    """Color seen along a primary ray; the background on a miss."""
    rec = scene.intersect(ray)
    if not rec.hit:
        return scene.background
    return shade(scene, ray, rec)
