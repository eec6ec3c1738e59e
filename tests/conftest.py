import os
import pytest
from core.color import Color
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.light import PointLight
from materials.material import Material

# Keep pygame headless when the preview tests run.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

@pytest.fixture
def red_material():
    return Material(Color(200, 100, 50), ambient=0.1, diffuse=0.5, specular=0.0, shininess=1.0)

@pytest.fixture
def unit_sphere_scene(red_material):
    """Unit sphere at the origin lit from straight ahead (+z)."""
    scene = Scene(Color(80, 90, 110))
    scene.add(Sphere(Vector3(0, 0, 0), 1.0, red_material))
    scene.add_light(PointLight(Vector3(0, 0, 9), Color(255, 255, 255), 1.0))
    return scene
