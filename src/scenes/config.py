# scenes/config.py
"""Scene configuration: plain dicts, optionally loaded from JSON, validated
and turned into a Scene plus Camera."""
import json
import math
import os
from typing import Any, Dict, Optional, Tuple
from camera.camera import Camera
from core.color import Color, DEFAULT_BACKGROUND
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.light import PointLight
from materials.material import Material
from materials.presets import PRESETS, material_preset

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_UP = (0.0, 1.0, 0.0)

MATERIAL_KEYS = ("color", "ambient", "diffuse", "specular", "shininess")

def load_scene(json_path: str) -> Dict[str, Any]:
    """Load a scene configuration from a JSON file."""
    if not os.path.exists(json_path):
        raise FileNotFoundError(f"Scene file not found: {json_path}")
    with open(json_path, "r") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Scene file {json_path} is not valid JSON: {e}") from e

def _check_triple(value, what: str):
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{what} must be a list of 3 numbers, got {value!r}")
    for v in value:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"{what} must be a list of 3 numbers, got {value!r}")

def _check_number(value, what: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")

def _check_color(value, what: str):
    _check_triple(value, what)
    if any(v < 0 or v > 255 for v in value):
        raise ValueError(f"{what} channels must lie in [0, 255], got {value!r}")

def _check_material(value, what: str):
    if isinstance(value, str):
        if value not in PRESETS:
            raise ValueError(f"{what}: unknown material preset '{value}'")
        return
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a preset name or a dict, got {value!r}")
    missing = [k for k in MATERIAL_KEYS if k not in value]
    if missing:
        raise ValueError(f"{what} is missing {', '.join(missing)}")
    _check_color(value["color"], f"{what}.color")
    for key in ("ambient", "diffuse", "specular", "shininess"):
        _check_number(value[key], f"{what}.{key}")
    if value["shininess"] <= 0:
        raise ValueError(f"{what}.shininess must be positive")

def validate_scene(scene: Dict[str, Any]) -> None:
    """Check the structure of a scene configuration, raising ValueError."""
    if not isinstance(scene, dict):
        raise ValueError("Scene configuration must be a dict")
    if "camera" not in scene:
        raise ValueError("Scene must have camera")

    cam = scene["camera"]
    for key in ("position", "look_at"):
        if key not in cam:
            raise ValueError(f"Camera must have {key}")
        _check_triple(cam[key], f"camera.{key}")
    _check_triple(cam.get("up", DEFAULT_UP), "camera.up")
    if "fov" not in cam:
        raise ValueError("Camera must have fov")
    _check_number(cam["fov"], "camera.fov")
    if not 0 < cam["fov"] < 180:
        raise ValueError(f"camera.fov must be in (0, 180) degrees, got {cam['fov']}")

    render = scene.get("render", {})
    for key in ("width", "height"):
        if key in render and (not isinstance(render[key], int) or render[key] <= 0):
            raise ValueError(f"render.{key} must be a positive integer, got {render[key]!r}")
    if "threshold" in render:
        _check_number(render["threshold"], "render.threshold")
        if not 0.0 <= render["threshold"] <= 1.0:
            raise ValueError(f"render.threshold must lie in [0, 1], got {render['threshold']}")

    if "background" in scene:
        _check_color(scene["background"], "background")

    for i, sphere in enumerate(scene.get("spheres", [])):
        where = f"spheres[{i}]"
        for key in ("center", "radius", "material"):
            if key not in sphere:
                raise ValueError(f"{where} must have {key}")
        _check_triple(sphere["center"], f"{where}.center")
        _check_number(sphere["radius"], f"{where}.radius")
        if sphere["radius"] <= 0:
            raise ValueError(f"{where}.radius must be positive, got {sphere['radius']}")
        _check_material(sphere["material"], f"{where}.material")

    for i, plane in enumerate(scene.get("planes", [])):
        where = f"planes[{i}]"
        for key in ("point", "normal", "material"):
            if key not in plane:
                raise ValueError(f"{where} must have {key}")
        _check_triple(plane["point"], f"{where}.point")
        _check_triple(plane["normal"], f"{where}.normal")
        if all(v == 0 for v in plane["normal"]):
            raise ValueError(f"{where}.normal must be non-zero")
        _check_material(plane["material"], f"{where}.material")

    for i, light in enumerate(scene.get("lights", [])):
        where = f"lights[{i}]"
        if "position" not in light:
            raise ValueError(f"{where} must have position")
        _check_triple(light["position"], f"{where}.position")
        if "color" in light:
            _check_color(light["color"], f"{where}.color")
        if "intensity" in light:
            _check_number(light["intensity"], f"{where}.intensity")
        if light.get("intensity", 1.0) < 0:
            raise ValueError(f"{where}.intensity must be non-negative")

def build_material(value) -> Material:
    if isinstance(value, str):
        return material_preset(value)
    return Material(Color.from_sequence(value["color"]), value["ambient"], value["diffuse"],
                    value["specular"], value["shininess"])

def build_scene(config: Dict[str, Any], width: Optional[int] = None,
                height: Optional[int] = None) -> Tuple[Scene, Camera, int, int]:
    """
    Validate ``config`` and construct the scene and camera. All spheres are
    added before all planes. ``width``/``height`` override the config.
    """
    validate_scene(config)
    render = config.get("render", {})
    width = width if width is not None else render.get("width", DEFAULT_WIDTH)
    height = height if height is not None else render.get("height", DEFAULT_HEIGHT)

    background = config.get("background")
    scene = Scene(Color.from_sequence(background) if background is not None else DEFAULT_BACKGROUND)
    for sphere in config.get("spheres", []):
        scene.add(Sphere(Vector3.from_sequence(sphere["center"]), sphere["radius"],
                         build_material(sphere["material"])))
    for plane in config.get("planes", []):
        scene.add(Plane(Vector3.from_sequence(plane["point"]), Vector3.from_sequence(plane["normal"]),
                        build_material(plane["material"])))
    for light in config.get("lights", []):
        color = light.get("color")
        scene.add_light(PointLight(Vector3.from_sequence(light["position"]),
                                   Color.from_sequence(color) if color is not None else None,
                                   light.get("intensity", 1.0)))

    cam = config["camera"]
    camera = Camera(
        position=Vector3.from_sequence(cam["position"]),
        look_at=Vector3.from_sequence(cam["look_at"]),
        up=Vector3.from_sequence(cam.get("up", DEFAULT_UP)),
        fov=math.radians(cam["fov"]),
        width=width,
        height=height,
    )
    return scene, camera, width, height
