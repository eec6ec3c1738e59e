# scenes/cases.py
import copy
from typing import Any, Dict

_CAMERA = {"position": [0.0, 3.0, 8.0], "look_at": [0.0, 0.5, 0.0], "up": [0.0, 1.0, 0.0], "fov": 60.0}
_RENDER = {"width": 800, "height": 600, "threshold": 0.30}
_LIGHT = {"position": [3.0, 1.0, 3.0], "color": [255, 255, 230], "intensity": 1.0}
_BACKGROUND = [80, 90, 110]

CASES = {
    # Five glossy spheres under one point light, hard shadows only.
    "case1": {
        "name": "RAY TRACER CASE 1: 5 SPHERES, HARD SHADOWS",
        "camera": _CAMERA,
        "render": _RENDER,
        "background": _BACKGROUND,
        "spheres": [
            {"center": [-1.5, 1.0, 1.5], "radius": 0.5, "material": "glossy_peach"},
            {"center": [1.5, 0.0, 2.5], "radius": 0.5, "material": "glossy_sky"},
            {"center": [0.0, 0.5, 2.0], "radius": 0.5, "material": "glossy_mint"},
            {"center": [-0.8, 2.3, 1.5], "radius": 0.5, "material": "glossy_rose"},
            {"center": [0.8, 1.8, 2.0], "radius": 0.5, "material": "glossy_lime"},
        ],
        "planes": [],
        "lights": [_LIGHT],
    },
    "single_sphere": {
        "name": "SINGLE SPHERE, HARD SHADOWS",
        "camera": _CAMERA,
        "render": _RENDER,
        "background": _BACKGROUND,
        "spheres": [
            {"center": [0.0, 0.5, 2.0], "radius": 0.5, "material": "glossy_mint"},
        ],
        "planes": [],
        "lights": [_LIGHT],
    },
    # The case1 spheres standing in a room: floor, back and side walls.
    "room": {
        "name": "5 SPHERES IN A ROOM, HARD SHADOWS",
        "camera": _CAMERA,
        "render": _RENDER,
        "background": _BACKGROUND,
        "spheres": [
            {"center": [-1.5, 1.0, 1.5], "radius": 0.5, "material": "glossy_peach"},
            {"center": [1.5, 0.0, 2.5], "radius": 0.5, "material": "glossy_sky"},
            {"center": [0.0, 0.5, 2.0], "radius": 0.5, "material": "glossy_mint"},
            {"center": [-0.8, 2.3, 1.5], "radius": 0.5, "material": "glossy_rose"},
            {"center": [0.8, 1.8, 2.0], "radius": 0.5, "material": "glossy_lime"},
        ],
        "planes": [
            {"point": [0.0, -0.5, 0.0], "normal": [0.0, 1.0, 0.0], "material": "floor"},
            {"point": [0.0, 0.0, -5.0], "normal": [0.0, 0.0, 1.0], "material": "wall"},
            {"point": [-5.0, 0.0, 0.0], "normal": [1.0, 0.0, 0.0], "material": "wall"},
            {"point": [5.0, 0.0, 0.0], "normal": [-1.0, 0.0, 0.0], "material": "wall"},
        ],
        "lights": [_LIGHT],
    },
}

def get_case(name: str) -> Dict[str, Any]:
    """Return a private copy of a built-in scene configuration."""
    try:
        return copy.deepcopy(CASES[name])
    except KeyError:
        raise ValueError(f"Unknown scene '{name}'. Available: {', '.join(sorted(CASES))}")
