# materials/presets.py
from core.color import Color
from materials.material import Material

class ColorPresets:
    """Sphere tints used by the reference scenes."""

    PEACH = Color(255, 220, 200)
    SKY = Color(200, 220, 255)
    MINT = Color(220, 255, 200)
    ROSE = Color(255, 180, 180)
    LIME = Color(180, 255, 180)

    FLOOR = Color(200, 200, 200)
    WALL = Color(150, 150, 200)

    WARM_WHITE = Color(255, 255, 230)

class MaterialPresets:
    """Predefined Blinn-Phong materials."""

    @staticmethod
    def glossy(color: Color) -> Material:
        """Mostly diffuse with a tight highlight."""
        return Material(color, ambient=0.2, diffuse=0.8, specular=0.3, shininess=32.0)

    @staticmethod
    def matte(color: Color) -> Material:
        """Broad, weak highlight; used for floors and walls."""
        return Material(color, ambient=0.3, diffuse=0.7, specular=0.2, shininess=8.0)

    @staticmethod
    def wall(color: Color) -> Material:
        return Material(color, ambient=0.4, diffuse=0.6, specular=0.2, shininess=8.0)

    @staticmethod
    def default() -> Material:
        return Material()

PRESETS = {
    "glossy_peach": lambda: MaterialPresets.glossy(ColorPresets.PEACH),
    "glossy_sky": lambda: MaterialPresets.glossy(ColorPresets.SKY),
    "glossy_mint": lambda: MaterialPresets.glossy(ColorPresets.MINT),
    "glossy_rose": lambda: MaterialPresets.glossy(ColorPresets.ROSE),
    "glossy_lime": lambda: MaterialPresets.glossy(ColorPresets.LIME),
    "floor": lambda: MaterialPresets.matte(ColorPresets.FLOOR),
    "wall": lambda: MaterialPresets.wall(ColorPresets.WALL),
    "default": MaterialPresets.default,
}

def material_preset(name: str) -> Material:
    """Return a fresh material for a preset name."""
    try:
        return PRESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown material preset '{name}'. Available: {', '.join(sorted(PRESETS))}")
