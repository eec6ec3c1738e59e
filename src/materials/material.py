# materials/material.py
from core.color import Color

class Material:
    """
    Blinn-Phong surface description owned by a single primitive.

    Holds the base color and the four shading coefficients: ambient, diffuse,
    specular and shininess (the specular exponent, which must be positive).
    """
    def __init__(self, color: Color = None, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.3, shininess: float = 32.0):
        if shininess <= 0:
            raise ValueError(f"Material shininess must be positive, got {shininess}")
        self.color = color if color is not None else Color(255, 255, 255)
        self.ambient = float(ambient)
        self.diffuse = float(diffuse)
        self.specular = float(specular)
        self.shininess = float(shininess)

    def copy(self) -> "Material":
        return Material(Color(self.color.r, self.color.g, self.color.b),
                        self.ambient, self.diffuse, self.specular, self.shininess)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient
                and self.diffuse == other.diffuse and self.specular == other.specular
                and self.shininess == other.shininess)

    def __repr__(self) -> str:
        return (f"Material({self.color}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")
