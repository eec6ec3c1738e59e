# materials/light.py
from core.color import Color
from core.vector import Vector3

class PointLight:
    """
    A point light with a position, a color used for specular highlights,
    and a non-negative intensity scalar applied to its whole contribution.
    """
    def __init__(self, position: Vector3, color: Color = None, intensity: float = 1.0):
        if intensity < 0:
            raise ValueError(f"Light intensity must be non-negative, got {intensity}")
        self.position = position
        self.color = color if color is not None else Color(255, 255, 255)
        self.intensity = float(intensity)

    def __repr__(self) -> str:
        return f"PointLight({self.position}, {self.color}, intensity={self.intensity})"
