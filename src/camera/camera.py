# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera aimed with a look-at target.

    ``fov`` is the vertical field of view in radians; the horizontal extent
    follows from the image aspect ratio.
    """
    def __init__(self, position: Vector3, look_at: Vector3, up: Vector3,
                 fov: float, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if not 0.0 < fov < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {fov}")
        self.position = position
        self.look_at = look_at
        self.world_up = up
        self.fov = fov
        self.width = width
        self.height = height
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport scale."""
        view = self.look_at - self.position
        if view.length() == 0.0:
            raise ValueError("Camera position and look_at must differ")
        self.forward = view.normalize()
        right = self.forward.cross(self.world_up)
        if right.length() == 0.0:
            raise ValueError("Camera up vector must not be parallel to the view direction")
        self.right = right.normalize()
        self.up = self.right.cross(self.forward).normalize()

        self.aspect_ratio = self.width / self.height
        self.half_height = math.tan(self.fov / 2.0)

    def pixel_offsets(self, x: int, y: int):
        """Screen-plane offsets (px, py) through the center of pixel (x, y)."""
        px = (2.0 * (x + 0.5) / self.width - 1.0) * self.half_height * self.aspect_ratio
        py = (1.0 - 2.0 * (y + 0.5) / self.height) * self.half_height
        return px, py

    def get_ray(self, x: int, y: int) -> Ray:
        """Primary ray through the center of pixel (x, y); y grows downward."""
        px, py = self.pixel_offsets(x, y)
        direction = (self.forward + self.right * px + self.up * py).normalize()
        return Ray(self.position, direction)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position}, look_at={self.look_at}, "
                f"fov={math.degrees(self.fov):.1f}deg, {self.width}x{self.height})")
