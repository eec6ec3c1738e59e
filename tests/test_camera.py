import math
import pytest
from camera.camera import Camera
from core.vector import Vector3

def make_camera(width=800, height=600, fov_deg=60.0):
    return Camera(Vector3(0, 3, 8), Vector3(0, 0.5, 0), Vector3(0, 1, 0),
                  math.radians(fov_deg), width, height)

# --- Tests for Camera ---

def test_basis_is_orthonormal():
    cam = make_camera()
    for v in (cam.forward, cam.right, cam.up):
        assert v.length() == pytest.approx(1.0)
    assert cam.forward.dot(cam.right) == pytest.approx(0.0, abs=1e-12)
    assert cam.forward.dot(cam.up) == pytest.approx(0.0, abs=1e-12)
    assert cam.right.dot(cam.up) == pytest.approx(0.0, abs=1e-12)
    assert cam.up.y > 0
    assert cam.right.x > 0

def test_center_pixel_looks_forward():
    cam = make_camera(3, 3)
    ray = cam.get_ray(1, 1)
    assert ray.origin == Vector3(0, 3, 8)
    assert ray.direction.dot(cam.forward) == pytest.approx(1.0)

def test_pixel_orientation():
    cam = make_camera(4, 4)
    top_left = cam.get_ray(0, 0).direction
    bottom_right = cam.get_ray(3, 3).direction
    assert top_left.dot(cam.right) < 0 and top_left.dot(cam.up) > 0
    assert bottom_right.dot(cam.right) > 0 and bottom_right.dot(cam.up) < 0

def test_vertical_field_of_view():
    cam = make_camera(1, 1001, fov_deg=60.0)
    direction = cam.get_ray(0, 0).direction
    angle = math.degrees(math.acos(direction.dot(cam.forward)))
    assert angle == pytest.approx(30.0, abs=0.1)

def test_aspect_ratio_widens_horizontal_extent():
    cam = make_camera(800, 600)
    px, py = cam.pixel_offsets(799, 0)
    assert px / py == pytest.approx(4.0 / 3.0, rel=1e-2)

def test_invalid_parameters():
    with pytest.raises(ValueError):
        make_camera(0, 10)
    with pytest.raises(ValueError):
        make_camera(fov_deg=180.0)
    with pytest.raises(ValueError):
        Camera(Vector3(0, 0, 5), Vector3(0, 0, 5), Vector3(0, 1, 0), math.radians(60), 8, 6)
    with pytest.raises(ValueError):
        Camera(Vector3(0, 5, 0), Vector3(0, 0, 0), Vector3(0, 1, 0), math.radians(60), 8, 6)
