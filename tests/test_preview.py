import pytest
from core.color import Color
from renderer.image import Image

pygame = pytest.importorskip("pygame")
from renderer.preview import GAP, PreviewWindow, image_to_surface

# --- Tests for the preview window ---

def test_image_to_surface_keeps_orientation():
    img = Image(5, 3, Color(0, 0, 0))
    img.put_pixel(4, 1, Color(10, 20, 30))
    surface = image_to_surface(img)
    assert surface.get_size() == (5, 3)
    assert tuple(surface.get_at((4, 1)))[:3] == (10, 20, 30)

def test_compose_places_mask_beside_render():
    render = Image(4, 2, Color(200, 0, 0))
    mask = Image(4, 2, Color(255, 255, 255))
    window = PreviewWindow(render, mask)
    assert (window.window_width, window.window_height) == (4 + GAP + 4, 2)
    screen = pygame.Surface((window.window_width, window.window_height))
    window.compose(screen)
    assert tuple(screen.get_at((0, 0)))[:3] == (200, 0, 0)
    assert tuple(screen.get_at((4 + GAP, 1)))[:3] == (255, 255, 255)
    assert tuple(screen.get_at((4, 0)))[:3] == (0, 0, 0)
