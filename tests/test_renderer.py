import numpy as np
import pytest
from core.color import Color
from renderer.evaluation import evaluate_image
from renderer.raytracer import Renderer
from scenes.cases import get_case
from scenes.config import build_scene

def setup(case, width, height):
    scene, camera, width, height = build_scene(get_case(case), width, height)
    return scene, camera, Renderer(width, height, verbose=False)

# --- Tests for the Python render loop ---

def test_render_is_deterministic():
    scene, camera, renderer = setup("case1", 48, 36)
    first = renderer.render(scene, camera)
    second = renderer.render(scene, camera)
    assert np.array_equal(first.image.data, second.image.data)
    assert np.array_equal(first.shadow_mask.data, second.shadow_mask.data)

def test_buffers_have_image_shape():
    scene, camera, renderer = setup("case1", 40, 30)
    result = renderer.render(scene, camera)
    assert result.image.data.shape == (30, 40, 3)
    assert result.shadow_mask.data.shape == (30, 40, 3)
    assert result.render_time_ms > 0

def test_mask_is_binary_and_marks_only_hits():
    scene, camera, renderer = setup("case1", 40, 30)
    result = renderer.render(scene, camera)
    mask = result.shadow_mask.data
    assert set(np.unique(mask).tolist()) <= {0, 255}
    assert np.array_equal(mask[:, :, 0], mask[:, :, 1])
    assert np.array_equal(mask[:, :, 0], mask[:, :, 2])
    for y in range(30):
        for x in range(40):
            rec = scene.intersect(camera.get_ray(x, y))
            if not rec.hit:
                assert result.image.get_pixel(x, y) == scene.background
                assert mask[y, x, 0] == 255
            else:
                expected = scene.is_in_shadow(rec.point, scene.lights[0].position)
                assert (mask[y, x, 0] == 0) == expected

def test_masked_pixels_count_as_shadow():
    """With one light a masked pixel is ambient only, so below the threshold."""
    scene, camera, renderer = setup("case1", 64, 48)
    result = renderer.render(scene, camera)
    masked = int(np.count_nonzero(result.shadow_mask.data[:, :, 0] == 0))
    assert masked > 0
    assert evaluate_image(result.image).shadow_pixels >= masked

def test_scene_without_lights_has_white_mask():
    scene, camera, renderer = setup("case1", 32, 24)
    scene.lights.clear()
    result = renderer.render(scene, camera)
    assert np.all(result.shadow_mask.data == 255)

def test_progress_is_reported(capsys):
    scene, camera, _ = setup("single_sphere", 20, 120)
    Renderer(20, 120, progress_interval=60).render(scene, camera)
    out = capsys.readouterr().out
    assert "Progress: 0%" in out
    assert "Progress: 50%" in out

def test_invalid_configuration():
    scene, camera, renderer = setup("case1", 32, 24)
    with pytest.raises(ValueError):
        Renderer(32, 24, backend="cuda")
    with pytest.raises(ValueError):
        Renderer(32, 24, mask_light=3, verbose=False).render(scene, camera)
    with pytest.raises(ValueError):
        Renderer(64, 48, verbose=False).render(scene, camera)

def test_single_sphere_end_to_end(tmp_path):
    """Reference scenario: 800x600, one sphere, one light."""
    scene, camera, renderer = setup("single_sphere", 800, 600)
    assert scene.background == Color(80, 90, 110)
    result = renderer.render(scene, camera)
    path = tmp_path / "render.ppm"
    result.image.save_ppm(str(path), verbose=False)

    metrics = evaluate_image(result.image, 0.30, result.render_time_ms)
    assert 0.0 < metrics.shadow_area_ratio < 1.0
    assert metrics.render_time_ms > 0
    lines = path.read_text().splitlines()
    assert lines[:3] == ["P3", "800 600", "255"]
    assert len(lines) - 3 == 480000

# --- Tests for the compiled backend ---

def test_numba_backend_matches_python():
    pytest.importorskip("numba")
    for case in ("case1", "room"):
        scene, camera, renderer = setup(case, 64, 48)
        expected = renderer.render(scene, camera)
        actual = Renderer(64, 48, backend="numba", verbose=False).render(scene, camera)
        assert np.array_equal(expected.image.data, actual.image.data)
        assert np.array_equal(expected.shadow_mask.data, actual.shadow_mask.data)

def test_numba_backend_is_deterministic():
    pytest.importorskip("numba")
    scene, camera, _ = setup("room", 80, 60)
    renderer = Renderer(80, 60, backend="numba", verbose=False)
    first = renderer.render(scene, camera)
    second = renderer.render(scene, camera)
    assert np.array_equal(first.image.data, second.image.data)
    assert np.array_equal(first.shadow_mask.data, second.shadow_mask.data)

def test_numba_backend_without_lights():
    pytest.importorskip("numba")
    scene, camera, _ = setup("case1", 32, 24)
    scene.lights.clear()
    result = Renderer(32, 24, backend="numba", verbose=False).render(scene, camera)
    assert np.all(result.shadow_mask.data == 255)
