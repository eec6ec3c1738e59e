import numpy as np
import pytest
from core.color import Color
from renderer.image import Image

# --- Tests for the image buffer ---

def test_new_image_is_filled_with_background():
    img = Image(4, 3, Color(80, 90, 110))
    assert img.pixel_count == 12
    assert all(c == Color(80, 90, 110) for c in img.pixels())

def test_put_and_get_pixel_row_major():
    img = Image(3, 2, Color(0, 0, 0))
    img.put_pixel(2, 1, Color(1, 2, 3))
    assert img.get_pixel(2, 1) == Color(1, 2, 3)
    assert list(img.pixels())[5] == Color(1, 2, 3)

def test_out_of_bounds_writes_are_ignored():
    img = Image(2, 2, Color(0, 0, 0))
    for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
        img.put_pixel(x, y, Color(255, 255, 255))
    assert np.all(img.data == 0)

# --- Tests for file output ---

def test_save_ppm_format(tmp_path):
    img = Image(2, 1, Color(0, 0, 0))
    img.put_pixel(0, 0, Color(1, 2, 3))
    img.put_pixel(1, 0, Color(4, 5, 6))
    path = tmp_path / "out.ppm"
    img.save_ppm(str(path), verbose=False)
    assert path.read_text() == "P3\n2 1\n255\n1 2 3\n4 5 6\n"

def test_save_ppm_reports_success(tmp_path, capsys):
    path = tmp_path / "out.ppm"
    Image(1, 1).save_ppm(str(path))
    assert f"Saved: {path}" in capsys.readouterr().out

def test_save_ppm_failure_raises(tmp_path):
    with pytest.raises(OSError):
        Image(1, 1).save_ppm(str(tmp_path / "missing" / "out.ppm"), verbose=False)

def test_ppm_and_png_load_back(tmp_path):
    img = Image(3, 2, Color(10, 20, 30))
    img.put_pixel(1, 1, Color(200, 100, 0))
    ppm = tmp_path / "a.ppm"
    png = tmp_path / "a.png"
    img.save_ppm(str(ppm), verbose=False)
    img.save_png(str(png), verbose=False)
    assert Image.load(str(ppm)) == img
    assert Image.load(str(png)) == img

def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Image.load(str(tmp_path / "nope.ppm"))

def test_load_garbage_file(tmp_path):
    path = tmp_path / "bad.ppm"
    path.write_text("not an image")
    with pytest.raises(ValueError):
        Image.load(str(path))

def test_from_array_checks_shape():
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((2, 2), dtype=np.uint8))
