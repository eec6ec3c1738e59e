# renderer/evaluation.py
import numpy as np
from renderer.image import Image

DEFAULT_SHADOW_THRESHOLD = 0.30

class EvalMetrics:
    """
    Shadow statistics of a finished image. Purely a report; nothing reads
    these values back into rendering.
    """
    def __init__(self, render_time_ms: float = 0.0, shadow_pixels: int = 0,
                 shadow_area_ratio: float = 0.0, total_pixels: int = 0):
        self.render_time_ms = render_time_ms
        self.shadow_pixels = shadow_pixels
        self.shadow_area_ratio = shadow_area_ratio
        self.total_pixels = total_pixels

    @property
    def pixels_per_second(self) -> float:
        if self.render_time_ms <= 0:
            return 0.0
        return self.total_pixels / (self.render_time_ms / 1000.0)

    def report(self, threshold: float = DEFAULT_SHADOW_THRESHOLD) -> str:
        lines = [
            "=== SHADOW METRICS ===",
            f"Shadow pixels (brightness < {threshold:g}): {self.shadow_pixels}",
            f"Shadow area ratio: {self.shadow_area_ratio * 100.0:.4f} %",
        ]
        if self.render_time_ms > 0:
            lines.append(f"Render time: {self.render_time_ms:.2f} ms")
            lines.append(f"Pixels per second: {self.pixels_per_second:.1f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"EvalMetrics(shadow_pixels={self.shadow_pixels}, "
                f"shadow_area_ratio={self.shadow_area_ratio}, render_time_ms={self.render_time_ms})")

def brightness_map(image: Image) -> np.ndarray:
    """Per-pixel mean channel value in [0, 1], shape (height, width)."""
    return image.data.astype(np.float64).sum(axis=2) / (3.0 * 255.0)

def evaluate_image(image: Image, threshold: float = DEFAULT_SHADOW_THRESHOLD,
                   render_time_ms: float = 0.0) -> EvalMetrics:
    """
    Count pixels whose brightness is strictly below ``threshold`` and report
    their share of the image.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Shadow threshold must lie in [0, 1], got {threshold}")
    shadow_pixels = int(np.count_nonzero(brightness_map(image) < threshold))
    total = image.pixel_count
    return EvalMetrics(
        render_time_ms=render_time_ms,
        shadow_pixels=shadow_pixels,
        shadow_area_ratio=shadow_pixels / total,
        total_pixels=total,
    )
