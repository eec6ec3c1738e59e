# renderer/raytracer.py
import time
import numpy as np
from camera.camera import Camera
from core.color import BLACK, WHITE
from geometry.world import Scene
from renderer.image import Image
from renderer.shading import trace_ray

BACKENDS = ("python", "numba")
PROGRESS_INTERVAL = 60

class RenderResult:
    """The color render, its binary shadow mask, and the wall-clock time."""
    def __init__(self, image: Image, shadow_mask: Image, render_time_ms: float):
        self.image = image
        self.shadow_mask = shadow_mask
        self.render_time_ms = render_time_ms

    def __repr__(self) -> str:
        return f"RenderResult({self.image}, render_time_ms={self.render_time_ms:.2f})"

class Renderer:
    """
    Casts one primary ray per pixel and fills two buffers: the shaded color
    image and a shadow mask (white = lit or background, black = the hit
    point cannot see light ``mask_light``).

    The ``python`` backend walks the object model pixel by pixel in row-major
    order. The ``numba`` backend runs the same pipeline compiled, spreading
    rows over threads; every pixel only reads the scene and writes its own
    cell, so no locking is needed.
    """
    def __init__(self, width: int, height: int, backend: str = "python", mask_light: int = 0,
                 progress_interval: int = PROGRESS_INTERVAL, verbose: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}'. Available: {', '.join(BACKENDS)}")
        if mask_light < 0:
            raise ValueError(f"Shadow mask light index must be non-negative, got {mask_light}")
        self.width = width
        self.height = height
        self.backend = backend
        self.mask_light = mask_light
        self.progress_interval = max(1, progress_interval)
        self.verbose = verbose

    def render(self, scene: Scene, camera: Camera) -> RenderResult:
        if camera.width != self.width or camera.height != self.height:
            raise ValueError(f"Camera is set up for {camera.width}x{camera.height}, "
                             f"renderer for {self.width}x{self.height}")
        if scene.lights and self.mask_light >= len(scene.lights):
            raise ValueError(f"Shadow mask light {self.mask_light} does not exist; "
                             f"scene has {len(scene.lights)} light(s)")

        image = Image(self.width, self.height, scene.background)
        shadow_mask = Image(self.width, self.height, WHITE)

        t0 = time.perf_counter()
        if self.backend == "numba":
            self._render_numba(scene, camera, image, shadow_mask)
        else:
            self._render_python(scene, camera, image, shadow_mask)
        t1 = time.perf_counter()

        # perf_counter can return identical readings for a tiny image
        render_time_ms = max((t1 - t0) * 1000.0, 1e-6)
        return RenderResult(image, shadow_mask, render_time_ms)

    def _render_python(self, scene: Scene, camera: Camera, image: Image, shadow_mask: Image):
        mask_position = scene.lights[self.mask_light].position if scene.lights else None
        for y in range(self.height):
            for x in range(self.width):
                ray = camera.get_ray(x, y)
                image.put_pixel(x, y, trace_ray(scene, ray))

                rec = scene.intersect(ray)
                if rec.hit and mask_position is not None and scene.is_in_shadow(rec.point, mask_position):
                    shadow_mask.put_pixel(x, y, BLACK)
                else:
                    shadow_mask.put_pixel(x, y, WHITE)
            self._report_progress(y)

    def _render_numba(self, scene: Scene, camera: Camera, image: Image, shadow_mask: Image):
        from renderer.cpu_kernels import render_kernel

        packed = scene.pack()
        if self.verbose:
            print(f"Packed {len(packed['kinds'])} objects and {len(packed['light_intensities'])} lights "
                  f"for the compiled kernel")
        render_kernel(
            image.data, shadow_mask.data, self.width, self.height,
            np.array(camera.position.to_tuple(), dtype=np.float64),
            np.array(camera.forward.to_tuple(), dtype=np.float64),
            np.array(camera.right.to_tuple(), dtype=np.float64),
            np.array(camera.up.to_tuple(), dtype=np.float64),
            camera.half_height, camera.aspect_ratio,
            packed["kinds"], packed["geometry"], packed["colors"], packed["coefficients"],
            packed["light_positions"], packed["light_colors"], packed["light_intensities"],
            packed["background"], self.mask_light,
        )
        # Rows finish out of order across threads; report completion only.
        if self.verbose:
            print("Progress: 100%")

    def _report_progress(self, y: int):
        if self.verbose and y % self.progress_interval == 0:
            print(f"Progress: {y * 100 // self.height}%")
