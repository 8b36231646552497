# controller.py
import os
import time
from multiprocessing import Pool, cpu_count
from typing import Optional
import numpy as np
from PIL import Image
from raytracing.core.vector import Vector3
from raytracing.camera.camera import Camera
from raytracing.geometry.world import Scene
from raytracing.renderer.raytracer import Renderer
from raytracing.renderer.tone_mapping import to_rgb8

DEFAULT_WIDTH = 860
DEFAULT_HEIGHT = 640

# Per-process render state, installed once by the pool initializer.
_worker_state = None


def _init_worker(renderer: Renderer, scene: Scene, camera: Camera):
    global _worker_state
    _worker_state = (renderer, scene, camera)


def _render_row(j: int):
    renderer, scene, camera = _worker_state
    return j, render_row(renderer, scene, camera, j)


def render_row(renderer: Renderer, scene: Scene, camera: Camera, j: int):
    """Colours of every pixel in row j as a list of (r, g, b) tuples."""
    return [tuple(renderer.render_pixel(i, j, scene, camera)) for i in range(camera.width)]


class Controller:
    """
    Owns the camera, scene, renderer and the image being rendered, plus the
    surface given to newly added objects.
    """
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        self.camera = Camera(width, height)
        self.scene = Scene()
        self.renderer = Renderer()
        self._current_surface = None
        self._allocate_image(width, height)

    def _allocate_image(self, width: int, height: int):
        self.image = np.zeros((height, width, 3), dtype=np.float32)
        self.camera.set_dimensions(width, height)

    @property
    def current_surface(self):
        return self._current_surface

    @current_surface.setter
    def current_surface(self, surface):
        if surface is None:
            raise ValueError("Surface cannot be None")
        self._current_surface = surface

    @property
    def max_bounces(self) -> int:
        return self.renderer.max_bounces

    def set_max_bounces(self, max_bounces: int):
        self.renderer.max_bounces = max_bounces

    def set_background(self, background: Vector3):
        self.renderer.background = background

    def set_camera(self, look_at: Vector3, eye: Vector3, width: int = None,
                   height: int = None, fov: float = None, up: Vector3 = None):
        # One update, so the basis is only checked against the final view.
        self.camera.set_view(eye=eye, look_at=look_at, up=up, fov=fov, width=width, height=height)
        if width is not None or height is not None:
            self._allocate_image(self.camera.width, self.camera.height)

    def set_camera_up(self, up: Vector3):
        self.camera.up = up

    def set_camera_dimensions(self, width: int, height: int):
        self._allocate_image(width, height)

    def clear_scene(self):
        self.scene.clear()

    def add_sphere(self, center: Vector3, radius: float):
        if self._current_surface is None:
            raise RuntimeError("No current surface available")
        return self.scene.add_sphere(center, radius, self._current_surface)

    def add_plane(self, normal: Vector3, point: Vector3):
        if self._current_surface is None:
            raise RuntimeError("No current surface available")
        return self.scene.add_plane(normal, point, self._current_surface)

    def add_ambient_light(self, r: float, g: float, b: float):
        return self.scene.add_ambient_light(r, g, b)

    def add_directional_light(self, r: float, g: float, b: float, direction: Vector3):
        return self.scene.add_directional_light(r, g, b, direction)

    def add_point_light(self, r: float, g: float, b: float, position: Vector3):
        return self.scene.add_point_light(r, g, b, position)

    def render_image(self, workers: Optional[int] = None) -> np.ndarray:
        """
        Renders every pixel of the image, one task per row.

        Args:
            workers: Number of worker processes. None uses every CPU; 1 renders
                in the calling process.

        Returns:
            The float image buffer of shape (height, width, 3).
        """
        height, width = self.camera.height, self.camera.width
        if self.image.shape[:2] != (height, width):
            self._allocate_image(width, height)
        if workers is None:
            workers = cpu_count()
        workers = max(1, min(workers, height))

        print(f"Rendering {width}x{height} image with {workers} worker(s), "
              f"{len(self.scene.objects)} objects, {len(self.scene.lights)} lights")
        start = time.perf_counter()

        if workers == 1:
            for j in range(height):
                self.image[j] = render_row(self.renderer, self.scene, self.camera, j)
        else:
            with Pool(processes=workers, initializer=_init_worker,
                      initargs=(self.renderer, self.scene, self.camera)) as pool:
                # Rows are disjoint, so results can be stored as they arrive.
                for j, row in pool.imap_unordered(_render_row, range(height)):
                    self.image[j] = row

        elapsed = time.perf_counter() - start
        print(f"Rendered in {int(elapsed // 60)}:{elapsed % 60:06.3f}")
        return self.image

    def export_image(self, filename: str) -> str:
        """
        Writes the current image as a PNG file, creating parent directories
        as needed.
        """
        parent = os.path.dirname(filename)
        if parent:
            os.makedirs(parent, exist_ok=True)
        Image.fromarray(to_rgb8(self.image)).save(filename, format="PNG")
        print(f"Image exported as {filename}")
        return filename
