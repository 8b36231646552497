# api.py
import os
from typing import Optional
from raytracing.core.vector import Point3, Vector3
from raytracing.controller import Controller
from raytracing.materials import presets


class RayTraceAPI:
    """
    High-level interface for building and rendering a scene out of spheres,
    planes and ambient, directional and point lights.

    New objects take the current surface, chosen by name from the predefined
    surfaces ("matte black" to start with).
    """
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        if width is None or height is None:
            self.controller = Controller()
        else:
            self.controller = Controller(width, height)
        self.set_current_surface("matte black")

    def set_current_surface(self, surface_name: str):
        surface = presets.lookup(surface_name)
        if surface is None:
            raise ValueError(f"Unknown surface name: {surface_name!r}")
        self.controller.current_surface = surface

    def add_sphere(self, center_x: float, center_y: float, center_z: float, radius: float):
        self.controller.add_sphere(Point3(center_x, center_y, center_z), radius)

    def add_plane(self, normal_x: float, normal_y: float, normal_z: float,
                  point_x: float, point_y: float, point_z: float):
        self.controller.add_plane(Vector3(normal_x, normal_y, normal_z),
                                  Point3(point_x, point_y, point_z))

    def add_ambient_light(self, r: float, g: float, b: float):
        self.controller.add_ambient_light(r, g, b)

    def add_directional_light(self, r: float, g: float, b: float,
                              dir_x: float, dir_y: float, dir_z: float):
        self.controller.add_directional_light(r, g, b, Vector3(dir_x, dir_y, dir_z))

    def add_point_light(self, r: float, g: float, b: float,
                        pos_x: float, pos_y: float, pos_z: float):
        self.controller.add_point_light(r, g, b, Point3(pos_x, pos_y, pos_z))

    def set_max_bounces(self, max_bounces: int):
        if max_bounces < 0:
            raise ValueError("Maximum bounces must be >= 0")
        self.controller.set_max_bounces(max_bounces)

    def set_camera(self, eye_x: float, eye_y: float, eye_z: float,
                   look_at_x: float, look_at_y: float, look_at_z: float,
                   up_x: float = None, up_y: float = None, up_z: float = None,
                   width: int = None, height: int = None, fov: float = None):
        """
        Places the camera at the eye position looking at the look-at point.
        The up vector, image size and field of view (degrees) are optional;
        the up vector is only changed when all three components are given.
        """
        eye = Point3(eye_x, eye_y, eye_z)
        look_at = Point3(look_at_x, look_at_y, look_at_z)
        up = None
        if None not in (up_x, up_y, up_z):
            up = Vector3(up_x, up_y, up_z)
        self.controller.set_camera(look_at, eye, width, height, fov, up)

    def set_camera_dimensions(self, width: int, height: int):
        self.controller.set_camera_dimensions(width, height)

    def set_background_color(self, r: int, g: int, b: int):
        """Background colour with components in 0-255."""
        for value in (r, g, b):
            if not 0 <= value <= 255:
                raise ValueError(f"Background colour components must be in 0-255, got {value}")
        self.controller.set_background(Vector3(r / 255.0, g / 255.0, b / 255.0))

    def render_image(self, workers: Optional[int] = None):
        return self.controller.render_image(workers)

    def save_image(self, filename: str) -> str:
        """
        Saves the rendered image as PNG. Every extension on the file name is
        replaced by a single ".png".
        """
        directory, base = os.path.split(filename)
        base = base.split(".", 1)[0] or "render"
        return self.controller.export_image(os.path.join(directory, base + ".png"))

    def load_test_scene(self):
        """
        Replaces the scene with the built-in demo: a gold sphere, blue rubber
        spheres, a distant mirror sphere and an emerald ground plane lit by
        ambient and directional light.
        """
        print("\n=== Loading Test Scene ===")
        self.controller.clear_scene()
        self.set_max_bounces(0)
        self.set_background_color(20, 20, 25)
        self.set_camera(-1.4, 0.3, 7, -0.5, 0.7, -12)

        self.set_current_surface("gold")
        self.add_sphere(-1.5, -1, 3, 0.9)
        self.add_sphere(-0.5, 1.9, -12, 0.5)

        self.set_current_surface("blue rubber")
        self.add_sphere(-0.5, 0.7, -12, 0.7)
        self.add_sphere(-0.5, -5, -12, 5)

        self.set_current_surface("mirror")
        self.add_sphere(0, 0, -2500, 500)
        self.add_sphere(-1.5, 0.1, 3, 0.2)

        self.set_current_surface("emerald")
        self.add_plane(0, 2, 0, 0, -200, -320)

        self.add_ambient_light(0.8, 0.8, 0.8)
        self.add_directional_light(1, 1, 1, 1, -5, -4)
        print(f"Scene has {len(self.controller.scene.objects)} objects "
              f"and {len(self.controller.scene.lights)} lights")
