"""Phong ray tracer: spheres and planes lit by ambient, directional and point lights."""
from raytracing.core.vector import Point3, Vector3
from raytracing.camera.camera import Camera
from raytracing.geometry.world import Scene
from raytracing.renderer.raytracer import Renderer

__version__ = "1.0.0"

__all__ = ["Point3", "Vector3", "Camera", "Scene", "Renderer"]
