# geometry/sphere.py
import math
from typing import Optional
from raytracing.core.vector import Point3, Vector3
from raytracing.core.ray import Ray
from raytracing.geometry.hittable import Renderable


class Sphere(Renderable):
    """
    Represents a sphere defined by its center, radius, and surface.
    """
    def __init__(self, center: Vector3, radius: float, surface):
        super().__init__(surface)
        radius = float(radius)
        if not (math.isfinite(radius) and radius > 0):
            raise ValueError(f"Sphere radius must be a positive number, got {radius}")
        self.center = Point3(center.x, center.y, center.z)
        self.radius = radius
        self.radius_sq = radius * radius

    def intersect(self, ray: Ray, max_distance: float) -> Optional[float]:
        oc = self.center - ray.origin
        v = ray.direction.dot(oc)

        # Cannot beat the closest hit found so far.
        if v - self.radius > max_distance:
            return None

        t = self.radius_sq + v * v - oc.dot(oc)
        if t < 0:
            return None

        # Only the near root; a ray starting inside the sphere misses it.
        t = v - math.sqrt(t)
        if t > max_distance or t < 0:
            return None
        return t

    def surface_normal(self, point: Vector3) -> Vector3:
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
