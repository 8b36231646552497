# geometry/plane.py
from typing import Optional
from raytracing.core.vector import Vector3
from raytracing.core.ray import Ray
from raytracing.geometry.hittable import Renderable


class Plane(Renderable):
    """
    An infinite one-sided plane n . p = d, stored as a unit normal and the
    offset d computed from a point on the plane.
    """
    def __init__(self, normal: Vector3, point: Vector3, surface):
        super().__init__(surface)
        normal = normal.normalize()
        if normal.length() == 0:
            raise ValueError("Plane normal must be a non-zero vector")
        self.normal = normal
        self.d = normal.dot(point)

    def intersect(self, ray: Ray, max_distance: float) -> Optional[float]:
        denominator = self.normal.dot(ray.direction)
        # Parallel rays, including rays lying in the plane, never hit.
        if denominator == 0:
            return None
        t = (self.d - self.normal.dot(ray.origin)) / denominator
        if t < 0 or t > max_distance:
            return None
        return t

    def surface_normal(self, point: Vector3) -> Vector3:
        return self.normal

    def __repr__(self) -> str:
        n = self.normal
        return f"Plane({n.x}x + {n.y}y + {n.z}z = {self.d})"
