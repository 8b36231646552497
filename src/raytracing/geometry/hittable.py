# geometry/hittable.py
from typing import Optional
from raytracing.core.vector import Vector3
from raytracing.core.ray import Ray


class Renderable:
    """
    Abstract class for objects that can be hit by a ray. The set of
    implementations is closed: Sphere and Plane.
    """
    def __init__(self, surface):
        if surface is None:
            raise ValueError("A renderable requires a surface")
        self._surface = surface

    @property
    def surface(self):
        return self._surface

    def intersect(self, ray: Ray, max_distance: float) -> Optional[float]:
        """
        Returns the ray parameter of the nearest crossing in [0, max_distance],
        or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def surface_normal(self, point: Vector3) -> Vector3:
        raise NotImplementedError("surface_normal() must be implemented by subclasses.")
