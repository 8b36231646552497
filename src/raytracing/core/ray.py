# core/ray.py
import math
from typing import Iterable, Optional
from raytracing.core.vector import Point3, Vector3
from raytracing.core.intersection import Intersection


class Ray:
    """
    Represents a ray in 3D space with an origin, a unit direction and the
    number of reflective bounces it may still spawn.
    """
    __slots__ = ("origin", "direction", "bounces")

    def __init__(self, origin: Vector3, direction: Vector3, bounces: int = 0):
        self.origin = Point3(origin.x, origin.y, origin.z)
        self.direction = direction.normalize()
        self.bounces = bounces

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def unit_to_origin(self) -> Vector3:
        """
        Returns the unit vector pointing back along the ray towards its origin.
        """
        return -self.direction

    def trace(self, objects: Iterable) -> Optional[Intersection]:
        """
        Finds the closest object hit by this ray.

        Each object is tested against the closest distance found so far, so
        an object only replaces the current best when it is strictly closer
        and earlier objects win ties. A ray with a negative bounce budget hits
        nothing.

        Returns:
            An Intersection for the nearest hit, or None.
        """
        if self.bounces < 0:
            return None

        closest_so_far = math.inf
        hit_object = None
        for obj in objects:
            t = obj.intersect(self, closest_so_far)
            if t is not None and t < closest_so_far:
                closest_so_far = t
                hit_object = obj

        if hit_object is None:
            return None
        return Intersection(self, hit_object, closest_so_far)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction}, bounces={self.bounces})"
