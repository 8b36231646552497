# core/intersection.py
from typing import Optional
from raytracing.core.vector import Vector3


class Intersection:
    """
    Records the details of a ray hitting a renderable: the hit point, the
    unit surface normal there, the unit vector back towards the ray's origin,
    the object that was hit and the bounce budget inherited from the ray.
    """
    def __init__(self, ray, obj, distance: float):
        self.object = obj
        self.point = ray.at(distance)
        self.unit_to_ray = ray.unit_to_origin()
        self.normal = obj.surface_normal(self.point)
        self.bounces = ray.bounces

    @property
    def surface(self):
        return self.object.surface

    def lambert(self, light_vector: Vector3) -> float:
        """Cosine between the surface normal and the light vector."""
        return self.normal.dot(light_vector)

    def specular(self, light_vector: Vector3, lambert: float) -> float:
        """
        Cosine between the view vector and the light vector mirrored about
        the normal, i.e. v . (2(n.l)n - l).
        """
        lambert *= 2
        return self.unit_to_ray.dot(self.normal * lambert - light_vector)

    def reflect(self) -> Optional[Vector3]:
        """
        Mirror direction of the incoming ray about the normal, or None when
        the ray arrives from behind the surface.
        """
        t = self.unit_to_ray.dot(self.normal)
        if t > 0:
            t *= 2
            return self.normal * t - self.unit_to_ray
        return None

    def __repr__(self) -> str:
        return f"Intersection(point={self.point}, object={self.object})"
