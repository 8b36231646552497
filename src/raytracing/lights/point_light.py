# lights/point_light.py
from raytracing.core.vector import Point3, Vector3
from raytracing.lights.light import Light


class PointLight(Light):
    """
    Light emitted in all directions from a fixed position.
    """
    def __init__(self, r: float, g: float, b: float, position: Vector3):
        super().__init__(r, g, b)
        self.position = Point3(position.x, position.y, position.z)

    def light_vector(self, point: Vector3) -> Vector3:
        return Vector3(self.position.x - point.x,
                       self.position.y - point.y,
                       self.position.z - point.z).normalize()

    def __repr__(self) -> str:
        return f"PointLight({self.intensity}, position={self.position})"
