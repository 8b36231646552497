# lights/ambient_light.py
from raytracing.core.vector import Vector3
from raytracing.lights.light import Light


class AmbientLight(Light):
    """
    Light without a direction that reaches every surface equally.
    """
    def light_vector(self, point: Vector3) -> None:
        return None

    def __repr__(self) -> str:
        return f"AmbientLight({self.intensity})"
