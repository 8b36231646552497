# lights/light.py
from typing import Optional
from raytracing.core.vector import Vector3


class Light:
    """
    Abstract light source with an RGB intensity. The set of implementations
    is closed: AmbientLight, DirectionalLight and PointLight.
    """
    def __init__(self, r: float, g: float, b: float):
        self.intensity = Vector3(r, g, b)

    def light_vector(self, point: Vector3) -> Optional[Vector3]:
        """
        Returns the unit vector from the given point towards the light, or
        None for lights without a direction.
        """
        raise NotImplementedError("light_vector() must be implemented by subclasses.")
