# lights/directional_light.py
from raytracing.core.vector import Vector3
from raytracing.lights.light import Light


class DirectionalLight(Light):
    """
    Light arriving from infinitely far away along a fixed direction.
    """
    def __init__(self, r: float, g: float, b: float, direction: Vector3):
        super().__init__(r, g, b)
        direction = direction.normalize()
        if direction.length() == 0:
            raise ValueError("Directional light requires a non-zero direction")
        self.direction = direction

    def light_vector(self, point: Vector3) -> Vector3:
        # Towards the light, i.e. against the direction it shines in.
        return -self.direction

    def __repr__(self) -> str:
        return f"DirectionalLight({self.intensity}, direction={self.direction})"
