# geometry/world.py
from typing import Tuple
from raytracing.core.vector import Vector3
from raytracing.geometry.hittable import Renderable
from raytracing.geometry.sphere import Sphere
from raytracing.geometry.plane import Plane
from raytracing.lights import AmbientLight, DirectionalLight, Light, PointLight


class Scene:
    """
    The renderables and lights making up a scene. Both collections keep
    insertion order, which decides the light loop order and which object
    wins a tie between equally distant hits. The renderer only sees
    read-only tuples of each, rebuilt whenever a collection changes.
    """
    def __init__(self):
        self._objects = []
        self._lights = []
        self._object_view = ()
        self._light_view = ()

    @property
    def objects(self) -> Tuple[Renderable, ...]:
        return self._object_view

    @property
    def lights(self) -> Tuple[Light, ...]:
        return self._light_view

    def add(self, obj: Renderable) -> Renderable:
        if not isinstance(obj, Renderable):
            raise TypeError(f"Expected a Renderable, got {type(obj).__name__}")
        self._objects.append(obj)
        self._object_view = tuple(self._objects)
        return obj

    def add_light(self, light: Light) -> Light:
        if not isinstance(light, Light):
            raise TypeError(f"Expected a Light, got {type(light).__name__}")
        self._lights.append(light)
        self._light_view = tuple(self._lights)
        return light

    def remove(self, obj: Renderable) -> None:
        self._objects.remove(obj)
        self._object_view = tuple(self._objects)

    def remove_light(self, light: Light) -> None:
        self._lights.remove(light)
        self._light_view = tuple(self._lights)

    def add_sphere(self, center: Vector3, radius: float, surface) -> Sphere:
        return self.add(Sphere(center, radius, surface))

    def add_plane(self, normal: Vector3, point: Vector3, surface) -> Plane:
        return self.add(Plane(normal, point, surface))

    def add_ambient_light(self, r: float, g: float, b: float) -> AmbientLight:
        return self.add_light(AmbientLight(r, g, b))

    def add_directional_light(self, r: float, g: float, b: float, direction: Vector3) -> DirectionalLight:
        return self.add_light(DirectionalLight(r, g, b, direction))

    def add_point_light(self, r: float, g: float, b: float, position: Vector3) -> PointLight:
        return self.add_light(PointLight(r, g, b, position))

    def clear_objects(self):
        self._objects.clear()
        self._object_view = ()

    def clear_lights(self):
        self._lights.clear()
        self._light_view = ()

    def clear(self):
        self.clear_lights()
        self.clear_objects()

    def __len__(self) -> int:
        return len(self._objects)
