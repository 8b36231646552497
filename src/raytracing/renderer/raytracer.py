# renderer/raytracer.py
from raytracing.core.vector import Vector3
from raytracing.core.ray import Ray
from raytracing.core.intersection import Intersection
from raytracing.lights import AmbientLight
from raytracing.renderer.tone_mapping import clamp_color

# Offset applied to secondary ray origins so they do not hit the surface they
# start on.
TINY = 0.001
MAX_BOUNCES = 16
BLACK = Vector3(0, 0, 0)


class Renderer:
    """
    Whitted-style ray tracer: Phong direct lighting with hard shadows plus
    recursive mirror reflection, bounded by the ray's bounce budget.

    Rendering reads the scene, camera and surfaces only, so a single
    renderer can be shared by any number of workers.
    """
    def __init__(self, background: Vector3 = BLACK, max_bounces: int = MAX_BOUNCES):
        self.background = background
        self.max_bounces = max_bounces

    @property
    def background(self) -> Vector3:
        return self._background

    @background.setter
    def background(self, color: Vector3):
        self._background = clamp_color(color)

    @property
    def max_bounces(self) -> int:
        return self._max_bounces

    @max_bounces.setter
    def max_bounces(self, bounces: int):
        if bounces < 0:
            raise ValueError(f"Maximum bounces must be >= 0, got {bounces}")
        self._max_bounces = int(bounces)

    def render_pixel(self, i: int, j: int, scene, camera) -> Vector3:
        """
        Computes the colour of pixel (i, j) by casting a primary ray from the
        camera's eye.

        Returns:
            Vector3 with each channel in [0, 1].
        """
        ray = Ray(camera.eye, camera.direction(i, j), self._max_bounces)
        intersection = ray.trace(scene.objects)
        if intersection is not None:
            return self.shade(scene, intersection)
        return self.background

    def shade(self, scene, intersection: Intersection) -> Vector3:
        """
        Colour seen at an intersection: lighting, then reflection.

        The reflection term is added a second time once the bounce budget is
        used up, which doubles the mirror contribution at the last bounce.
        """
        surface = intersection.surface
        rgb = self._add_lighting(scene, surface, intersection, BLACK)
        rgb = self._add_reflectance(scene, surface, intersection, rgb)
        if intersection.bounces <= 0:
            rgb = self._add_reflectance(scene, surface, intersection, rgb)
        return clamp_color(rgb)

    def in_shadow(self, scene, intersection: Intersection, light_vector: Vector3) -> bool:
        """True if anything lies between the hit point and the light."""
        origin = intersection.point + light_vector * TINY
        shadow_ray = Ray(origin, light_vector, 0)
        return shadow_ray.trace(scene.objects) is not None

    def _add_lighting(self, scene, surface, intersection: Intersection, rgb: Vector3) -> Vector3:
        for light in scene.lights:
            if isinstance(light, AmbientLight):
                rgb = rgb + surface.color * light.intensity * surface.ambient
                continue

            light_vector = light.light_vector(intersection.point)
            # The first shadowed light ends the loop for every light after it.
            if self.in_shadow(scene, intersection, light_vector):
                break

            lambert = intersection.lambert(light_vector)
            if lambert > 0:
                rgb = self._add_diffuse(surface, light, lambert, rgb)
                rgb = self._add_specular(surface, light, lambert, intersection, light_vector, rgb)
        return rgb

    @staticmethod
    def _add_diffuse(surface, light, lambert: float, rgb: Vector3) -> Vector3:
        if surface.diffuse > 0:
            diffuse = surface.diffuse * lambert
            rgb = rgb + surface.color * light.intensity * diffuse
        return rgb

    @staticmethod
    def _add_specular(surface, light, lambert: float, intersection: Intersection,
                      light_vector: Vector3, rgb: Vector3) -> Vector3:
        if surface.specular > 0:
            spec = intersection.specular(light_vector, lambert)
            if spec > 0:
                spec = surface.specular * spec ** surface.exponent
                rgb = rgb + light.intensity * spec
        return rgb

    def _add_reflectance(self, scene, surface, intersection: Intersection, rgb: Vector3) -> Vector3:
        if surface.reflectance <= 0:
            return rgb
        reflect = intersection.reflect()
        if reflect is None:
            return rgb

        origin = intersection.point + reflect * TINY
        reflected_ray = Ray(origin, reflect, intersection.bounces - 1)
        reflected = reflected_ray.trace(scene.objects)
        if reflected is not None:
            color = self.shade(scene, reflected)
        else:
            color = self.background
        return rgb + color * surface.reflectance
