from raytracing.lights.light import Light
from raytracing.lights.ambient_light import AmbientLight
from raytracing.lights.directional_light import DirectionalLight
from raytracing.lights.point_light import PointLight

__all__ = ["Light", "AmbientLight", "DirectionalLight", "PointLight"]
