from raytracing.geometry.hittable import Renderable
from raytracing.geometry.sphere import Sphere
from raytracing.geometry.plane import Plane
from raytracing.geometry.world import Scene

__all__ = ["Renderable", "Sphere", "Plane", "Scene"]
