# materials/surface.py
import math
from dataclasses import dataclass, field
from raytracing.core.vector import Vector3


def _check_unit_range(name: str, value: float) -> None:
    if not (math.isfinite(value) and 0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in the range [0, 1], got {value}")


@dataclass(frozen=True)
class Surface:
    """
    Phong material of a renderable: intrinsic colour plus ambient, diffuse,
    specular, reflectance and transmission coefficients, the specular
    exponent and the refractive index.

    Surfaces are immutable and meant to be shared between any number of
    renderables.
    """
    r: float
    g: float
    b: float
    ambient: float
    diffuse: float
    specular: float
    exponent: float
    reflectance: float
    transmission: float
    refractive_index: float
    color: Vector3 = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for name in ("r", "g", "b"):
            _check_unit_range(f"Colour component {name}", getattr(self, name))
        for name in ("ambient", "diffuse", "specular", "reflectance", "transmission"):
            _check_unit_range(f"{name.capitalize()} coefficient", getattr(self, name))
        for name in ("exponent", "refractive_index"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")
        object.__setattr__(self, "color", Vector3(self.r, self.g, self.b))
