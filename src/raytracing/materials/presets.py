# materials/presets.py
from types import MappingProxyType
from typing import List, Optional
from raytracing.materials.surface import Surface

# name: (r, g, b, ambient, diffuse, specular, exponent, reflectance, transmission, index)
_PRESET_PARAMETERS = {
    "matte black":       (0.0, 0.0, 0.0, 0.2, 0.8, 0.0, 0.0, 0.0, 0.0, 1.0),
    "glossy white":      (1.0, 1.0, 1.0, 0.1, 0.7, 0.7, 20.0, 0.2, 0.0, 1.0),
    "mirror":            (1.0, 1.0, 1.0, 0.0, 0.1, 0.9, 50.0, 1.0, 0.0, 1.5),
    "glass":             (0.9, 0.9, 0.9, 0.0, 0.1, 0.8, 30.0, 0.0, 0.9, 1.5),
    "red plastic":       (1.0, 0.0, 0.0, 0.2, 0.6, 0.4, 10.0, 0.1, 0.0, 1.0),
    "blue rubber":       (0.0, 0.0, 1.0, 0.3, 0.7, 0.2, 5.0, 0.0, 0.0, 1.0),
    "gold":              (1.0, 0.84, 0.0, 0.1, 0.6, 0.7, 25.0, 0.5, 0.0, 1.0),
    "silver":            (0.75, 0.75, 0.75, 0.2, 0.7, 0.6, 20.0, 0.7, 0.0, 1.0),
    "emerald":           (0.31, 0.78, 0.47, 0.2, 0.5, 0.5, 25.0, 0.0, 0.6, 1.5),
    "transparent water": (0.0, 0.1, 0.8, 0.0, 0.1, 0.7, 30.0, 0.0, 0.9, 1.33),
}

# Built once at import time and never mutated afterwards.
PREDEFINED_SURFACES = MappingProxyType(
    {name: Surface(*params) for name, params in _PRESET_PARAMETERS.items()}
)


def lookup(name: str) -> Optional[Surface]:
    """Return the predefined surface with the given name, or None."""
    return PREDEFINED_SURFACES.get(name)


def names() -> List[str]:
    return sorted(PREDEFINED_SURFACES)
