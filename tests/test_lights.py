"""Tests for light sources."""

import pytest
from raytracing.core.vector import Point3, Vector3
from raytracing.lights import AmbientLight, DirectionalLight, Light, PointLight


class TestLights:

    def test_ambient_has_no_direction(self):
        light = AmbientLight(0.5, 0.5, 0.5)
        assert light.light_vector(Point3(1, 2, 3)) is None
        assert light.intensity == Vector3(0.5, 0.5, 0.5)

    def test_directional_points_against_its_direction(self):
        light = DirectionalLight(1, 1, 1, Vector3(0, -4, 0))
        assert light.direction == Vector3(0, -1, 0)
        assert light.light_vector(Point3(5, 5, 5)) == Vector3(0, 1, 0)
        assert light.light_vector(Point3(-3, 0, 9)) == Vector3(0, 1, 0)

    def test_directional_rejects_zero_direction(self):
        with pytest.raises(ValueError):
            DirectionalLight(1, 1, 1, Vector3(0, 0, 0))

    def test_point_light_vector(self):
        light = PointLight(1, 1, 1, Point3(0, 10, 0))
        v = light.light_vector(Point3(0, 0, 0))
        assert v == Vector3(0, 1, 0)
        v = light.light_vector(Point3(3, 14, 0))
        assert v.length() == pytest.approx(1.0)
        assert v.x == pytest.approx(-0.6)
        assert v.y == pytest.approx(-0.8)

    def test_base_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Light(1, 1, 1).light_vector(Point3(0, 0, 0))

    def test_rejects_nan_intensity(self):
        with pytest.raises(ValueError):
            AmbientLight(float("nan"), 0, 0)
