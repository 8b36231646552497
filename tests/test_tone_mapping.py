"""Tests for colour clamping and 8-bit quantisation."""

import numpy as np
from raytracing.core.vector import Vector3
from raytracing.renderer.tone_mapping import clamp_color, to_rgb8


class TestClampColor:

    def test_in_range_is_unchanged(self):
        assert clamp_color(Vector3(0.1, 0.5, 1.0)) == Vector3(0.1, 0.5, 1.0)

    def test_saturates_each_channel(self):
        assert clamp_color(Vector3(-0.5, 2.0, 0.25)) == Vector3(0.0, 1.0, 0.25)


class TestToRgb8:

    def test_quantises_with_rounding(self):
        image = np.array([[[-1.0, 0.0, 0.5], [1.0, 2.0, 0.2]]], dtype=np.float32)
        result = to_rgb8(image)
        assert result.dtype == np.uint8
        assert result.shape == (1, 2, 3)
        np.testing.assert_array_equal(result, [[[0, 0, 128], [255, 255, 51]]])

    def test_accepts_float64_and_non_contiguous_input(self):
        image = np.linspace(0.0, 1.0, 2 * 4 * 3).reshape(4, 2, 3).swapaxes(0, 1)
        result = to_rgb8(image)
        assert result.shape == (2, 4, 3)
        assert result[0, 0, 0] == 0
        assert result[-1, -1, -1] == 255

    def test_does_not_modify_input(self):
        image = np.full((2, 2, 3), 1.5, dtype=np.float32)
        to_rgb8(image)
        assert np.all(image == 1.5)
