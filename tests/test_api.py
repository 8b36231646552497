"""Tests for the high-level scene building API."""

import numpy as np
import pytest
from raytracing.api import RayTraceAPI
from raytracing.core.vector import Point3, Vector3
from raytracing.geometry import Plane, Sphere
from raytracing.lights import AmbientLight, DirectionalLight, PointLight
from raytracing.materials import presets


class TestSceneBuilding:

    def test_starts_with_matte_black(self):
        api = RayTraceAPI(8, 6)
        assert api.controller.current_surface is presets.lookup("matte black")
        assert api.controller.image.shape == (6, 8, 3)

    def test_unknown_surface(self):
        api = RayTraceAPI(8, 6)
        with pytest.raises(ValueError):
            api.set_current_surface("velvet")
        assert api.controller.current_surface is presets.lookup("matte black")

    def test_adds_objects_and_lights(self):
        api = RayTraceAPI(8, 6)
        api.set_current_surface("red plastic")
        api.add_sphere(1, 2, 3, 0.5)
        api.add_plane(0, 1, 0, 0, -1, 0)
        api.add_ambient_light(0.1, 0.1, 0.1)
        api.add_directional_light(1, 1, 1, 0, -1, 0)
        api.add_point_light(1, 1, 1, 0, 5, 0)

        sphere, plane = api.controller.scene.objects
        assert isinstance(sphere, Sphere) and isinstance(plane, Plane)
        assert sphere.center == Point3(1, 2, 3)
        assert sphere.surface is presets.lookup("red plastic")
        assert [type(light) for light in api.controller.scene.lights] == [
            AmbientLight, DirectionalLight, PointLight]

    def test_negative_bounces(self):
        with pytest.raises(ValueError):
            RayTraceAPI(8, 6).set_max_bounces(-1)

    def test_background_color(self):
        api = RayTraceAPI(8, 6)
        api.set_background_color(255, 0, 51)
        assert tuple(api.controller.renderer.background) == pytest.approx((1.0, 0.0, 0.2))

    @pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0)])
    def test_background_out_of_range(self, rgb):
        with pytest.raises(ValueError):
            RayTraceAPI(8, 6).set_background_color(*rgb)

    def test_camera(self):
        api = RayTraceAPI(8, 6)
        api.set_camera(0, 5, 5, 0, 0, 0, width=16, height=12, fov=70)
        camera = api.controller.camera
        assert camera.eye == Point3(0, 5, 5)
        assert camera.fov == 70
        assert api.controller.image.shape == (12, 16, 3)
        assert camera.up == Vector3(0, 1, 0)

    def test_camera_up_needs_all_components(self):
        api = RayTraceAPI(8, 6)
        api.set_camera(0, 0, 10, 0, 0, 0, up_x=1, up_y=0)
        assert api.controller.camera.up == Vector3(0, 1, 0)
        api.set_camera(0, 0, 10, 0, 0, 0, up_x=1, up_y=0, up_z=0)
        assert api.controller.camera.up == Vector3(1, 0, 0)

    def test_top_down_camera_with_explicit_up(self):
        api = RayTraceAPI(8, 6)
        api.set_camera(0, 10, 0, 0, 0, 0, up_x=0, up_y=0, up_z=-1)
        camera = api.controller.camera
        assert camera.eye == Point3(0, 10, 0)
        assert camera.up == Vector3(0, 0, -1)
        assert tuple(camera.direction(4, 3).normalize()) == pytest.approx((0, -1, 0))

    def test_rejected_camera_keeps_previous_view(self):
        api = RayTraceAPI(8, 6)
        with pytest.raises(ValueError):
            api.set_camera(0, 10, 0, 0, 0, 0, up_x=0, up_y=1, up_z=0)
        camera = api.controller.camera
        assert camera.eye == Point3(0, 0, 10)
        assert camera.up == Vector3(0, 1, 0)


class TestTestScene:

    def test_contents(self):
        api = RayTraceAPI(8, 6)
        api.load_test_scene()
        scene = api.controller.scene
        assert len(scene.objects) == 7
        assert len(scene.lights) == 2
        assert api.controller.max_bounces == 0
        assert api.controller.camera.eye == Point3(-1.4, 0.3, 7)
        assert scene.objects[-1].surface is presets.lookup("emerald")
        assert tuple(api.controller.renderer.background) == pytest.approx((20 / 255, 20 / 255, 25 / 255))

    def test_reload_replaces_scene(self):
        api = RayTraceAPI(8, 6)
        api.add_sphere(0, 0, 0, 1)
        api.load_test_scene()
        api.load_test_scene()
        assert len(api.controller.scene.objects) == 7

    def test_render_and_save(self, tmp_path):
        api = RayTraceAPI(16, 12)
        api.load_test_scene()
        image = api.render_image(workers=1)
        assert image.shape == (12, 16, 3)
        assert np.all((image >= 0) & (image <= 1))
        assert image.any()

        saved = api.save_image(str(tmp_path / "scene.final.jpg"))
        assert saved == str(tmp_path / "scene.png")
        assert (tmp_path / "scene.png").exists()

    def test_save_without_base_name(self, tmp_path):
        api = RayTraceAPI(4, 4)
        saved = api.save_image(str(tmp_path / ".hidden"))
        assert saved == str(tmp_path / "render.png")
