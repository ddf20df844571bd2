"""Tests for the built-in scene catalogue."""
import math

import numpy as np
import pytest
from PIL import Image

from core.errors import ConfigurationError, TextureLoadError
from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scenes import SCENES, SceneDescription, get_scene

QUICK_SCENES = ["random_spheres", "two_spheres", "two_perlin_spheres", "simple_light",
                "cornell_box", "cornell_smoke", "single_sphere"]


@pytest.fixture
def texture_file(tmp_path):
    path = tmp_path / "earth.png"
    Image.fromarray(np.full((8, 16, 3), 200, dtype=np.uint8)).save(path)
    return str(path)


class TestCatalogue:
    def test_all_names_registered(self):
        assert set(SCENES) == set(QUICK_SCENES) | {"earth", "final_scene"}

    @pytest.mark.parametrize("name", QUICK_SCENES)
    def test_builds(self, name):
        scene = get_scene(name, 1.0, seed=1)
        assert isinstance(scene, SceneDescription)
        assert isinstance(scene.world, BVHNode)
        assert scene.world.bounding_box(scene.time0, scene.time1) is not None
        assert scene.camera.aspect_ratio == 1.0

    def test_unknown_scene(self):
        with pytest.raises(ConfigurationError):
            get_scene("teapot")

    def test_earth_needs_texture(self):
        with pytest.raises(ConfigurationError):
            get_scene("earth")

    def test_earth_missing_texture_file(self, tmp_path):
        with pytest.raises(TextureLoadError):
            get_scene("earth", texture_path=str(tmp_path / "nope.jpg"))

    def test_earth_with_texture(self, texture_file):
        scene = get_scene("earth", texture_path=texture_file)
        rec = scene.world.hit(Ray(Vector3(13, 2, 3), Vector3(-13, -2, -3)), 0.001, math.inf)
        assert rec is not None
        assert rec.material.texture.value(rec.u, rec.v, rec.p).x == pytest.approx(200 / 255)

    def test_final_scene(self, texture_file):
        scene = get_scene("final_scene", seed=2, texture_path=texture_file)
        assert scene.lights is not None
        assert (scene.time0, scene.time1) == (0.0, 1.0)


class TestSceneContents:
    def test_same_seed_same_layout(self):
        a = get_scene("random_spheres", seed=5)
        b = get_scene("random_spheres", seed=5)
        box_a = a.world.bounding_box(0, 1)
        box_b = b.world.bounding_box(0, 1)
        assert tuple(box_a.minimum) == tuple(box_b.minimum)
        assert tuple(box_a.maximum) == tuple(box_b.maximum)
        ray = Ray(Vector3(13, 2, 3), Vector3(-13, -1.8, -3))
        assert a.world.hit(ray, 0.001, math.inf).t == b.world.hit(ray, 0.001, math.inf).t

    def test_cornell_light_shines_down(self):
        scene = get_scene("cornell_box", 1.0, seed=0)
        rec = scene.world.hit(Ray(Vector3(278, 278, 278), Vector3(0, 1, 0)), 0.001, math.inf)
        emitted = rec.material.emitted(None, rec, rec.u, rec.v, rec.p)
        assert emitted.x == pytest.approx(15.0)

    def test_cornell_lights_are_sampled(self):
        scene = get_scene("cornell_box", 1.0, seed=0)
        origin = Vector3(278, 10, 278)
        assert scene.lights.pdf_value(origin, Vector3(0, 1, 0)) > 0

    def test_single_sphere_has_no_light_list(self):
        assert get_scene("single_sphere").lights is None

    def test_tiny_cornell_render_is_finite(self):
        scene = get_scene("cornell_box", 1.0, seed=0)
        settings = RenderSettings(width=6, aspect_ratio=1.0, samples_per_pixel=2, max_depth=5, seed=1)
        image = Renderer(settings).render(scene)
        assert image.shape == (6, 6, 3)
        assert np.all(np.isfinite(image))
        assert image.max() > 0
