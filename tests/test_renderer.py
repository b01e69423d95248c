"""Tests for the image assembler, camera and tone mapping."""

import math

import numpy as np
import pytest

from spheretracer.camera.camera import Camera
from spheretracer.config import RenderSettings
from spheretracer.core.vector import Vector3
from spheretracer.renderer.sampler import Renderer, render_row, row_seeds
from spheretracer.renderer.tone_mapping import (
    gamma_tone_mapping, reinhard_tone_mapping, tone_map,
)


def small_settings(**kwargs):
    options = dict(width=6, height=4, samples_per_pixel=4, max_depth=4,
                   fov=90.0, seed=7, verbose=False)
    options.update(kwargs)
    return RenderSettings(**options)


class TestCamera:
    def test_pixel_center_of_single_pixel_image_looks_forward(self, fixed_random):
        camera = Camera(Vector3(0, 0, 0), fov=90, aspect_ratio=1.0)
        ray = camera.get_ray(0, 0, 1, 1, fixed_random(randoms=(0.5,)))
        assert tuple(ray.direction) == pytest.approx((0, 0, -1))

    def test_top_left_corner(self, fixed_random):
        camera = Camera(Vector3(0, 0, 0), fov=90, aspect_ratio=2.0)
        ray = camera.get_ray(0, 0, 4, 2, fixed_random(randoms=(0.0,)))
        # tan(45 deg) = 1: x = -1 * aspect, y = +1, z = -1
        expected = Vector3(-2, 1, -1).normalize()
        assert tuple(ray.direction) == pytest.approx(tuple(expected))

    def test_yaw_turns_the_view(self, fixed_random):
        camera = Camera(Vector3(0, 0, 0), fov=60, aspect_ratio=1.0, yaw=math.radians(90))
        ray = camera.get_ray(0, 0, 1, 1, fixed_random(randoms=(0.5,)))
        assert tuple(ray.direction) == pytest.approx((1, 0, 0), abs=1e-12)


class TestRenderer:
    def test_image_shape_and_range(self, mixed_scene):
        image = Renderer(small_settings()).render(mixed_scene)
        assert image.shape == (4, 6, 3)
        assert image.dtype == np.float64
        assert np.all(image >= 0)

    def test_same_seed_same_image(self, mixed_scene):
        first = Renderer(small_settings()).render(mixed_scene)
        second = Renderer(small_settings()).render(mixed_scene)
        assert np.array_equal(first, second)

    def test_different_seed_different_image(self, mixed_scene):
        first = Renderer(small_settings(seed=1)).render(mixed_scene)
        second = Renderer(small_settings(seed=2)).render(mixed_scene)
        assert not np.array_equal(first, second)

    def test_empty_scene_renders_sky(self, empty_scene):
        image = Renderer(small_settings()).render(empty_scene)
        # Blue is 1 everywhere; the top rows are bluer (less red) than the bottom.
        assert np.allclose(image[..., 2], 1.0)
        assert image[0, :, 0].mean() < image[-1, :, 0].mean()

    def test_rows_are_independent_of_render_order(self, mixed_scene):
        settings = small_settings()
        renderer = Renderer(settings)
        camera = renderer.make_camera()
        seeds = row_seeds(settings.seed, settings.height)
        image = renderer.render(mixed_scene, camera)
        assert np.array_equal(render_row(mixed_scene, camera, settings, 3, seeds[3]), image[3])

    def test_row_seeds_are_distinct(self):
        seeds = row_seeds(0, 100)
        assert len(set(seeds)) == 100
        assert seeds == row_seeds(0, 100)

    @pytest.mark.slow
    def test_worker_pool_matches_serial_render(self, mixed_scene):
        serial = Renderer(small_settings()).render(mixed_scene)
        parallel = Renderer(small_settings(workers=2)).render(mixed_scene)
        assert np.array_equal(serial, parallel)

    def test_progress_output(self, empty_scene, capsys):
        Renderer(small_settings(verbose=True)).render(empty_scene)
        out = capsys.readouterr().out
        assert "Rendering 6x4" in out
        assert "Row 0/4" in out
        assert "Rendering completed" in out


class TestToneMapping:
    def test_gamma_clamps_and_takes_square_root(self):
        linear = np.array([[[0.25, 1.5, -0.1], [0.0, 1.0, 0.01]]])
        out = gamma_tone_mapping(linear)
        assert out.dtype == np.uint8
        assert out.tolist() == [[[127, 255, 0], [0, 255, 25]]]

    def test_nan_samples_become_black(self):
        linear = np.array([[[np.nan, 0.25, np.inf]]])
        assert gamma_tone_mapping(linear).tolist() == [[[0, 127, 255]]]

    def test_reinhard_compresses_highlights(self):
        linear = np.array([[[1.0, 100.0, 0.0]]])
        out = reinhard_tone_mapping(linear)
        assert out[0, 0, 0] == 180
        assert 250 <= out[0, 0, 1] < 255
        assert out[0, 0, 2] == 0

    def test_dispatch(self):
        linear = np.full((2, 2, 3), 0.25)
        assert np.array_equal(tone_map(linear, "gamma"), gamma_tone_mapping(linear))
        with pytest.raises(ValueError):
            tone_map(linear, "filmic")
