"""Pytest configuration and shared fixtures."""

import itertools
import random

import pytest

from spheretracer.core.vector import Vector3
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import Scene
from spheretracer.materials import Lambertian, Metal, Dielectric, DiffuseLight


class FixedRandom:
    """Stand-in generator replaying scripted draws."""

    def __init__(self, uniforms=(0.0,), randoms=(0.5,)):
        self._uniforms = itertools.cycle(uniforms)
        self._randoms = itertools.cycle(randoms)

    def uniform(self, a, b):
        return next(self._uniforms)

    def random(self):
        return next(self._randoms)


@pytest.fixture
def rng():
    """A seeded generator so statistical tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def empty_scene():
    return Scene()


@pytest.fixture
def diffuse_scene():
    """One gray diffuse sphere straight ahead of the origin."""
    return Scene([Sphere(Vector3(0, 0, -3), 1, Lambertian(Vector3(0.5, 0.5, 0.5)))])


@pytest.fixture
def mixed_scene():
    """Every material kind, small enough to render in tests."""
    return Scene([
        Sphere(Vector3(0, -101, -5), 100, Lambertian(Vector3(0.5, 0.5, 0.5))),
        Sphere(Vector3(-1.2, 0, -4), 0.6, Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.2)),
        Sphere(Vector3(0, 0, -4), 0.6, Dielectric(1.5)),
        Sphere(Vector3(0, 0, -4), -0.5, Dielectric(1.5)),
        Sphere(Vector3(1.2, 0, -4), 0.6, DiffuseLight(Vector3(3.0, 3.0, 3.0))),
    ])


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary directory for test outputs."""
    return tmp_path / "outputs"
