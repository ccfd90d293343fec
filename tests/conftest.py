"""Pytest configuration for ray tracer tests.

This module provides shared fixtures and assertion helpers for all test
modules. Scene fixtures are rebuilt for every test, so tests are free to
mutate them.
"""

import numpy as np
import pytest

# Tolerance used by the reference values in the tests
TOLERANCE = 1e-4


def assert_tuple_close(actual, expected, tol=TOLERANCE):
    """Assert two points/vectors/colors are equal component-wise within tol."""
    np.testing.assert_allclose(np.asarray(actual), np.asarray(expected), rtol=0.0, atol=tol)


@pytest.fixture
def default_world():
    """Two concentric spheres lit from (-10, 10, -10)."""
    from whitted.scene.world import default_world

    return default_world()


@pytest.fixture
def glass_sphere():
    """A fresh unit glass sphere (transparency 1.0, refractive index 1.5)."""
    from whitted.geometry.sphere import glass_sphere

    return glass_sphere()


@pytest.fixture
def z_ray():
    """Ray from (0, 0, -5) along +z."""
    from whitted.core.ray import Ray
    from whitted.core.tuples import point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
