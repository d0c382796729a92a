"""Tests for bounding_sphere."""

import math

import hypothesis
import pytest
import torch

from torchbezier.geometry import GeometryError, InsufficientPointsError
from torchbezier.geometry.bounding_volume import (
    BoundingSphere,
    bounding_sphere,
)
from torchbezier.testing.strategies import tensors

SETTINGS = hypothesis.settings(deadline=None, max_examples=50)


class TestBoundingSphere:
    """Tests for bounding_sphere."""

    def test_single_point(self):
        """A single point gives a sphere of (almost) zero radius."""
        point = torch.tensor([[1.0, 2.0, 3.0]], dtype=torch.float64)

        sphere = bounding_sphere(point)

        assert isinstance(sphere, BoundingSphere)
        assert torch.equal(sphere.center, point[0])
        assert sphere.radius < 1e-12

    def test_two_points(self):
        """Two points span a diameter."""
        points = torch.tensor(
            [[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]], dtype=torch.float64
        )

        sphere = bounding_sphere(points)

        assert torch.allclose(sphere.center, torch.zeros(3, dtype=torch.float64))
        assert torch.isclose(
            sphere.radius, torch.tensor(1.0, dtype=torch.float64)
        )

    def test_obtuse_triangle_uses_longest_edge(self):
        """The circumcircle of an obtuse triangle is not minimal."""
        points = torch.tensor(
            [[0.0, 0.0, 0.0], [4.0, 0.0, 0.0], [2.0, 0.5, 0.0]],
            dtype=torch.float64,
        )

        sphere = bounding_sphere(points)

        assert torch.allclose(
            sphere.center, torch.tensor([2.0, 0.0, 0.0], dtype=torch.float64)
        )
        assert torch.isclose(
            sphere.radius, torch.tensor(2.0, dtype=torch.float64)
        )

    def test_regular_tetrahedron(self):
        """All four vertices lie on the circumsphere."""
        points = torch.tensor(
            [
                [1.0, 1.0, 1.0],
                [1.0, -1.0, -1.0],
                [-1.0, 1.0, -1.0],
                [-1.0, -1.0, 1.0],
            ],
            dtype=torch.float64,
        )

        sphere = bounding_sphere(points)

        assert torch.allclose(
            sphere.center, torch.zeros(3, dtype=torch.float64), atol=1e-12
        )
        assert torch.isclose(
            sphere.radius, torch.tensor(math.sqrt(3.0), dtype=torch.float64)
        )

    def test_collinear_points(self):
        """Collinear points are bounded by their extreme pair."""
        t = torch.tensor([0.0, 3.0, 1.0, 2.0], dtype=torch.float64)
        points = t[:, None] * torch.tensor(
            [1.0, 1.0, 0.0], dtype=torch.float64
        )

        sphere = bounding_sphere(points)

        assert torch.allclose(
            sphere.center,
            torch.tensor([1.5, 1.5, 0.0], dtype=torch.float64),
        )
        assert torch.isclose(
            sphere.radius,
            torch.tensor(1.5 * math.sqrt(2.0), dtype=torch.float64),
        )

    def test_coincident_points(self):
        points = torch.ones(4, 3, dtype=torch.float64)

        sphere = bounding_sphere(points)

        assert torch.all(sphere.contains(points))
        assert sphere.radius < 1e-12

    @SETTINGS
    @hypothesis.given(data=hypothesis.strategies.data())
    def test_contains_points(self, data):
        n = data.draw(hypothesis.strategies.integers(1, 12))
        points = data.draw(tensors(shape=(n, 3)))

        sphere = bounding_sphere(points)

        assert torch.all(sphere.contains(points))

    @SETTINGS
    @hypothesis.given(points=tensors(shape=(4, 3)))
    def test_not_larger_than_aabb_sphere(self, points):
        """No larger than the sphere around the box diagonal."""
        lower = points.amin(dim=0)
        upper = points.amax(dim=0)

        sphere = bounding_sphere(points)

        assert sphere.radius <= torch.linalg.vector_norm(upper - lower) / 2 + 1e-9

    def test_volume(self):
        points = torch.tensor(
            [[-2.0, 0.0, 0.0], [2.0, 0.0, 0.0]], dtype=torch.float64
        )

        sphere = bounding_sphere(points)

        assert torch.isclose(
            sphere.volume,
            torch.tensor(4.0 / 3.0 * math.pi * 8.0, dtype=torch.float64),
        )

    def test_contains_shape(self):
        sphere = bounding_sphere(torch.eye(3))

        assert sphere.contains(torch.zeros(2, 5, 3)).shape == (2, 5)

    def test_contains_rejects_outside_point(self):
        sphere = bounding_sphere(torch.eye(3, dtype=torch.float64))

        assert not sphere.contains(
            torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64)
        )

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_preserves_dtype(self, dtype):
        sphere = bounding_sphere(torch.randn(4, 3, dtype=dtype))

        assert sphere.center.dtype == dtype
        assert sphere.radius.dtype == dtype

    def test_empty_raises_error(self):
        with pytest.raises(InsufficientPointsError):
            bounding_sphere(torch.zeros(0, 3))

    def test_insufficient_points_is_geometry_error(self):
        with pytest.raises(GeometryError):
            bounding_sphere(torch.zeros(0, 3))

    @pytest.mark.parametrize("shape", [(4, 2), (4,), (2, 4, 3)])
    def test_wrong_shape_raises_error(self, shape):
        with pytest.raises(ValueError):
            bounding_sphere(torch.zeros(shape))
