"""Tests for cubic Bernstein basis functions."""

import hypothesis
import pytest
import torch

from torchbezier.spline import (
    bernstein_basis,
    bernstein_basis_first_derivative,
    bernstein_basis_second_derivative,
    bernstein_basis_third_derivative,
    get_mb,
)
from torchbezier.testing.strategies import parameters


def _power_row(u: torch.Tensor) -> torch.Tensor:
    return torch.stack([u**3, u**2, u, torch.ones_like(u)], dim=-1)


class TestBernsteinBasis:
    """Tests for bernstein_basis."""

    def test_midpoint_weights(self):
        """Weights at u=0.5 are 1/8, 3/8, 3/8, 1/8."""
        result = bernstein_basis(torch.tensor(0.5, dtype=torch.float64))

        expected = torch.tensor(
            [0.125, 0.375, 0.375, 0.125], dtype=torch.float64
        )
        assert torch.allclose(result, expected)

    def test_endpoints(self):
        """Only b0 contributes at u=0 and only b3 at u=1."""
        result = bernstein_basis(torch.tensor([0.0, 1.0]))

        assert torch.equal(result[0], torch.tensor([1.0, 0.0, 0.0, 0.0]))
        assert torch.equal(result[1], torch.tensor([0.0, 0.0, 0.0, 1.0]))

    @hypothesis.given(u=parameters())
    def test_partition_of_unity(self, u):
        """Weights are non-negative and sum to one on [0, 1]."""
        result = bernstein_basis(torch.tensor(u, dtype=torch.float64))

        assert torch.all(result >= 0)
        assert torch.isclose(
            result.sum(), torch.tensor(1.0, dtype=torch.float64)
        )

    @hypothesis.given(u=parameters(-3.0, 3.0))
    def test_matches_matrix_form(self, u):
        """Closed form should equal U Mb."""
        u = torch.tensor(u, dtype=torch.float64)

        expected = _power_row(u) @ get_mb(dtype=torch.float64)

        assert torch.allclose(bernstein_basis(u), expected, atol=1e-10)

    def test_shape(self):
        """Should append a basis axis to the query shape."""
        u = torch.rand(2, 5)

        assert bernstein_basis(u).shape == (2, 5, 4)

    def test_python_float(self):
        """Should accept a plain float."""
        result = bernstein_basis(0.25)

        assert result.shape == (4,)
        assert result.dtype == torch.get_default_dtype()

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_preserves_dtype(self, dtype):
        u = torch.tensor([0.1, 0.9], dtype=dtype)

        assert bernstein_basis(u).dtype == dtype


class TestBernsteinBasisDerivatives:
    """Tests for derivatives of the Bernstein basis."""

    @pytest.mark.parametrize(
        "basis, derivative",
        [
            (bernstein_basis, bernstein_basis_first_derivative),
            (bernstein_basis_first_derivative, bernstein_basis_second_derivative),
            (bernstein_basis_second_derivative, bernstein_basis_third_derivative),
        ],
    )
    def test_matches_autograd(self, basis, derivative):
        """Each row should be the derivative of the previous one."""
        for value in [-0.5, 0.0, 0.3, 0.7, 1.0, 1.5]:
            u = torch.tensor(value, dtype=torch.float64)

            jacobian = torch.autograd.functional.jacobian(basis, u)

            assert torch.allclose(jacobian, derivative(u), atol=1e-10)

    def test_first_derivative_values(self):
        """Closed form [-3u^2+6u-3, 9u^2-12u+3, -9u^2+6u, 3u^2]."""
        u = torch.tensor(0.5, dtype=torch.float64)

        expected = torch.tensor(
            [-0.75, -0.75, 0.75, 0.75], dtype=torch.float64
        )
        assert torch.allclose(bernstein_basis_first_derivative(u), expected)

    def test_second_derivative_values(self):
        """Closed form [6-6u, 18u-12, 6-18u, 6u]."""
        u = torch.tensor(0.0, dtype=torch.float64)

        expected = torch.tensor([6.0, -12.0, 6.0, 0.0], dtype=torch.float64)
        assert torch.allclose(bernstein_basis_second_derivative(u), expected)

    def test_derivatives_sum_to_zero(self):
        """Derivatives of a partition of unity sum to zero."""
        u = torch.linspace(-1, 2, 13, dtype=torch.float64)

        for derivative in (
            bernstein_basis_first_derivative,
            bernstein_basis_second_derivative,
            bernstein_basis_third_derivative,
        ):
            assert torch.allclose(
                derivative(u).sum(dim=-1),
                torch.zeros(13, dtype=torch.float64),
                atol=1e-12,
            )

    def test_third_derivative_is_constant(self):
        """Third derivative ignores u."""
        u = torch.tensor([-2.0, 0.0, 0.5, 7.0])

        result = bernstein_basis_third_derivative(u)

        expected = torch.tensor([-6.0, 18.0, -18.0, 6.0]).expand(4, 4)
        assert torch.equal(result, expected)

    def test_third_derivative_shape(self):
        """Third derivative keeps the query shape, dtype and device."""
        u = torch.zeros(3, 2, dtype=torch.float64)

        result = bernstein_basis_third_derivative(u)

        assert result.shape == (3, 2, 4)
        assert result.dtype == torch.float64
