"""Testing helpers for torchbezier.

Example usage:

    import hypothesis

    from torchbezier.spline import cubic_bezier_curve
    from torchbezier.testing.strategies import control_points, parameters

    @hypothesis.given(control_points(), parameters())
    def test_point_is_finite(b, u):
        assert cubic_bezier_curve(b).evaluate(u).isfinite().all()
"""

from . import strategies

__all__ = [
    "strategies",
]
