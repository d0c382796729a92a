"""Cubic Bezier curve segments for PyTorch tensors.

A segment is stored as four Bezier control points and can be converted
losslessly to algebraic (power basis) or Hermite (end point and tangent)
coefficients. All operations are pure functions of their inputs.

Convenience Functions
---------------------
cubic_bezier
    Create a cubic Bezier curve and return a callable evaluating it.
cubic_bezier_curve
    Create a CubicBezierCurve from control points.

Basis Conversion
----------------
algebraic_from_bezier, bezier_from_algebraic
    Between control points and algebraic coefficients.
hermite_from_bezier, bezier_from_hermite
    Between control points and Hermite coefficients.

Evaluation
----------
bernstein_basis, bernstein_basis_first_derivative,
bernstein_basis_second_derivative, bernstein_basis_third_derivative
    Bernstein basis rows and their derivatives.
cubic_bezier_evaluate, cubic_bezier_first_derivative,
cubic_bezier_second_derivative, cubic_bezier_third_derivative
    Curve point and derivatives.
algebraic_evaluate
    Horner evaluation from algebraic coefficients.

Matrix Utilities
----------------
get_mb, get_mb_inv, get_mh_inv_mb, get_mb_inv_mh
    Explicit 4x4 basis matrices.
multiply_by_mb, multiply_by_mb_inv, multiply_by_mh_inv_mb,
multiply_by_mb_inv_mh
    Structured products with those matrices.

Bounding Volumes
----------------
cubic_bezier_bounding_sphere
cubic_bezier_axis_aligned_bounding_box
cubic_bezier_oriented_bounding_box

Data Types
----------
CubicBezierCurve
    Cubic Bezier curve segment.
"""

from ._cubic_bezier import (
    CubicBezierCurve,
    algebraic_evaluate,
    algebraic_from_bezier,
    bernstein_basis,
    bernstein_basis_first_derivative,
    bernstein_basis_second_derivative,
    bernstein_basis_third_derivative,
    bezier_from_algebraic,
    bezier_from_hermite,
    cubic_bezier,
    cubic_bezier_axis_aligned_bounding_box,
    cubic_bezier_bounding_sphere,
    cubic_bezier_curve,
    cubic_bezier_evaluate,
    cubic_bezier_first_derivative,
    cubic_bezier_oriented_bounding_box,
    cubic_bezier_second_derivative,
    cubic_bezier_third_derivative,
    get_mb,
    get_mb_inv,
    get_mb_inv_mh,
    get_mh_inv_mb,
    hermite_from_bezier,
    multiply_by_mb,
    multiply_by_mb_inv,
    multiply_by_mb_inv_mh,
    multiply_by_mh_inv_mb,
)

__all__ = [
    "CubicBezierCurve",
    "algebraic_evaluate",
    "algebraic_from_bezier",
    "bernstein_basis",
    "bernstein_basis_first_derivative",
    "bernstein_basis_second_derivative",
    "bernstein_basis_third_derivative",
    "bezier_from_algebraic",
    "bezier_from_hermite",
    "cubic_bezier",
    "cubic_bezier_axis_aligned_bounding_box",
    "cubic_bezier_bounding_sphere",
    "cubic_bezier_curve",
    "cubic_bezier_evaluate",
    "cubic_bezier_first_derivative",
    "cubic_bezier_oriented_bounding_box",
    "cubic_bezier_second_derivative",
    "cubic_bezier_third_derivative",
    "get_mb",
    "get_mb_inv",
    "get_mb_inv_mh",
    "get_mh_inv_mb",
    "hermite_from_bezier",
    "multiply_by_mb",
    "multiply_by_mb_inv",
    "multiply_by_mb_inv_mh",
    "multiply_by_mh_inv_mb",
]
