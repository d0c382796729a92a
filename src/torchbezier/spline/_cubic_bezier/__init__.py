from ._cubic_bezier import (
    CubicBezierCurve,
    cubic_bezier,
    cubic_bezier_curve,
)
from ._cubic_bezier_algebraic_evaluate import algebraic_evaluate
from ._cubic_bezier_basis import (
    bernstein_basis,
    bernstein_basis_first_derivative,
    bernstein_basis_second_derivative,
    bernstein_basis_third_derivative,
)
from ._cubic_bezier_bounding_volume import (
    cubic_bezier_axis_aligned_bounding_box,
    cubic_bezier_bounding_sphere,
    cubic_bezier_oriented_bounding_box,
)
from ._cubic_bezier_conversion import (
    algebraic_from_bezier,
    bezier_from_algebraic,
    bezier_from_hermite,
    hermite_from_bezier,
)
from ._cubic_bezier_evaluate import (
    cubic_bezier_evaluate,
    cubic_bezier_first_derivative,
    cubic_bezier_second_derivative,
    cubic_bezier_third_derivative,
)
from ._cubic_bezier_matrix import (
    get_mb,
    get_mb_inv,
    get_mb_inv_mh,
    get_mh_inv_mb,
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
