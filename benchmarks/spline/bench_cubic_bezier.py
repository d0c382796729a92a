"""Benchmarks for cubic Bezier curve functions.

This module compares the structured basis conversions against dense matrix
products, and Bernstein evaluation against Horner evaluation of the
algebraic form.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchbezier.spline import (
    algebraic_evaluate,
    algebraic_from_bezier,
    cubic_bezier_axis_aligned_bounding_box,
    cubic_bezier_bounding_sphere,
    cubic_bezier_curve,
    cubic_bezier_evaluate,
    cubic_bezier_oriented_bounding_box,
    get_mb,
    get_mh_inv_mb,
    hermite_from_bezier,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Timing statistics in seconds with keys 'mean', 'std', 'min' and
        'max'.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, timing in times.items():
        slowdown = timing["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(timing['mean'])} +/- {format_time(timing['std'])}{suffix}"
        )


def generate_control_points(
    value_shape: tuple[int, ...] = (3,),
    seed: int | None = None,
) -> torch.Tensor:
    """Random control points of shape (4, *value_shape) in float64."""
    if seed is not None:
        torch.manual_seed(seed)

    return torch.randn(4, *value_shape, dtype=torch.float64)


class BenchCubicBezier:
    """Benchmarks for cubic Bezier curve functions."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_compare_algebraic_conversion(self, num_values: int = 3) -> None:
        """Compare closed-form and dense Bezier to algebraic conversion.

        Parameters
        ----------
        num_values : int, optional
            Size of the trailing value axis. Default is 3.
        """
        b = generate_control_points((num_values,), seed=42)
        mb = get_mb(dtype=b.dtype)

        times = {
            "closed form": self._bench(algebraic_from_bezier, b),
            "dense Mb @ B": self._bench(torch.matmul, mb, b),
        }

        print_comparison(f"Bezier -> algebraic (values={num_values})", times)

    def bench_compare_hermite_conversion(self, num_values: int = 3) -> None:
        """Compare closed-form and dense Bezier to Hermite conversion."""
        b = generate_control_points((num_values,), seed=42)
        matrix = get_mh_inv_mb(dtype=b.dtype)

        times = {
            "closed form": self._bench(hermite_from_bezier, b),
            "dense Mh^-1 Mb @ B": self._bench(torch.matmul, matrix, b),
        }

        print_comparison(f"Bezier -> Hermite (values={num_values})", times)

    def bench_compare_evaluation(self, num_parameters: int = 10000) -> None:
        """Compare Bernstein and Horner evaluation of the same curve.

        Parameters
        ----------
        num_parameters : int, optional
            Number of parameter values. Default is 10000.
        """
        curve = cubic_bezier_curve(generate_control_points(seed=42))
        coefficients = curve.algebraic_coefficients()
        u = torch.linspace(0, 1, num_parameters, dtype=torch.float64)

        times = {
            "Bernstein": self._bench(cubic_bezier_evaluate, curve, u),
            "Horner": self._bench(algebraic_evaluate, coefficients, u),
        }

        print_comparison(f"Evaluation (parameters={num_parameters})", times)

    def bench_bounding_volumes(self) -> None:
        """Benchmark the three bounding volumes of a single segment."""
        curve = cubic_bezier_curve(generate_control_points(seed=42))

        times = {
            "axis-aligned box": self._bench(
                cubic_bezier_axis_aligned_bounding_box, curve
            ),
            "sphere": self._bench(cubic_bezier_bounding_sphere, curve),
            "oriented box": self._bench(
                cubic_bezier_oriented_bounding_box, curve
            ),
        }

        print_comparison("Bounding volumes", times)

    def run_all(self) -> None:
        """Run all cubic Bezier benchmarks."""
        print("=" * 60)
        print("CUBIC BEZIER BENCHMARKS")
        print("=" * 60)

        print("\n--- Basis Conversions ---")
        self.bench_compare_algebraic_conversion()
        self.bench_compare_hermite_conversion()

        print("\n--- Evaluation ---")
        self.bench_compare_evaluation()

        print("\n--- Bounding Volumes ---")
        self.bench_bounding_volumes()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Parameter Count Scaling ---")
        for num_parameters in [100, 1000, 10000, 100000]:
            self.bench_compare_evaluation(num_parameters=num_parameters)

        print("\n--- Value Width Scaling ---")
        for num_values in [3, 64, 1024]:
            self.bench_compare_algebraic_conversion(num_values=num_values)


if __name__ == "__main__":
    bench = BenchCubicBezier(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
