"""Benchmarks for trapezoidal integration.

Compares the uniform-spacing path (one pass over ``y``) with the
sample-point path, and both with ``torch.trapezoid`` and SciPy.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.integrate
import torch

from torchtrapezoid import cumulative_trapezoid, trapezoid


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
        Mean, std, min and max time in seconds.
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


def print_comparison(name: str, times: dict[str, dict[str, float]]) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_time = min(t["mean"] for t in times.values())

    for method_name, t in times.items():
        slowdown = t["mean"] / fastest_time
        suffix = f" ({slowdown:.2f}x slower)" if slowdown > 1.01 else ""
        print(
            f"  {method_name}: {format_time(t['mean'])} "
            f"+/- {format_time(t['std'])}{suffix}"
        )


class BenchTrapezoid:
    """Benchmarks for trapezoid and cumulative_trapezoid."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_spacing(
        self, batch_size: int = 256, num_samples: int = 4096, dim: int = -1
    ) -> None:
        """Uniform spacing vs equivalent sample points."""
        y = torch.randn(batch_size, num_samples, dtype=torch.float64)
        x = 0.01 * torch.arange(y.shape[dim], dtype=torch.float64)

        times = {
            "trapezoid(dx)": self._bench(trapezoid, y, dx=0.01, dim=dim),
            "trapezoid(x)": self._bench(trapezoid, y, x, dim=dim),
            "torch.trapezoid(x)": self._bench(
                torch.trapezoid, y, x, dim=dim
            ),
            "scipy trapezoid(x)": self._bench(
                scipy.integrate.trapezoid, y.numpy(), x.numpy(), axis=dim
            ),
        }

        print_comparison(
            f"Trapezoid (batch={batch_size}, samples={num_samples})", times
        )

    def bench_cumulative(
        self, batch_size: int = 256, num_samples: int = 4096
    ) -> None:
        y = torch.randn(batch_size, num_samples, dtype=torch.float64)
        x = torch.rand(num_samples, dtype=torch.float64).cumsum(0)

        times = {
            "cumulative_trapezoid(dx)": self._bench(
                cumulative_trapezoid, y, dx=0.01
            ),
            "cumulative_trapezoid(x)": self._bench(
                cumulative_trapezoid, y, x
            ),
            "torch.cumulative_trapezoid(x)": self._bench(
                torch.cumulative_trapezoid, y, x
            ),
        }

        print_comparison(
            f"Cumulative trapezoid (batch={batch_size}, "
            f"samples={num_samples})",
            times,
        )

    def run_all(self) -> None:
        print("=" * 60)
        print("TRAPEZOID BENCHMARKS")
        print("=" * 60)

        self.bench_spacing()
        self.bench_spacing(dim=0, batch_size=4096, num_samples=256)
        self.bench_cumulative()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying sample counts."""
        print("\n--- Sample Count Scaling ---")
        for num_samples in [256, 4096, 65536]:
            self.bench_spacing(batch_size=16, num_samples=num_samples)


if __name__ == "__main__":
    bench = BenchTrapezoid(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
