"""Testing helpers for trapezoidal integration.

Example usage:

    import hypothesis

    from torchtrapezoid import trapezoid
    from torchtrapezoid.testing import integration_problems

    @hypothesis.given(integration_problems())
    def test_finite(problem):
        y, x, dim = problem
        assert torch.isfinite(trapezoid(y, x, dim=dim)).all()
"""

from .strategies import (
    available_devices,
    integration_problems,
    real_number_dtypes,
    real_numbers,
    sample_points,
    shapes,
    tensors,
)

__all__ = [
    # Strategies - numeric
    "real_numbers",
    # Strategies - tensor
    "shapes",
    "tensors",
    "sample_points",
    "integration_problems",
    # Strategies - dtype
    "real_number_dtypes",
    # Strategies - device
    "available_devices",
]
