"""Hypothesis strategies for trapezoidal integration testing."""

from ._available_devices import available_devices
from ._integration_problems import integration_problems
from ._real_number_dtypes import real_number_dtypes
from ._real_numbers import real_numbers
from ._sample_points import sample_points
from ._shapes import shapes
from ._tensors import tensors

__all__ = [
    # Numeric strategies
    "real_numbers",
    # Tensor strategies
    "shapes",
    "tensors",
    "sample_points",
    "integration_problems",
    # Dtype strategies
    "real_number_dtypes",
    # Device strategies
    "available_devices",
]
