"""
torchtrapezoid: trapezoidal integration of PyTorch tensors and NumPy arrays.

Sample-based integration (operates on pre-computed values):
    trapezoid, cumulative_trapezoid, trapz

Explicit spacing variants:
    ArraySpacing, ScalarSpacing, trapezoid_with_spacing,
    cumulative_trapezoid_with_spacing

Array backends:
    ArrayBackend, TorchBackend, NumPyBackend, get_backend

Exceptions:
    TrapezoidError, InvalidDimensionError, SampleCountMismatchError,
    SampleRankError, UnsupportedDTypeError, TrapezoidWarning
"""

from torchtrapezoid._backend import (
    ArrayBackend,
    NumPyBackend,
    TorchBackend,
    get_backend,
)
from torchtrapezoid._cumulative_trapezoid import (
    cumulative_trapezoid,
    cumulative_trapezoid_with_spacing,
)
from torchtrapezoid._dim import normalize_dim
from torchtrapezoid._exceptions import (
    InvalidDimensionError,
    SampleCountMismatchError,
    SampleRankError,
    TrapezoidError,
    TrapezoidWarning,
    UnsupportedDTypeError,
)
from torchtrapezoid._spacing import (
    ArraySpacing,
    ScalarSpacing,
    Spacing,
    add_padding_to_shape,
    as_spacing,
)
from torchtrapezoid._trapezoid import (
    trapezoid,
    trapezoid_with_spacing,
    trapz,
)

__all__ = [
    # Sample-based
    "trapezoid",
    "cumulative_trapezoid",
    "trapz",
    # Spacing
    "ArraySpacing",
    "ScalarSpacing",
    "Spacing",
    "as_spacing",
    "add_padding_to_shape",
    "trapezoid_with_spacing",
    "cumulative_trapezoid_with_spacing",
    # Dimensions
    "normalize_dim",
    # Backends
    "ArrayBackend",
    "TorchBackend",
    "NumPyBackend",
    "get_backend",
    # Exceptions
    "TrapezoidError",
    "InvalidDimensionError",
    "SampleCountMismatchError",
    "SampleRankError",
    "UnsupportedDTypeError",
    "TrapezoidWarning",
]

__version__ = "0.1.0"
