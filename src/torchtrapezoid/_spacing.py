"""Sample spacing for the trapezoidal rule."""

import numbers
import warnings
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

import numpy
import torch
from torch import Tensor

from torchtrapezoid._backend import ArrayBackend
from torchtrapezoid._exceptions import (
    SampleCountMismatchError,
    SampleRankError,
    TrapezoidWarning,
    UnsupportedDTypeError,
)


@dataclass(frozen=True)
class ArraySpacing:
    """Sample points given as an array.

    Parameters
    ----------
    x : Tensor or numpy.ndarray
        Either 1-D with one point per sample along the integration
        dimension, or any array with at most as many dimensions as the
        sampled values. Lower-rank arrays are aligned against the trailing
        dimensions of the values.
    """

    x: Any


@dataclass(frozen=True)
class ScalarSpacing:
    """Uniform spacing between consecutive samples.

    Parameters
    ----------
    dx : float
        Distance between consecutive samples.
    """

    dx: float


Spacing = Union[ArraySpacing, ScalarSpacing]


def real_scalar(value: Any, name: str, argument: str) -> float:
    """
    Convert a real scalar to ``float``.

    Accepts Python and NumPy real numbers and 0-dimensional real tensors or
    arrays.

    Raises
    ------
    UnsupportedDTypeError
        If ``value`` is boolean, complex, or not a number.
    ValueError
        If ``value`` is a tensor or array with more than one element.

    Warns
    -----
    TrapezoidWarning
        If ``value`` is a tensor that requires grad. The conversion to
        ``float`` detaches it.
    """
    if isinstance(value, Tensor):
        if value.dim() != 0:
            raise ValueError(
                f"{name}: expected {argument} to be a scalar, "
                f"got a tensor of shape {tuple(value.shape)}"
            )
        if value.dtype.is_complex or value.dtype == torch.bool:
            raise UnsupportedDTypeError(
                f"{name}: Currently, we only support {argument} as a real "
                f"number."
            )
        if value.requires_grad:
            warnings.warn(
                f"{name}: {argument} requires grad but is used as a constant "
                f"spacing; no gradient will flow to it. Pass sample points "
                f"as `x` to differentiate with respect to the spacing.",
                TrapezoidWarning,
                stacklevel=4,
            )
        return float(value.item())

    if isinstance(value, numpy.ndarray):
        if value.ndim != 0:
            raise ValueError(
                f"{name}: expected {argument} to be a scalar, "
                f"got an array of shape {value.shape}"
            )
        value = value[()]

    if isinstance(value, (bool, numpy.bool_)) or not isinstance(
        value, numbers.Real
    ):
        raise UnsupportedDTypeError(
            f"{name}: Currently, we only support {argument} as a real number."
        )

    return float(value)


def as_spacing(
    x: Optional[Any] = None,
    dx: Optional[Any] = None,
    name: str = "trapezoid",
) -> Spacing:
    """
    Build the spacing variant for a call.

    Parameters
    ----------
    x : array_like, optional
        Sample points.
    dx : float, optional
        Uniform spacing. Defaults to 1.0 when neither ``x`` nor ``dx`` is
        given.
    name : str
        Entry point name used in error messages.

    Returns
    -------
    ArraySpacing or ScalarSpacing

    Raises
    ------
    ValueError
        If both ``x`` and ``dx`` are given.
    UnsupportedDTypeError
        If ``dx`` is not a real number.

    Examples
    --------
    >>> as_spacing(dx=0.5)
    ScalarSpacing(dx=0.5)
    """
    if x is not None and dx is not None:
        raise ValueError(f"{name}: received both x and dx as arguments")

    if x is not None:
        return ArraySpacing(x)

    if dx is None:
        return ScalarSpacing(1.0)

    return ScalarSpacing(real_scalar(dx, name, "dx"))


def add_padding_to_shape(
    shape: Sequence[int], target_ndim: int
) -> Tuple[int, ...]:
    """
    Left-pad ``shape`` with ones up to ``target_ndim`` dimensions.

    The trailing entries keep the original extents in order. No padding is
    added when ``shape`` already has at least ``target_ndim`` dimensions.

    Examples
    --------
    >>> add_padding_to_shape((5, 5, 5), 6)
    (1, 1, 1, 5, 5, 5)
    >>> add_padding_to_shape((2, 3), 1)
    (2, 3)
    """
    shape = tuple(shape)
    return (1,) * max(target_ndim - len(shape), 0) + shape


def sample_spacing(
    backend: ArrayBackend,
    y: Any,
    x: Any,
    dim: int,
    name: str = "trapezoid",
) -> Any:
    """
    Per-interval spacing ``x[i + 1] - x[i]`` along ``dim``, aligned to ``y``.

    Parameters
    ----------
    backend : ArrayBackend
        Backend owning ``y`` and ``x``.
    y : Tensor or numpy.ndarray
        Sampled values.
    x : Tensor or numpy.ndarray
        Sample points.
    dim : int
        Normalized integration dimension of ``y``.
    name : str
        Entry point name used in error messages.

    Returns
    -------
    Tensor or numpy.ndarray
        Spacing with as many dimensions as ``y`` and one fewer element than
        ``y`` along ``dim``, broadcastable against slices of ``y``.

    Raises
    ------
    SampleCountMismatchError
        If ``x`` is 1-D and its length differs from ``y``'s size along
        ``dim``.
    SampleRankError
        If ``x`` has more dimensions than ``y``.

    Notes
    -----
    ``x`` is broadcast to ``y`` rather than the spacing being broadcast
    after differencing. A 1-D ``x`` is laid along ``dim``; any other
    lower-rank ``x`` is aligned with the trailing dimensions of ``y``.
    This differs from NumPy, which broadcasts the differenced spacing.
    """
    y_shape = backend.shape(y)
    x_shape = backend.shape(x)
    ndim = len(y_shape)

    if len(x_shape) == 1:
        if x_shape[0] != y_shape[dim]:
            raise SampleCountMismatchError(
                f"{name}: There must be one `x` value for each sample point "
                f"(got {x_shape[0]} values for {y_shape[dim]} samples along "
                f"dimension {dim})"
            )
        shape = [1] * ndim
        shape[dim] = x_shape[0]
        x = backend.reshape(x, tuple(shape))
    elif len(x_shape) < ndim:
        x = backend.reshape(x, add_padding_to_shape(x_shape, ndim))
    elif len(x_shape) > ndim:
        raise SampleRankError(
            f"{name}: `x` has {len(x_shape)} dimensions but `y` has only "
            f"{ndim}"
        )

    x_left = backend.slice(x, dim, 0, -1)
    x_right = backend.slice(x, dim, 1, None)

    return x_right - x_left
