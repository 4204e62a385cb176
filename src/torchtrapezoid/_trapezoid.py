"""Trapezoidal rule for numerical integration."""

from typing import Any, Optional

from torchtrapezoid._backend import ArrayBackend, get_backend
from torchtrapezoid._dim import normalize_dim, zeros_like_except
from torchtrapezoid._exceptions import UnsupportedDTypeError
from torchtrapezoid._spacing import (
    ArraySpacing,
    ScalarSpacing,
    Spacing,
    as_spacing,
    sample_spacing,
)


def _trapezoid_array(backend: ArrayBackend, y: Any, dx: Any, dim: int) -> Any:
    # sum_i dx_i * (y_i + y_{i+1}) / 2
    left = backend.slice(y, dim, 0, -1)
    right = backend.slice(y, dim, 1, None)

    return backend.sum((left + right) * dx, dim) / 2.0


def _trapezoid_scalar(
    backend: ArrayBackend, y: Any, dx: float, dim: int
) -> Any:
    # dx * (sum_i y_i - (y_0 + y_{n-1}) / 2)
    first = backend.select(y, dim, 0)
    last = backend.select(y, dim, -1)

    return (backend.sum(y, dim) - (first + last) * 0.5) * dx


def trapezoid_with_spacing(
    y: Any,
    spacing: Spacing,
    dim: int = -1,
    *,
    name: str = "trapezoid",
) -> Any:
    """
    Integrate ``y`` along ``dim`` with an explicit spacing variant.

    Parameters
    ----------
    y : Tensor or numpy.ndarray
        Values to integrate.
    spacing : ArraySpacing or ScalarSpacing
        Sample points or uniform spacing.
    dim : int
        Dimension along which to integrate.
    name : str
        Entry point name used in error messages.

    Returns
    -------
    Tensor or numpy.ndarray
        Definite integral approximation. Shape is y.shape with ``dim``
        removed.

    Raises
    ------
    InvalidDimensionError
        If ``dim`` is out of range for ``y``.
    UnsupportedDTypeError
        If ``y`` or the sample points are boolean.
    SampleCountMismatchError
        If 1-D sample points do not match the size of ``y`` along ``dim``.
    SampleRankError
        If the sample points have more dimensions than ``y``.
    """
    x = spacing.x if isinstance(spacing, ArraySpacing) else None
    backend = get_backend(y, x)
    y = backend.asarray(y, like=x)

    dim = normalize_dim(dim, backend.ndim(y))

    # The integral over zero samples is zero, as in NumPy.
    if backend.shape(y)[dim] == 0:
        return zeros_like_except(backend, y, dim)

    if isinstance(spacing, ScalarSpacing):
        if backend.is_bool(y):
            raise UnsupportedDTypeError(
                f"{name}: received a bool input for `y`, but bool is not "
                f"supported"
            )

        return _trapezoid_scalar(backend, y, spacing.dx, dim)

    x = backend.asarray(x, like=y)

    if backend.is_bool(y) or backend.is_bool(x):
        raise UnsupportedDTypeError(
            f"{name}: received a bool input for `x` or `y`, but bool is not "
            f"supported"
        )

    dx = sample_spacing(backend, y, x, dim, name=name)

    return _trapezoid_array(backend, y, dx, dim)


def trapezoid(
    y: Any,
    x: Optional[Any] = None,
    *,
    dx: Optional[float] = None,
    dim: int = -1,
) -> Any:
    """
    Integrate y along the given dimension using the composite trapezoidal rule.

    Parameters
    ----------
    y : Tensor or numpy.ndarray
        Values to integrate.
    x : Tensor or numpy.ndarray, optional
        Sample points. A 1-D ``x`` must have one point per sample along
        ``dim``. A lower-rank ``x`` is aligned with the trailing dimensions of
        ``y``; an ``x`` of the same rank as ``y`` is used as is. Either way
        it must broadcast against ``y``.
    dx : float, optional
        Spacing between sample points when x is None. Default is 1.0 if
        neither x nor dx is specified.
    dim : int
        Dimension along which to integrate.

    Returns
    -------
    Tensor or numpy.ndarray
        Definite integral approximation. Shape is y.shape with ``dim``
        removed. If ``y`` has no samples along ``dim`` the result is zero.

    Raises
    ------
    ValueError
        If both ``x`` and ``dx`` are given.
    InvalidDimensionError
        If ``dim`` is out of range for ``y``.
    UnsupportedDTypeError
        If ``y`` or ``x`` is boolean, or ``dx`` is not a real number.
    SampleCountMismatchError
        If a 1-D ``x`` does not match the size of ``y`` along ``dim``.
    SampleRankError
        If ``x`` has more dimensions than ``y``.

    Notes
    -----
    Fully differentiable with respect to both ``y`` and ``x``.

    With uniform spacing the rule is evaluated as
    ``dx * (sum(y) - (y[0] + y[-1]) / 2)``, which reads each sample once.

    Examples
    --------
    >>> trapezoid(torch.tensor([1.0, 2.0, 3.0]), torch.tensor([0.0, 1.0, 2.0]))
    tensor(4.)

    >>> y = torch.tensor([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    >>> trapezoid(y, dx=1.0, dim=1)
    tensor([ 4., 10.])
    """
    spacing = as_spacing(x, dx, name="trapezoid")

    return trapezoid_with_spacing(y, spacing, dim, name="trapezoid")


def trapz(
    y: Any,
    x: Optional[Any] = None,
    *,
    dx: Optional[float] = None,
    dim: int = -1,
) -> Any:
    """
    Alias for :func:`trapezoid`.

    Kept for code written against the older NumPy and PyTorch name.
    """
    spacing = as_spacing(x, dx, name="trapz")

    return trapezoid_with_spacing(y, spacing, dim, name="trapz")
