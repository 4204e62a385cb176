"""Cumulative trapezoidal rule."""

from typing import Any, Optional

from torchtrapezoid._backend import ArrayBackend, get_backend
from torchtrapezoid._dim import normalize_dim
from torchtrapezoid._exceptions import UnsupportedDTypeError
from torchtrapezoid._spacing import (
    ArraySpacing,
    ScalarSpacing,
    Spacing,
    as_spacing,
    real_scalar,
    sample_spacing,
)


def _cumulative_trapezoid_array(
    backend: ArrayBackend, y: Any, dx: Any, dim: int
) -> Any:
    left = backend.slice(y, dim, 0, -1)
    right = backend.slice(y, dim, 1, None)

    return backend.cumsum((left + right) * dx, dim) / 2.0


def _cumulative_trapezoid_scalar(
    backend: ArrayBackend, y: Any, dx: float, dim: int
) -> Any:
    left = backend.slice(y, dim, 0, -1)
    right = backend.slice(y, dim, 1, None)

    return backend.cumsum(dx / 2.0 * (left + right), dim)


def _prepend(
    backend: ArrayBackend, result: Any, initial: float, dim: int
) -> Any:
    shape = list(backend.shape(result))
    shape[dim] = 1

    return backend.cat(
        [backend.full(tuple(shape), initial, like=result), result], dim
    )


def cumulative_trapezoid_with_spacing(
    y: Any,
    spacing: Spacing,
    dim: int = -1,
    *,
    initial: Optional[float] = None,
    name: str = "cumulative_trapezoid",
) -> Any:
    """
    Cumulatively integrate ``y`` along ``dim`` with an explicit spacing
    variant.

    See :func:`cumulative_trapezoid` for the meaning of the arguments and
    the errors raised.
    """
    x = spacing.x if isinstance(spacing, ArraySpacing) else None
    backend = get_backend(y, x)
    y = backend.asarray(y, like=x)

    dim = normalize_dim(dim, backend.ndim(y))

    if initial is not None:
        initial = real_scalar(initial, name, "initial")

    if isinstance(spacing, ScalarSpacing):
        if backend.is_bool(y):
            raise UnsupportedDTypeError(
                f"{name}: received a bool input for `y`, but bool is not "
                f"supported"
            )

        result = _cumulative_trapezoid_scalar(backend, y, spacing.dx, dim)
    else:
        x = backend.asarray(x, like=y)

        if backend.is_bool(y) or backend.is_bool(x):
            raise UnsupportedDTypeError(
                f"{name}: received a bool input for `x` or `y`, but bool is "
                f"not supported"
            )

        dx = sample_spacing(backend, y, x, dim, name=name)

        result = _cumulative_trapezoid_array(backend, y, dx, dim)

    if initial is not None:
        result = _prepend(backend, result, initial, dim)

    return result


def cumulative_trapezoid(
    y: Any,
    x: Optional[Any] = None,
    *,
    dx: Optional[float] = None,
    dim: int = -1,
    initial: Optional[float] = None,
) -> Any:
    """
    Cumulatively integrate y using the composite trapezoidal rule.

    Parameters
    ----------
    y : Tensor or numpy.ndarray
        Values to integrate.
    x : Tensor or numpy.ndarray, optional
        Sample points, aligned against ``y`` as in :func:`trapezoid`.
    dx : float, optional
        Spacing when x is None. Default is 1.0 if neither x nor dx is
        specified.
    dim : int
        Dimension along which to integrate.
    initial : float, optional
        If given, insert this value at the beginning. Output has same shape as
        y. If None, output has one fewer element along ``dim``.

    Returns
    -------
    Tensor or numpy.ndarray
        Cumulative integral values. Element ``i`` along ``dim`` is the
        integral over the first ``i + 1`` intervals.

    Raises
    ------
    ValueError
        If both ``x`` and ``dx`` are given.
    InvalidDimensionError
        If ``dim`` is out of range for ``y``.
    UnsupportedDTypeError
        If ``y`` or ``x`` is boolean, or ``dx`` or ``initial`` is not a real
        number.
    SampleCountMismatchError
        If a 1-D ``x`` does not match the size of ``y`` along ``dim``.
    SampleRankError
        If ``x`` has more dimensions than ``y``.

    Examples
    --------
    >>> y = torch.tensor([1.0, 2.0, 3.0])
    >>> cumulative_trapezoid(y, torch.tensor([0.0, 1.0, 2.0]))
    tensor([1.5000, 4.0000])
    >>> cumulative_trapezoid(y, initial=0.0)
    tensor([0.0000, 1.5000, 4.0000])
    """
    spacing = as_spacing(x, dx, name="cumulative_trapezoid")

    return cumulative_trapezoid_with_spacing(
        y, spacing, dim, initial=initial, name="cumulative_trapezoid"
    )
