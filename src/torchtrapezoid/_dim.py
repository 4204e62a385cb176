"""Dimension handling shared by the trapezoid entry points."""

from typing import Any

from torchtrapezoid._backend import ArrayBackend
from torchtrapezoid._exceptions import InvalidDimensionError


def normalize_dim(dim: int, ndim: int) -> int:
    """
    Wrap a possibly negative dimension index into ``[0, ndim)``.

    Parameters
    ----------
    dim : int
        Dimension index. Negative values count from the end.
    ndim : int
        Number of dimensions of the array being indexed.

    Returns
    -------
    int
        Non-negative dimension index.

    Raises
    ------
    InvalidDimensionError
        If ``dim`` is outside ``[-ndim, ndim - 1]``. Every ``dim`` is out of
        range for a 0-dimensional array.

    Examples
    --------
    >>> normalize_dim(-1, 2)
    1
    """
    if not -ndim <= dim < ndim:
        raise InvalidDimensionError(
            f"Dimension out of range (expected to be in range of "
            f"[{-ndim}, {ndim - 1}], but got {dim})"
        )

    if dim < 0:
        dim = dim + ndim

    return dim


def zeros_like_except(backend: ArrayBackend, y: Any, dim: int) -> Any:
    """Zeros shaped like ``y`` with ``dim`` removed."""
    shape = list(backend.shape(y))
    del shape[normalize_dim(dim, len(shape))]
    return backend.zeros(tuple(shape), like=y)
