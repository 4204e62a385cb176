"""Minimal array interface used by the trapezoid kernels.

The kernels only slice, reshape, reduce, and accumulate along a single
dimension; elementwise arithmetic is written with Python operators and
relies on the backend's broadcasting.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

import numpy
import torch
from torch import Tensor


class ArrayBackend(ABC):
    """Operations an array library must provide to be integrated over."""

    name: str

    @abstractmethod
    def asarray(self, a: Any, like: Optional[Any] = None) -> Any:
        """Convert ``a`` to this backend's array type, next to ``like``."""
        ...

    @abstractmethod
    def is_bool(self, a: Any) -> bool: ...

    @abstractmethod
    def reshape(self, a: Any, shape: Tuple[int, ...]) -> Any:
        """Reshape ``a`` without copying where the layout allows it."""
        ...

    @abstractmethod
    def sum(self, a: Any, dim: int) -> Any: ...

    @abstractmethod
    def cumsum(self, a: Any, dim: int) -> Any: ...

    @abstractmethod
    def zeros(self, shape: Tuple[int, ...], like: Any) -> Any:
        """Zeros with ``like``'s dtype (and device)."""
        ...

    @abstractmethod
    def full(self, shape: Tuple[int, ...], value: float, like: Any) -> Any: ...

    @abstractmethod
    def cat(self, arrays: Sequence[Any], dim: int) -> Any: ...

    def ndim(self, a: Any) -> int:
        return a.ndim

    def shape(self, a: Any) -> Tuple[int, ...]:
        return tuple(a.shape)

    def slice(
        self, a: Any, dim: int, start: Optional[int], stop: Optional[int]
    ) -> Any:
        """``a[start:stop]`` along ``dim``; the rank is unchanged."""
        return a[(slice(None),) * dim + (slice(start, stop),)]

    def select(self, a: Any, dim: int, index: int) -> Any:
        """``a[index]`` along ``dim``; ``dim`` is removed."""
        return a[(slice(None),) * dim + (index,)]


class TorchBackend(ArrayBackend):
    name = "torch"

    def asarray(self, a: Any, like: Optional[Any] = None) -> Tensor:
        if isinstance(a, Tensor):
            return a
        device = like.device if isinstance(like, Tensor) else None
        return torch.as_tensor(a, device=device)

    def is_bool(self, a: Tensor) -> bool:
        return a.dtype == torch.bool

    def reshape(self, a: Tensor, shape: Tuple[int, ...]) -> Tensor:
        # reshape returns a view whenever the strides permit one
        return a.reshape(shape)

    def sum(self, a: Tensor, dim: int) -> Tensor:
        return a.sum(dim)

    def cumsum(self, a: Tensor, dim: int) -> Tensor:
        return a.cumsum(dim)

    def zeros(self, shape: Tuple[int, ...], like: Tensor) -> Tensor:
        return torch.zeros(shape, dtype=like.dtype, device=like.device)

    def full(
        self, shape: Tuple[int, ...], value: float, like: Tensor
    ) -> Tensor:
        return torch.full(shape, value, dtype=like.dtype, device=like.device)

    def cat(self, arrays: Sequence[Tensor], dim: int) -> Tensor:
        return torch.cat(list(arrays), dim=dim)


class NumPyBackend(ArrayBackend):
    name = "numpy"

    def asarray(self, a: Any, like: Optional[Any] = None) -> numpy.ndarray:
        return numpy.asarray(a)

    def is_bool(self, a: numpy.ndarray) -> bool:
        return a.dtype == numpy.bool_

    def reshape(
        self, a: numpy.ndarray, shape: Tuple[int, ...]
    ) -> numpy.ndarray:
        return numpy.reshape(a, shape)

    def sum(self, a: numpy.ndarray, dim: int) -> numpy.ndarray:
        return numpy.sum(a, axis=dim)

    def cumsum(self, a: numpy.ndarray, dim: int) -> numpy.ndarray:
        return numpy.cumsum(a, axis=dim)

    def zeros(
        self, shape: Tuple[int, ...], like: numpy.ndarray
    ) -> numpy.ndarray:
        return numpy.zeros(shape, dtype=like.dtype)

    def full(
        self, shape: Tuple[int, ...], value: float, like: numpy.ndarray
    ) -> numpy.ndarray:
        return numpy.full(shape, value, dtype=like.dtype)

    def cat(
        self, arrays: Sequence[numpy.ndarray], dim: int
    ) -> numpy.ndarray:
        return numpy.concatenate(list(arrays), axis=dim)


_TORCH = TorchBackend()
_NUMPY = NumPyBackend()


def get_backend(*arrays: Any) -> ArrayBackend:
    """
    Select the backend for a set of arguments.

    Any ``torch.Tensor`` among ``arrays`` selects PyTorch, so NumPy arrays
    and Python sequences passed next to a tensor are moved onto its device.
    Otherwise NumPy is used.

    Parameters
    ----------
    *arrays : Any
        Arguments of the call; ``None`` entries are ignored.

    Returns
    -------
    ArrayBackend
        Backend able to operate on every argument.

    Examples
    --------
    >>> get_backend(torch.ones(3), [0.0, 1.0, 2.0]).name
    'torch'
    >>> get_backend(numpy.ones(3)).name
    'numpy'
    """
    if any(isinstance(a, Tensor) for a in arrays):
        return _TORCH
    return _NUMPY
