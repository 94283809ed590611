from __future__ import annotations

from typing import Any

import numpy as np


def to_numpy(self: Any, dtype: Any = None) -> np.ndarray:
    """Copy the matrix into a new 2D NumPy array."""
    return np.array(self.to_list(), dtype=dtype)


def _array(self: Any, dtype: Any = None, copy: Any = None) -> np.ndarray:
    if copy is False:
        raise ValueError("PyMatrix matrices cannot be exposed to NumPy without a copy")
    return to_numpy(self, dtype=dtype)


def _array_ufunc(self: Any, ufunc: Any, method: str, *inputs: Any, **kwargs: Any) -> Any:
    """
    NumPy ufunc protocol implementation for PyMatrix matrices.
    Routes the arithmetic ufuncs to the matrix operators so that NumPy never
    broadcasts element-wise over a matrix.
    """
    if method != "__call__" or kwargs or len(inputs) != 2:
        return NotImplemented

    # Lazy import to avoid circular dependency
    from .matrix import Matrix

    a, b = (
        Matrix(x) if isinstance(x, np.ndarray) and x.ndim == 2 else x for x in inputs
    )
    a_is_matrix = isinstance(a, Matrix)

    if ufunc is np.add:
        return a.__add__(b) if a_is_matrix else NotImplemented
    if ufunc is np.multiply:
        return a.__mul__(b) if a_is_matrix else b.__rmul__(a)
    if ufunc is np.matmul:
        return a.__matmul__(b) if a_is_matrix else NotImplemented
    return NotImplemented


def patch_interop(cls: Any) -> None:
    """Install the NumPy array/ufunc protocols on the given class."""
    cls.to_numpy = to_numpy
    cls.__array__ = _array
    cls.__array_ufunc__ = _array_ufunc
