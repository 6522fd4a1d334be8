# prob/views.py
"""
Shape adapters used by the distribution kernels.

VectorView gives one indexing interface over a scalar and a sequence, so a
kernel can run a single loop over the broadcast length. DoubleVectorView is
the writable float buffer for precomputed terms and partial derivatives; a
disabled buffer allocates nothing.
"""

from typing import Any, Optional

import numpy as np

from .traits import is_vector


class VectorView:
    """
    Read-only view of an argument with a logical length.

    broadcast mode : a scalar, or a length-1 sequence; every index returns
                     the same element
    indexed mode   : a sequence of exactly `size` elements; index i returns x[i]

    Indices outside [0, size) raise IndexError in both modes.
    """

    __slots__ = ("_x", "_size", "_indexed")

    def __init__(self, x: Any, size: Optional[int] = None):
        if is_vector(x):
            n = len(x)
            if size is None:
                size = n
            if n == size:
                self._indexed = True
                self._x = x
            elif n == 1:
                self._indexed = False
                self._x = x[0]
            else:
                raise ValueError(f"cannot view a sequence of length {n} as length {size}")
        else:
            self._indexed = False
            self._x = x
            if size is None:
                size = 1
        self._size = size

    @property
    def indexed(self) -> bool:
        return self._indexed

    def __len__(self):
        return self._size

    def __getitem__(self, i: int):
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for view of length {self._size}")
        return self._x[i] if self._indexed else self._x

    get = __getitem__


class DoubleVectorView:
    """
    Writable float64 buffer of logical length `size`.

    used=False : nothing is allocated; length is 0, reads return 0.0 and
                 writes are discarded
    size == 1  : a single slot; every index maps to it
    otherwise  : one slot per index, indices outside [0, size) raise IndexError
    """

    __slots__ = ("_data", "_size")

    def __init__(self, used: bool, size: int):
        if used:
            self._data = np.zeros(max(size, 1), dtype=np.float64)
            self._size = size
        else:
            self._data = None
            self._size = 0

    @property
    def used(self) -> bool:
        return self._data is not None

    def __len__(self):
        return self._size

    def _slot(self, i: int) -> int:
        if self._size == 1:
            return 0
        if not 0 <= i < self._size:
            raise IndexError(f"index {i} out of range for buffer of length {self._size}")
        return i

    def __getitem__(self, i: int) -> float:
        if self._data is None:
            return 0.0
        return self._data[self._slot(i)]

    def __setitem__(self, i: int, v: float) -> None:
        if self._data is None:
            return
        self._data[self._slot(i)] = v

    def to_numpy(self) -> np.ndarray:
        """Copy of the buffer contents (empty when disabled)."""
        if self._data is None:
            return np.zeros(0, dtype=np.float64)
        return self._data[:self._size].copy()
