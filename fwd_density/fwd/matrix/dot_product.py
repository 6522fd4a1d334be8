# fwd/matrix/dot_product.py
from __future__ import annotations
from typing import Any, Optional

import numpy as np

from ..core.dual import Dual
from ...prob.error_handling import validate_matching_sizes, validate_vector


def _as_vector(v: Any) -> np.ndarray:
    """View v (list, tuple, ndarray of floats or Duals) as an object ndarray."""
    return np.asarray(v, dtype=object)


def dot_product(v1: Any, v2: Any, length: Optional[int] = None) -> Dual:
    """
    Σ v1[i] * v2[i] for two vectors of Duals and/or plain numbers.

    Each argument may be 1-D or a single row/column (shape (1, n) or (n, 1));
    row and column vectors combine in any order.

    Args:
        v1, v2: Vectors to reduce
        length: When given, reduce only the first `length` elements and skip
            the equal-size check; both arguments must still be vector-shaped.

    Returns:
        Dual, even when neither argument holds a Dual (its tangent is 0).

    Raises:
        ShapeMismatch: an argument is not vector-shaped, or (without `length`)
            the sizes differ.
    """
    a = _as_vector(v1)
    b = _as_vector(v2)
    validate_vector(a, "dot_product")
    validate_vector(b, "dot_product")
    if length is None:
        validate_matching_sizes(a, b, "dot_product")
        length = a.size

    a = a.ravel()
    b = b.ravel()
    ret = Dual(0.0, 0.0)
    for i in range(length):
        ret += a[i] * b[i]
    return ret


def to_dual(x: Any, d: Any = None) -> np.ndarray:
    """
    Lift a numeric array to an object array of Duals of the same shape.

    Args:
        x: Values; elements that already are Duals are kept as is
        d: Optional tangents with the shape of x (zeros when omitted)
    """
    vals = np.asarray(x, dtype=object)
    tangents = np.zeros(vals.shape) if d is None else np.asarray(d, dtype=np.float64)
    if tangents.shape != vals.shape:
        raise ValueError(f"tangent shape {tangents.shape} does not match value shape {vals.shape}")
    out = np.empty(vals.shape, dtype=object)
    for idx in np.ndindex(vals.shape):
        v = vals[idx]
        out[idx] = v if isinstance(v, Dual) else Dual(v, tangents[idx])
    return out
