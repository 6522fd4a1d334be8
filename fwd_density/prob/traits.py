# prob/traits.py
"""
Argument traits for the probability kernels.

Kernels accept each argument as a plain number, a Dual, or a sequence
(list, tuple, 1-D ndarray) of either. Differentiability is read off the
argument itself: an argument is differentiable iff it is a Dual or a
sequence holding at least one Dual.
"""

from typing import Any

import numpy as np

from ..fwd.core.dual import Dual


def is_vector(x: Any) -> bool:
    """True for sequences (list, tuple, non-0-d ndarray)."""
    if isinstance(x, np.ndarray):
        return x.ndim > 0
    return isinstance(x, (list, tuple))


def length(x: Any) -> int:
    """Number of elements; scalars count as 1."""
    return len(x) if is_vector(x) else 1


def max_size(*args: Any) -> int:
    return max(length(a) for a in args)


def is_constant_struct(x: Any) -> bool:
    """True when no derivative flows through x."""
    if x is None:
        return True
    if isinstance(x, Dual):
        return False
    if isinstance(x, np.ndarray):
        if x.dtype != object:
            return True
        return not any(isinstance(v, Dual) for v in x.ravel())
    if isinstance(x, (list, tuple)):
        return not any(isinstance(v, Dual) for v in x)
    return True


def is_first_order(x: Any) -> bool:
    """False when x is, or holds, a Dual whose components are Duals."""
    if isinstance(x, Dual):
        return not isinstance(x.val, Dual) and not isinstance(x.d, Dual)
    if is_vector(x) and not is_constant_struct(x):
        return all(is_first_order(v) for v in np.ravel(np.asarray(x, dtype=object)))
    return True


def include_summand(propto: bool, *args: Any) -> bool:
    """
    Whether a term depending on `args` belongs in the result.

    Terms are always kept for the full density; with propto=True a term is
    dropped when every argument it depends on is constant.
    """
    return not propto or not all(is_constant_struct(a) for a in args)


def return_type(*args: Any) -> type:
    """Dual if any argument is differentiable, else float."""
    return float if all(is_constant_struct(a) for a in args) else Dual
