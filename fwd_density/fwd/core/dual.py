# fwd/core/dual.py
from __future__ import annotations
import numpy as np
from typing import Any


class Dual:
    """
    Forward-mode dual number: a value carried together with its derivative.

    Attributes
    ----------
    val : np.float64 | Dual
        Primal value. Plain numbers are stored as float64 so that division by
        zero and log of zero propagate inf/NaN instead of raising.
    d : np.float64 | Dual
        Tangent (derivative of `val` along the seeded direction).

    Both components may themselves be Dual instances; Dual(Dual(x, 1), Dual(1, 0))
    propagates first and second derivatives at once.
    """

    __slots__ = ("val", "d")

    # NumPy scalars on the left-hand side return NotImplemented and defer to
    # the reflected Dual operator.
    __array_ufunc__ = None

    def __init__(self, val: Any, d: Any = 0.0):
        self.val = _as_component(val)
        self.d = _as_component(d)

    def __repr__(self):
        return f"Dual({self.val!r}, {self.d!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from ..ops.transcendental import fabs
        return fabs(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    # Comparisons look at the value only
    def __lt__(self, other):
        return self.val < _value(other)

    def __le__(self, other):
        return self.val <= _value(other)

    def __gt__(self, other):
        return self.val > _value(other)

    def __ge__(self, other):
        return self.val >= _value(other)

    def __eq__(self, other):
        if not isinstance(other, (Dual, int, float, np.number)):
            return NotImplemented
        return self.val == _value(other)

    def __ne__(self, other):
        if not isinstance(other, (Dual, int, float, np.number)):
            return NotImplemented
        return self.val != _value(other)

    __hash__ = None


def _as_component(x):
    if isinstance(x, Dual):
        return x
    if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, float, np.integer, np.floating)):
        raise TypeError(
            f"Dual only accepts real scalars or Dual components, but got {type(x)}"
        )
    return np.float64(x)


def _value(x):
    return x.val if isinstance(x, Dual) else x
