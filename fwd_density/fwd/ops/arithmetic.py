# fwd/ops/arithmetic.py
import numpy as np
from ..core.dual import Dual


def _as_dual(x):
    """Ensure x is a Dual; otherwise wrap it as a constant (zero tangent)."""
    return x if isinstance(x, Dual) else Dual(x, 0.0)


def _binary(x, y, f, dfdx, dfdy):
    """
    Generic binary primitive:
      out.val = f(x.val, y.val)
      out.d   = ∂f/∂x · x.d + ∂f/∂y · y.d
    """
    x = _as_dual(x)
    y = _as_dual(y)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        val = f(x.val, y.val)
        d = dfdx(x.val, y.val) * x.d + dfdy(x.val, y.val) * y.d
    return Dual(val, d)


def add(x, y): return _binary(x, y, lambda a, b: a + b, lambda a, b: 1.0, lambda a, b: 1.0)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, lambda a, b: 1.0, lambda a, b: -1.0)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, lambda a, b: b,   lambda a, b: a)


def div(x, y):
    """
    Quotient:
      out.val = x.val / y.val
      out.d   = (x.d * y.val - x.val * y.d) / y.val^2

    A zero-valued divisor gives inf/NaN exactly like float64 division.
    """
    x = _as_dual(x)
    y = _as_dual(y)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        val = x.val / y.val
        d = (x.d * y.val - x.val * y.d) / (y.val * y.val)
    return Dual(val, d)


def neg(x):
    x = _as_dual(x)
    return Dual(-x.val, -x.d)


def pow(x, y):
    """
    Power x ** y.

      constant exponent p : out.d = p * x^(p-1) * x.d   (0 for p == 0)
      dual exponent       : out.d = x^p * (p.d * log(x) + p * x.d / x)

    The dual-exponent rule needs x > 0; elsewhere it yields NaN like log does.
    """
    from .transcendental import log

    if not isinstance(y, Dual):
        x = _as_dual(x)
        if y == 0:
            # x^0 is constant; 0 * x^(-1) would be NaN at x == 0
            return Dual(x.val ** y, 0.0 * x.d)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return Dual(x.val ** y, y * x.val ** (y - 1) * x.d)

    x = _as_dual(x)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        val = x.val ** y.val
        d = val * (y.d * log(x.val) + y.val * x.d / x.val)
    return Dual(val, d)
