# fwd/ops/transcendental.py
#
# Each function accepts a plain number (returns the NumPy result) or a Dual.
# Values are computed by recursing into the same function, so nested duals
# propagate higher derivatives.
import numpy as np
from ..core.dual import Dual


def exp(x):
    if not isinstance(x, Dual):
        with np.errstate(over="ignore"):
            return np.exp(x)
    ex = exp(x.val)
    return Dual(ex, ex * x.d)


def log(x):
    if not isinstance(x, Dual):
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        return Dual(log(x.val), x.d / x.val)


def log1p(x):
    if not isinstance(x, Dual):
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log1p(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        return Dual(log1p(x.val), x.d / (1.0 + x.val))


def expm1(x):
    if not isinstance(x, Dual):
        with np.errstate(over="ignore"):
            return np.expm1(x)
    return Dual(expm1(x.val), exp(x.val) * x.d)


def sqrt(x):
    if not isinstance(x, Dual):
        with np.errstate(invalid="ignore"):
            return np.sqrt(x)
    s = sqrt(x.val)
    with np.errstate(divide="ignore", invalid="ignore"):
        return Dual(s, (0.5 / s) * x.d)


def sin(x):
    if not isinstance(x, Dual):
        return np.sin(x)
    return Dual(sin(x.val), cos(x.val) * x.d)


def cos(x):
    if not isinstance(x, Dual):
        return np.cos(x)
    return Dual(cos(x.val), -sin(x.val) * x.d)


def tanh(x):
    if not isinstance(x, Dual):
        return np.tanh(x)
    t = tanh(x.val)
    return Dual(t, (1.0 - t * t) * x.d)


def fabs(x):
    """
    Absolute value. The derivative at 0 is taken as 0.
    """
    if not isinstance(x, Dual):
        return np.fabs(x)
    if x.val > 0:
        return Dual(x.val, x.d)
    if x.val < 0:
        return Dual(-x.val, -x.d)
    return Dual(fabs(x.val), 0.0 * x.d)
