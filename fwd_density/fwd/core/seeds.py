# fwd/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dx/dx = 1) on an input and let the tangent flow forward
# through every operation to the output.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Tuple
import numpy as np

from .dual import Dual


def value_of(x: Any) -> Any:
    """Return the value of a Dual (one level); pass through plain numbers unchanged."""
    return x.val if isinstance(x, Dual) else x


def value_of_rec(x: Any) -> Any:
    """Strip every dual level and return the innermost numeric value."""
    while isinstance(x, Dual):
        x = x.val
    return x


def derivative_of(x: Any) -> Any:
    """Return the tangent of a Dual; constants have a zero derivative."""
    return x.d if isinstance(x, Dual) else 0.0


def derivative(f: Callable[[Dual], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one forward pass with the seed Dual(x0, 1).
    """
    y = f(Dual(x0, 1.0))
    return np.float64(derivative_of(y))


def second_derivative(f: Callable[[Dual], Any], x0: float) -> float:
    """
    Second derivative of y=f(x) at x0 via a nested seed:
      x = Dual(Dual(x0, 1), Dual(1, 0))
    so that y.d.d = f''(x0).
    """
    y = f(Dual(Dual(x0, 1.0), Dual(1.0, 0.0)))
    return np.float64(derivative_of(derivative_of(y)))


def gradient(f: Callable[[Dict[str, Dual]], Any],
             inputs: Dict[str, float]) -> Tuple[float, Dict[str, float]]:
    """
    Gradient of a scalar-output function y=f(vars) w.r.t. ALL inputs (dict form).

    Forward mode needs one pass per input: pass i seeds e_i.

    Parameters
    ----------
    f       : function taking a dict {name: Dual} and returning a scalar
    inputs  : dict {name: numeric}

    Returns
    -------
    (value, {name: ∂y/∂name}) with gradients in the same key order as `inputs`
    """
    keys = list(inputs.keys())
    f0 = None
    grads: Dict[str, float] = {}
    for key in keys:
        seeded = {k: Dual(inputs[k], 1.0 if k == key else 0.0) for k in keys}
        y = f(seeded)
        f0 = value_of(y)
        grads[key] = np.float64(derivative_of(y))
    if f0 is None:
        f0 = value_of(f({}))
    return np.float64(f0), grads
