# fwd/ops/special.py
import numpy as np
from scipy.special import erf as scipy_erf
from ..core.dual import Dual
from .transcendental import exp

TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)
INV_SQRT_TWO = 1.0 / np.sqrt(2.0)


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    if not isinstance(x, Dual):
        return np.float64(scipy_erf(x))
    deriv = TWO_OVER_SQRT_PI * exp(-(x.val * x.val))
    return Dual(erf(x.val), deriv * x.d)


def norm_cdf(x):
    """Standard normal CDF, Φ(x) = 0.5 * (1 + erf(x / √2))."""
    return 0.5 * (1.0 + erf(x * INV_SQRT_TWO))
