# fwd/ops/__init__.py

# Convenience re-exports so users can do: from fwd_density.fwd.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, log, log1p, expm1, sqrt, sin, cos, tanh, fabs
from .special import erf, norm_cdf

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log", "log1p", "expm1", "sqrt", "sin", "cos", "tanh", "fabs",
    "erf", "norm_cdf",
]
