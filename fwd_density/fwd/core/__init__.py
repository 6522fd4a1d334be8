# fwd/core/__init__.py

"""
Core public API for forward-mode differentiation.

Exports:
    Dual          : The differentiable scalar (value, derivative).
    value_of      : Extract the value of a Dual (one level).
    value_of_rec  : Extract the innermost numeric value of nested Duals.
    derivative_of : Extract the tangent of a Dual (0 for constants).
    derivative    : f'(x0) by seeding a single Dual.
    second_derivative : f''(x0) by seeding a nested Dual.
    gradient      : value and gradient of a dict-input function.
"""

from .dual import Dual
from .seeds import (
    value_of,
    value_of_rec,
    derivative_of,
    derivative,
    second_derivative,
    gradient,
)

__all__ = [
    "Dual",
    "value_of", "value_of_rec", "derivative_of",
    "derivative", "second_derivative", "gradient",
]
