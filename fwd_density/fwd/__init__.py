# fwd/__init__.py
# Forward-mode (dual number) differentiation

from .core.dual import Dual
from .core.seeds import (
    value_of,
    value_of_rec,
    derivative_of,
    derivative,
    second_derivative,
    gradient,
)
from .matrix.dot_product import dot_product, to_dual

# Ops module
from . import ops

__all__ = [
    # Core
    'Dual',
    'value_of',
    'value_of_rec',
    'derivative_of',
    'derivative',
    'second_derivative',
    'gradient',
    # Matrix
    'dot_product',
    'to_dual',
    # Ops
    'ops',
]
