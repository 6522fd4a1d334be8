# fwd_density/__init__.py
# Forward-mode dual numbers and operands-and-partials probability kernels

from .fwd import Dual, dot_product, derivative, gradient
from .prob import (
    OperandsAndPartials,
    DomainViolation,
    ShapeMismatch,
    gumbel_log,
    gumbel_cdf,
    gumbel_rng,
)

__all__ = [
    'Dual',
    'dot_product',
    'derivative',
    'gradient',
    'OperandsAndPartials',
    'DomainViolation',
    'ShapeMismatch',
    'gumbel_log',
    'gumbel_cdf',
    'gumbel_rng',
]
