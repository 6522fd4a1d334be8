# prob/__init__.py
# Probability kernels written once against plain floats; derivatives of
# differentiable arguments are collected by OperandsAndPartials.

from .prob_config import ProbConfig, get_config, use_config
from .traits import (
    is_vector,
    length,
    max_size,
    is_constant_struct,
    is_first_order,
    include_summand,
    return_type,
)
from .views import VectorView, DoubleVectorView
from .operands_and_partials import OperandsAndPartials
from .error_handling import (
    ValidationError,
    DomainViolation,
    ShapeMismatch,
    ErrorPolicy,
    RaisePolicy,
    SentinelPolicy,
    default_policy,
    check_not_nan,
    check_finite,
    check_positive,
    check_consistent_sizes,
)
from .distributions import gumbel_log, gumbel_cdf, gumbel_rng

__all__ = [
    # Configuration
    'ProbConfig',
    'get_config',
    'use_config',
    # Traits
    'is_vector',
    'length',
    'max_size',
    'is_constant_struct',
    'is_first_order',
    'include_summand',
    'return_type',
    # Views and accumulator
    'VectorView',
    'DoubleVectorView',
    'OperandsAndPartials',
    # Validation
    'ValidationError',
    'DomainViolation',
    'ShapeMismatch',
    'ErrorPolicy',
    'RaisePolicy',
    'SentinelPolicy',
    'default_policy',
    'check_not_nan',
    'check_finite',
    'check_positive',
    'check_consistent_sizes',
    # Distributions
    'gumbel_log',
    'gumbel_cdf',
    'gumbel_rng',
]
