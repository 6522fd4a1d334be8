# prob/distributions/gumbel.py
"""
Gumbel (type-I extreme value) distribution.

    pdf(y | mu, beta) = (1/beta) * exp(-z - exp(-z)),  z = (y - mu) / beta
    cdf(y | mu, beta) = exp(-exp(-z))

Every argument may be a float, a Dual, or a sequence of either; sequences
must share one length and scalars broadcast against them.
"""

from __future__ import annotations
from typing import Any, Optional, Union

import numpy as np

from ...fwd.core.dual import Dual
from ...fwd.core.seeds import value_of
from ...fwd.ops.transcendental import exp
from ..error_handling import (
    ErrorPolicy,
    check_consistent_sizes,
    check_finite,
    check_not_nan,
    check_positive,
    default_policy,
)
from ..operands_and_partials import OperandsAndPartials
from ..traits import include_summand, is_first_order, is_vector, length, max_size, return_type
from ..views import DoubleVectorView, VectorView


def gumbel_log(y: Any, mu: Any, beta: Any, propto: bool = False,
               policy: Optional[ErrorPolicy] = None) -> Union[float, Dual]:
    """
    Log of the product of Gumbel densities.

    Args:
        y: Random variable(s)
        mu: Location parameter(s), finite
        beta: Scale parameter(s), positive
        propto: Drop terms that are constant given the differentiable
            arguments (-log(beta) for a constant beta; everything when no
            argument is differentiable)
        policy: Error policy; defaults to the configured one

    Returns:
        float when no argument is differentiable, otherwise a Dual carrying
        the derivative of the log density along the arguments' tangents.
        An empty sequence argument gives 0.0. A failed check returns the
        partial result (0.0) under SentinelPolicy and raises under RaisePolicy.
        Both have the same type as a regular result, so Dual arguments get
        Dual(0.0, 0.0).

    Raises:
        TypeError: an argument holds nested Duals; partials are computed in
            float64, so this kernel is first-order only.
    """
    function = "gumbel_log"

    for arg, name in ((y, "Random variable"), (mu, "Location parameter"), (beta, "Scale parameter")):
        if not is_first_order(arg):
            raise TypeError(
                f"{function}: {name} holds nested Duals; only first-order Duals are supported"
            )

    ret_type = return_type(y, mu, beta)

    # check if any vectors are zero length
    if not (length(y) and length(mu) and length(beta)):
        return ret_type(0.0)

    if policy is None:
        policy = default_policy()

    logp = 0.0
    sentinel = ret_type(logp)

    if not check_not_nan(function, y, "Random variable", sentinel, policy):
        return sentinel
    if not check_finite(function, mu, "Location parameter", sentinel, policy):
        return sentinel
    if not check_positive(function, beta, "Scale parameter", sentinel, policy):
        return sentinel
    if not check_consistent_sizes(function, (y, mu, beta),
                                  ("Random variable", "Location parameter", "Scale parameter"),
                                  sentinel, policy):
        return sentinel

    # nothing differentiable and prop-to: every term is a constant
    if not include_summand(propto, y, mu, beta):
        return 0.0

    operands_and_partials = OperandsAndPartials(y, mu, beta)
    d_y, d_mu, d_beta = operands_and_partials.partials

    N = max_size(y, mu, beta)
    y_vec = VectorView(y, N)
    mu_vec = VectorView(mu, N)
    beta_vec = VectorView(beta, N)

    include_log_beta = include_summand(propto, beta)
    # length-1 sequences broadcast like scalars
    beta_size = length(beta) if is_vector(beta) else 1
    inv_beta = DoubleVectorView(True, beta_size)
    log_beta = DoubleVectorView(include_log_beta, beta_size)
    for i in range(beta_size):
        beta_dbl = value_of(beta_vec[i])
        inv_beta[i] = 1.0 / beta_dbl
        if include_log_beta:
            log_beta[i] = np.log(beta_dbl)

    for n in range(N):
        y_dbl = value_of(y_vec[n])
        mu_dbl = value_of(mu_vec[n])

        # reusable subexpressions
        y_minus_mu_over_beta = (y_dbl - mu_dbl) * inv_beta[n]
        exp_neg_z = np.exp(-y_minus_mu_over_beta)

        if include_log_beta:
            logp -= log_beta[n]
        logp += -y_minus_mu_over_beta - exp_neg_z

        scaled_diff = inv_beta[n] * exp_neg_z
        d_y[n] -= inv_beta[n] - scaled_diff
        d_mu[n] += inv_beta[n] - scaled_diff
        d_beta[n] += (-inv_beta[n] + y_minus_mu_over_beta * inv_beta[n]
                      - scaled_diff * y_minus_mu_over_beta)

    return operands_and_partials.finalize(logp)


def gumbel_cdf(y: Any, mu: Any, beta: Any,
               policy: Optional[ErrorPolicy] = None) -> Union[float, Dual]:
    """
    Product of Gumbel CDFs, exp(-exp(-(y - mu) / beta)) over all elements.

    The reduction runs on the dual arithmetic directly, so differentiable
    arguments yield a Dual. Empty arguments give 1.0; failed checks return
    the partial result (1.0) under SentinelPolicy. Both are Dual(1.0, 0.0)
    when any argument is differentiable.
    """
    function = "gumbel_cdf"

    cdf = return_type(y, mu, beta)(1.0)
    if not (length(y) and length(mu) and length(beta)):
        return cdf

    if policy is None:
        policy = default_policy()

    if not check_not_nan(function, y, "Random variable", cdf, policy):
        return cdf
    if not check_finite(function, mu, "Location parameter", cdf, policy):
        return cdf
    if not check_not_nan(function, beta, "Scale parameter", cdf, policy):
        return cdf
    if not check_positive(function, beta, "Scale parameter", cdf, policy):
        return cdf
    if not check_consistent_sizes(function, (y, mu, beta),
                                  ("Random variable", "Location parameter", "Scale parameter"),
                                  cdf, policy):
        return cdf

    N = max_size(y, mu, beta)
    y_vec = VectorView(y, N)
    mu_vec = VectorView(mu, N)
    beta_vec = VectorView(beta, N)

    for n in range(N):
        cdf = cdf * exp(-exp(-(y_vec[n] - mu_vec[n]) / beta_vec[n]))

    return cdf if isinstance(cdf, Dual) else float(cdf)


def gumbel_rng(mu: float, beta: float, rng: Any = None) -> float:
    """
    Draw one Gumbel variate by inversion: mu - beta * log(-log(u)), u ~ U(0, 1).

    Args:
        mu: Location
        beta: Scale
        rng: Uniform source with a random() method (numpy Generator,
            random.Random, ...). A fresh numpy Generator when omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    u = rng.random()
    return float(mu - beta * np.log(-np.log(u)))
