"""
Tests for the validation checks and the two error policies.
"""

import logging
import math

import numpy as np
import pytest

from fwd_density.fwd import Dual
from fwd_density.prob import (
    DomainViolation,
    RaisePolicy,
    SentinelPolicy,
    ShapeMismatch,
    ValidationError,
    check_consistent_sizes,
    check_finite,
    check_not_nan,
    check_positive,
    default_policy,
    use_config,
)


def test_passing_checks_return_true_and_record_nothing():
    policy = SentinelPolicy()
    assert check_not_nan("f", [1.0, Dual(2.0, 1.0)], "x", 0.0, policy)
    assert check_finite("f", np.array([1.0, -3.0]), "x", 0.0, policy)
    assert check_positive("f", Dual(0.1, -1.0), "x", 0.0, policy)
    assert check_consistent_sizes("f", (1.0, [1.0, 2.0], [3.0]), ("a", "b", "c"), 0.0, policy)
    assert not policy.failed
    assert policy.error is None


@pytest.mark.parametrize("check,value", [
    (check_not_nan, [1.0, math.nan]),
    (check_finite, math.inf),
    (check_finite, [Dual(1.0), Dual(-math.inf)]),
    (check_positive, 0.0),
    (check_positive, [1.0, -2.0]),
    (check_positive, math.nan),
])
def test_sentinel_policy_records_domain_violation(check, value):
    policy = SentinelPolicy()
    assert check("my_fn", value, "Scale parameter", -4.5, policy) is False
    err = policy.error
    assert isinstance(err, DomainViolation)
    assert err.function == "my_fn"
    assert err.name == "Scale parameter"
    assert err.partial == -4.5
    assert "my_fn" in str(err)


def test_inconsistent_sizes_are_shape_mismatch():
    policy = SentinelPolicy()
    ok = check_consistent_sizes("f", ([1.0, 2.0, 3.0], [1.0, 2.0]), ("y", "mu"), 1.0, policy)
    assert not ok
    assert isinstance(policy.error, ShapeMismatch)
    assert policy.error.name == "mu"
    assert policy.error.value == 2


def test_raise_policy_raises():
    with pytest.raises(DomainViolation) as info:
        check_positive("f", -1.0, "Scale parameter", 0.0, RaisePolicy())
    assert info.value.partial == 0.0
    assert isinstance(info.value, ValidationError)
    assert isinstance(info.value, ValueError)


def test_sentinel_policy_logs_failures(caplog):
    policy = SentinelPolicy(log_level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="fwd_density.prob.error_handling"):
        check_finite("f", math.inf, "Location parameter", 0.0, policy)
    assert "Location parameter" in caplog.text


def test_default_policy_follows_config():
    assert isinstance(default_policy(), SentinelPolicy)
    with use_config(error_policy="raise"):
        assert isinstance(default_policy(), RaisePolicy)
    assert isinstance(default_policy(), SentinelPolicy)
    assert default_policy() is not default_policy()
