"""
Tests for the Dual scalar: chain-rule propagation of every operator,
mixed Dual/number operands in both orders, value-only comparisons and
IEEE behaviour on division by zero.
"""

import math
import warnings

import numpy as np
import pytest

from fwd_density.fwd import Dual
from fwd_density.fwd import ops


def central_difference(f, x, h=1e-6):
    return (f(x + h) - f(x - h)) / (2.0 * h)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def test_components_stored_as_float64():
    x = Dual(2, 1)
    assert isinstance(x.val, np.float64)
    assert isinstance(x.d, np.float64)
    assert x.val == 2.0
    assert x.d == 1.0


def test_default_derivative_is_zero():
    assert Dual(3.5).d == 0.0


def test_rejects_non_numeric():
    with pytest.raises(TypeError):
        Dual("1.0")
    with pytest.raises(TypeError):
        Dual(True)


def test_nested_components_kept():
    inner = Dual(1.0, 2.0)
    x = Dual(inner, Dual(3.0))
    assert x.val is inner
    assert isinstance(x.d, Dual)


# =============================================================================
# ARITHMETIC
# =============================================================================


def test_add_sub():
    a, b = Dual(2.0, 1.0), Dual(5.0, -3.0)
    s = a + b
    assert (s.val, s.d) == (7.0, -2.0)
    t = a - b
    assert (t.val, t.d) == (-3.0, 4.0)


def test_mul_product_rule():
    a, b = Dual(2.0, 1.0), Dual(5.0, -3.0)
    p = a * b
    assert p.val == 10.0
    assert p.d == 1.0 * 5.0 + 2.0 * -3.0


def test_div_quotient_rule():
    a, b = Dual(3.0, 1.0), Dual(4.0, 2.0)
    q = a / b
    assert q.val == pytest.approx(0.75)
    assert q.d == pytest.approx((1.0 * 4.0 - 3.0 * 2.0) / 16.0)


def test_neg_and_pos():
    a = Dual(2.0, -1.5)
    n = -a
    assert (n.val, n.d) == (-2.0, 1.5)
    assert +a is a


@pytest.mark.parametrize("c", [3, 2.5, np.float64(-1.25)])
def test_mixed_operands_both_orders(c):
    x = Dual(2.0, 1.0)
    assert (x + c).d == 1.0 and (c + x).d == 1.0
    assert (x - c).d == 1.0 and (c - x).d == -1.0
    assert (x * c).d == pytest.approx(c) and (c * x).d == pytest.approx(c)
    assert (x / c).d == pytest.approx(1.0 / c)
    assert (c / x).d == pytest.approx(-c / 4.0)
    assert isinstance(c + x, Dual)
    assert isinstance(c * x, Dual)


def test_numpy_scalar_on_left_defers_to_dual():
    r = np.float64(2.0) * Dual(3.0, 1.0)
    assert isinstance(r, Dual)
    assert r.val == 6.0 and r.d == 2.0


def test_pow_constant_exponent():
    x = Dual(3.0, 1.0)
    p = x ** 2
    assert p.val == 9.0
    assert p.d == pytest.approx(6.0)


def test_pow_dual_exponent_and_base():
    x = Dual(2.0, 1.0)
    p = 3.0 ** x
    assert p.val == pytest.approx(9.0)
    assert p.d == pytest.approx(9.0 * math.log(3.0))

    y = Dual(2.0, 1.0) ** Dual(3.0, 1.0)
    # d(x^y) = x^y (y' log x + y x'/x)
    assert y.d == pytest.approx(8.0 * (math.log(2.0) + 3.0 / 2.0))


def test_augmented_assignment_returns_new_object():
    a = Dual(1.0, 1.0)
    b = a
    a += 2.0
    assert a is not b
    assert b.val == 1.0
    assert a.val == 3.0


def test_division_by_zero_follows_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        q = Dual(1.0, 1.0) / Dual(0.0, 0.0)
        assert np.isinf(q.val)
        z = Dual(0.0, 1.0) / 0.0
        assert np.isnan(z.val)


# =============================================================================
# COMPARISONS
# =============================================================================


def test_comparisons_use_value_only():
    a, b = Dual(1.0, 100.0), Dual(2.0, -100.0)
    assert a < b and a <= b
    assert b > a and b >= a
    assert Dual(1.0, 5.0) == Dual(1.0, -5.0)
    assert Dual(1.0, 5.0) != Dual(2.0, 5.0)
    assert Dual(1.0) == 1.0
    assert 0.5 < Dual(1.0)


def test_dual_is_unhashable():
    with pytest.raises(TypeError):
        hash(Dual(1.0))


# =============================================================================
# CHAIN RULE AGAINST FINITE DIFFERENCES
# =============================================================================


def chain(x):
    return ops.exp(ops.sin(x) * x) / (1.0 + x * x) + ops.log(x) * ops.sqrt(x) - ops.tanh(x) ** 3


@pytest.mark.parametrize("x0", [0.3, 1.0, 2.7])
def test_chain_matches_finite_differences(x0):
    y = chain(Dual(x0, 1.0))
    fd = central_difference(lambda t: chain(Dual(t)).val, x0)
    assert y.d == pytest.approx(fd, rel=1e-6)


def test_pow_zero_exponent_has_zero_tangent():
    p = Dual(0.0, 1.0) ** 0
    assert p.val == 1.0
    assert p.d == 0.0
    q = Dual(3.0, 2.0) ** 0.0
    assert (q.val, q.d) == (1.0, 0.0)
