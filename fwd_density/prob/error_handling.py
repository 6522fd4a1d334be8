# prob/error_handling.py
"""
Validation helpers for the probability kernels.

Each check takes the calling function's name, the argument, its role label,
the partial result computed so far and an error policy. A passing check
returns True. A failing check builds a ValidationError carrying the partial
result and hands it to the policy: RaisePolicy raises it, SentinelPolicy
records and logs it and the check returns False so the caller can return
the partial result.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

import numpy as np

from ..fwd.core.seeds import value_of_rec
from . import prob_config
from .traits import is_vector, length

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """
    A failed argument check.

    Attributes
    ----------
    function : name of the function that ran the check
    name     : role label of the offending argument
    value    : the offending value (first bad element for sequences)
    partial  : the result computed before the check failed
    """

    def __init__(self, function: str, name: str, value: Any, message: str, partial: Any = None):
        super().__init__(f"{function}: {name} {message}, but got {value!r}")
        self.function = function
        self.name = name
        self.value = value
        self.partial = partial


class DomainViolation(ValidationError):
    """An argument lies outside its mathematical domain."""


class ShapeMismatch(ValidationError):
    """Argument shapes or lengths are inconsistent."""


class ErrorPolicy(ABC):
    """Strategy deciding what a failed check does."""

    @abstractmethod
    def handle(self, error: ValidationError) -> None:
        pass


class RaisePolicy(ErrorPolicy):
    """Raise every failed check."""

    def handle(self, error: ValidationError) -> None:
        raise error


class SentinelPolicy(ErrorPolicy):
    """
    Record failed checks instead of raising.

    The caller returns the partial result it had when the check failed;
    `errors` keeps every failure so callers can tell that sentinel apart from
    a genuine result.
    """

    def __init__(self, log_level: Optional[int] = None):
        self.errors: List[ValidationError] = []
        self.log_level = log_level

    @property
    def error(self) -> Optional[ValidationError]:
        """The most recent failure, or None."""
        return self.errors[-1] if self.errors else None

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def handle(self, error: ValidationError) -> None:
        level = self.log_level if self.log_level is not None else prob_config.get_config().log_level
        logger.log(level, "%s; returning partial result %r", error, error.partial)
        self.errors.append(error)


def default_policy() -> ErrorPolicy:
    """A fresh policy built from the active configuration."""
    config = prob_config.get_config()
    if config.error_policy == "raise":
        return RaisePolicy()
    return SentinelPolicy(log_level=config.log_level)


def _values(x) -> np.ndarray:
    if is_vector(x):
        return np.array([value_of_rec(v) for v in np.ravel(np.asarray(x, dtype=object))],
                        dtype=np.float64)
    return np.array([value_of_rec(x)], dtype=np.float64)


def _fail(policy: ErrorPolicy, error: ValidationError) -> bool:
    policy.handle(error)
    return False


def check_not_nan(function: str, x, name: str, result, policy: ErrorPolicy) -> bool:
    vals = _values(x)
    bad = np.isnan(vals)
    if bad.any():
        return _fail(policy, DomainViolation(
            function, name, vals[bad][0], "is nan", partial=result))
    return True


def check_finite(function: str, x, name: str, result, policy: ErrorPolicy) -> bool:
    vals = _values(x)
    bad = ~np.isfinite(vals)
    if bad.any():
        return _fail(policy, DomainViolation(
            function, name, vals[bad][0], "must be finite", partial=result))
    return True


def check_positive(function: str, x, name: str, result, policy: ErrorPolicy) -> bool:
    vals = _values(x)
    # NaN fails as well: it is not > 0
    bad = ~(vals > 0)
    if bad.any():
        return _fail(policy, DomainViolation(
            function, name, vals[bad][0], "must be positive", partial=result))
    return True


def check_consistent_sizes(function: str, args: Sequence, names: Sequence[str],
                           result, policy: ErrorPolicy) -> bool:
    """
    Every vector argument must have length 1 or the common maximum length;
    scalars always pass.
    """
    n = max(length(a) for a in args)
    for a, name in zip(args, names):
        if is_vector(a) and length(a) not in (1, n):
            return _fail(policy, ShapeMismatch(
                function, name, length(a),
                f"has size inconsistent with the common size {n}", partial=result))
    return True


def validate_vector(v: np.ndarray, function: str) -> None:
    """Raise ShapeMismatch unless v is one-dimensional, a single row or a single column."""
    if v.ndim == 1:
        return
    if v.ndim == 2 and (v.shape[0] == 1 or v.shape[1] == 1):
        return
    raise ShapeMismatch(function, "argument", v.shape,
                        "must be a vector (one row or one column)")


def validate_matching_sizes(v1: np.ndarray, v2: np.ndarray, function: str) -> None:
    """Raise ShapeMismatch unless v1 and v2 hold the same number of elements."""
    if v1.size != v2.size:
        raise ShapeMismatch(function, "second argument", v2.size,
                            f"must match the size of the first argument ({v1.size})")
