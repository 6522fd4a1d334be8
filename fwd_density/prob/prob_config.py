"""
Probability kernel configuration

Shared settings for the distribution kernels: which error policy a call uses
when none is passed explicitly, and the level at which validation failures
are logged.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional

ERROR_POLICIES = ("sentinel", "raise")


@dataclass(frozen=True)
class ProbConfig:
    """Settings shared by the distribution kernels."""

    # "sentinel": failed checks return the partial result computed so far
    # "raise":    failed checks raise the ValidationError
    error_policy: str = "sentinel"

    # Level used when the sentinel policy logs a failed check
    log_level: int = logging.DEBUG

    def __post_init__(self):
        if self.error_policy not in ERROR_POLICIES:
            raise ValueError(
                f"error_policy must be one of {ERROR_POLICIES}, got {self.error_policy!r}"
            )


# Global active configuration
active_config = ProbConfig()


def get_config() -> ProbConfig:
    """Return the active configuration."""
    return active_config


@contextmanager
def use_config(config: Optional[ProbConfig] = None, **overrides):
    """
    Context manager to temporarily switch the active configuration:
        with use_config(error_policy="raise"):
            gumbel_log(y, mu, beta)
    """
    global active_config
    prev = active_config
    try:
        active_config = replace(config or prev, **overrides)
        yield active_config
    finally:
        active_config = prev
