# prob/distributions/__init__.py

from .gumbel import gumbel_log, gumbel_cdf, gumbel_rng

__all__ = ["gumbel_log", "gumbel_cdf", "gumbel_rng"]
