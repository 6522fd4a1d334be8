# prob/operands_and_partials.py
from __future__ import annotations
from typing import Any, List, Union

import numpy as np

from ..fwd.core.dual import Dual
from ..fwd.core.seeds import derivative_of
from .traits import is_constant_struct, length
from .views import DoubleVectorView, VectorView


class OperandsAndPartials:
    """
    Per-call accumulator of partial derivatives for up to three operands.

    A kernel computes its result as a plain float and, inside the same loop,
    adds ∂result/∂x_k[i] into d_x_k[i] for each differentiable operand x_k.
    finalize(value) then applies the chain rule once:

        result.d = Σ_k Σ_i d_x_k[i] * x_k[i].d

    Constant (or absent) operands get a disabled buffer: it has length 0 and
    writes to it are discarded, so kernels may write unconditionally.

    Attributes
    ----------
    d_x1, d_x2, d_x3 : DoubleVectorView
        Partial buffers, one slot per element of the corresponding operand.
    partials : list of the three buffers, indexable by slot (0, 1, 2).
    """

    def __init__(self, x1: Any = None, x2: Any = None, x3: Any = None):
        self._operands = (x1, x2, x3)
        self._constant = tuple(is_constant_struct(x) for x in self._operands)
        self.partials: List[DoubleVectorView] = [
            DoubleVectorView(not const, length(x) if x is not None else 0)
            for x, const in zip(self._operands, self._constant)
        ]
        self.d_x1, self.d_x2, self.d_x3 = self.partials
        self._finalized = False

    @property
    def all_constant(self) -> bool:
        return all(self._constant)

    def is_constant(self, slot: int) -> bool:
        return self._constant[slot]

    def finalize(self, value: float) -> Union[float, Dual]:
        """
        Combine the scalar result with the accumulated partials.

        Returns a float when every operand is constant, otherwise a Dual whose
        tangent is the chain-rule sum over all differentiable operands.
        The accumulator cannot be finalized twice.
        """
        if self._finalized:
            raise RuntimeError("OperandsAndPartials.finalize() called twice")
        self._finalized = True

        if self.all_constant:
            return float(value)

        d = np.float64(0.0)
        for x, const, partial in zip(self._operands, self._constant, self.partials):
            if const:
                continue
            x_vec = VectorView(x)
            for i in range(len(partial)):
                d = d + partial[i] * derivative_of(x_vec[i])
        return Dual(value, d)
