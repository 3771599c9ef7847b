"""Explicit stage solver."""

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from eulerivp.solvers.base import StageSolver
from eulerivp.core.method import ExplicitTableau


class ExplicitStageSolver(StageSolver):
    """Forward substitution for strictly lower triangular A."""

    def increment(
        self,
        f: Callable[[NDArray, float], NDArray],
        x: NDArray,
        t: float,
        h: float,
        method: ExplicitTableau,
    ) -> NDArray:
        """h Σ b_i k_i with k_i = f(x + h Σ_{j<i} a_ij k_j, t + c_i h)."""
        A, b, c = method.A, method.b, method.c
        k = np.zeros((method.s,) + np.shape(x))

        for i in range(method.s):
            # Z_i = x + h Σ_{j<i} A[i,j] k_j
            if i == 0:
                z = x
            else:
                z = x + h * np.tensordot(A[i, :i], k[:i], axes=1)

            k[i] = f(z, t + c[i] * h)
            self.nfev += 1

        return h * np.tensordot(b, k, axes=1)
