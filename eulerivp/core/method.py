"""Explicit Runge-Kutta method specification."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ExplicitTableau:
    """Butcher tableau of a fixed-step Runge-Kutta method."""

    A: NDArray  # (s, s) - stage coefficients
    b: NDArray  # (s,)   - output weights
    c: NDArray  # (s,)   - abscissae
    name: str = "custom"
    order: int = 1

    @cached_property
    def s(self) -> int:
        """Number of stages."""
        return self.A.shape[0]

    @cached_property
    def is_explicit(self) -> bool:
        """A strictly lower triangular: every stage uses earlier stages only."""
        return _is_strictly_lower(self.A)

    @cached_property
    def is_consistent(self) -> bool:
        """Σ b_i = 1 and c = A·1 (row-sum condition)."""
        return bool(
            np.isclose(np.sum(self.b), 1.0)
            and np.allclose(self.A @ np.ones(self.s), self.c)
        )


def _is_strictly_lower(A: NDArray) -> bool:
    A = np.asarray(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        return False
    return bool(np.allclose(A, np.tril(A, -1)))
