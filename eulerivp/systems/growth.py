"""Population growth models with known analytical solutions."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from eulerivp.core.errors import InvalidArgumentError


class ExponentialGrowth:
    """ẋ = k x; growth for k > 0, decay for k < 0."""

    def __init__(self, k: float):
        self.k = float(k)

    def __call__(self, x: ArrayLike, t: float) -> NDArray:
        return self.k * np.asarray(x)

    def exact(self, t: ArrayLike, x0: float, t0: float = 0.0) -> NDArray:
        """x(t) = x0 exp(k (t - t0))."""
        return x0 * np.exp(self.k * (np.asarray(t) - t0))

    def euler_closed_form(self, n: ArrayLike, x0: float, h: float) -> NDArray:
        """
        Forward Euler iterate after n steps.

        The recurrence x_{n+1} = (1 + h k) x_n gives x_n = x0 (1 + h k)^n.
        The iterates decay only when |1 + h k| < 1, so for k < 0 the
        scheme is stable for h < 2/|k| and oscillates or grows beyond it.
        """
        return x0 * (1.0 + h * self.k) ** np.asarray(n)

    def __repr__(self) -> str:
        return f"ExponentialGrowth(k={self.k})"


class LogisticGrowth:
    """
    ẋ = γ x (1 - x/K).

    x: number of individuals
    γ: growth rate
    K: population cap
    """

    def __init__(self, gamma: float, K: float):
        if K <= 0:
            raise InvalidArgumentError(f"Population cap K must be positive, got {K}")
        self.gamma = float(gamma)
        self.K = float(K)

    def __call__(self, x: ArrayLike, t: float) -> NDArray:
        x = np.asarray(x)
        return self.gamma * x * (1.0 - x / self.K)

    def exact(self, t: ArrayLike, x0: float, t0: float = 0.0) -> NDArray:
        """x(t) = K / (1 + (K/x0 - 1) exp(-γ (t - t0))), for x0 > 0."""
        if x0 <= 0:
            raise InvalidArgumentError(f"Closed form needs x0 > 0, got {x0}")
        decay = np.exp(-self.gamma * (np.asarray(t) - t0))
        return self.K / (1.0 + (self.K / x0 - 1.0) * decay)

    def __repr__(self) -> str:
        return f"LogisticGrowth(gamma={self.gamma}, K={self.K})"
