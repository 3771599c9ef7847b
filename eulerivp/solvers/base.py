"""Base stage solver interface."""

from abc import ABC, abstractmethod
from typing import Callable
from numpy.typing import NDArray

from eulerivp.core.method import ExplicitTableau


class StageSolver(ABC):
    """Evaluates the stages of one fixed step."""

    def __init__(self) -> None:
        self.nfev = 0

    def reset(self) -> None:
        """Zero the derivative evaluation counter."""
        self.nfev = 0

    @abstractmethod
    def increment(
        self,
        f: Callable[[NDArray, float], NDArray],
        x: NDArray,
        t: float,
        h: float,
        method: ExplicitTableau,
    ) -> NDArray:
        """
        Compute the state increment for one step.

        Args:
            f: Derivative f(x, t), returning an array shaped like x
            x: State at the start of the step
            t: Time at the start of the step
            h: Step size
            method: Butcher tableau

        Returns:
            Δx such that x_{n+1} = x_n + Δx
        """
        ...
