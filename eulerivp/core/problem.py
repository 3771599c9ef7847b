"""Initial value problem specification."""

from dataclasses import dataclass
from functools import cached_property
from typing import Protocol, Union
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from eulerivp.core.config import IntegratorConfig, TimeOrigin, DEFAULT_CONFIG
from eulerivp.core.errors import InvalidArgumentError


State = Union[float, NDArray]


class Derivative(Protocol):
    """Right-hand side of ẋ = f(x, t); returns an array shaped like x."""

    def __call__(self, x: State, t: float) -> State:
        ...


@dataclass(frozen=True)
class InitialValueProblem:
    """ẋ = f(x, t) on [t_initial, t_final) with x(t_initial) = x0."""

    f: Derivative
    x0: ArrayLike
    t_span: tuple[float, float]

    def __post_init__(self) -> None:
        if not callable(self.f):
            raise InvalidArgumentError(
                f"Derivative must be callable, got {type(self.f).__name__}"
            )
        _check_span(self.t_span)
        self.initial_state

    @cached_property
    def initial_state(self) -> NDArray:
        """x0 as a float array (0-d for scalar problems)."""
        try:
            return np.asarray(self.x0, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Initial state must be numeric, got {self.x0!r}"
            ) from exc

    @property
    def state_shape(self) -> tuple[int, ...]:
        return self.initial_state.shape

    @property
    def t_initial(self) -> float:
        return float(self.t_span[0])

    @property
    def t_final(self) -> float:
        return float(self.t_span[1])

    def derivative(self, x: NDArray, t: float) -> NDArray:
        """Evaluate f and check that it preserves the state shape."""
        dx = np.asarray(self.f(x, t), dtype=float)
        if dx.shape != x.shape:
            raise InvalidArgumentError(
                f"Derivative returned shape {dx.shape}, expected {x.shape}"
            )
        return dx


@dataclass(frozen=True)
class StepGrid:
    """Evenly spaced sample times t_1 + k h, k = 0, ..., N-1."""

    h: float
    N: int
    start: float

    @classmethod
    def from_span(
        cls,
        t_span: tuple[float, float],
        h: float,
        config: IntegratorConfig = DEFAULT_CONFIG,
    ) -> "StepGrid":
        """
        Discretize [t_initial, t_final) with step h.

        N = floor((t_final - t_initial)/h). The first sample sits at
        t_initial, or at 0 under TimeOrigin.ZERO.

        Raises:
            InvalidArgumentError: h <= 0, t_final <= t_initial, non-finite
                bounds, a span shorter than one step, or h below float
                resolution at the span's magnitude.
        """
        t_initial, t_final = _check_span(t_span)
        h = _check_step(h)

        N = math.floor((t_final - t_initial) / h + config.step_count_atol)
        if N < 1:
            raise InvalidArgumentError(
                f"Step size {h} is longer than the span [{t_initial}, {t_final})"
            )

        start = t_initial if config.time_origin is TimeOrigin.INITIAL else 0.0

        # Consecutive samples must stay distinct at the largest time magnitude
        magnitude = max(
            abs(t_initial), abs(t_final), abs(start), abs(start + h * (N - 1))
        )
        if h < np.spacing(magnitude):
            raise InvalidArgumentError(
                f"Step size {h} is below float resolution at t={magnitude:g}"
            )
        return cls(h=h, N=N, start=start)

    @property
    def steps(self) -> int:
        """Number of recurrence applications (N - 1)."""
        return self.N - 1

    def times(self) -> NDArray:
        return self.start + self.h * np.arange(self.N, dtype=float)


def _check_span(t_span: tuple[float, float]) -> tuple[float, float]:
    try:
        t_initial, t_final = (float(t) for t in t_span)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Time span must be a pair of numbers, got {t_span!r}"
        ) from exc

    if not (math.isfinite(t_initial) and math.isfinite(t_final)):
        raise InvalidArgumentError(f"Time span must be finite, got {t_span!r}")
    if t_final <= t_initial:
        raise InvalidArgumentError(
            f"Empty time span: t_final={t_final} <= t_initial={t_initial}"
        )
    return t_initial, t_final


def _check_step(h: float) -> float:
    try:
        h = float(h)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Step size must be a number, got {h!r}") from exc

    if not math.isfinite(h) or h <= 0.0:
        raise InvalidArgumentError(f"Step size must be positive and finite, got {h}")
    return h
