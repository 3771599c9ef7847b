"""Step-size convergence studies."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from eulerivp.analysis.error import ExactSolution
from eulerivp.core.config import IntegratorConfig
from eulerivp.core.errors import InvalidArgumentError
from eulerivp.core.method import ExplicitTableau
from eulerivp.core.problem import Derivative, InitialValueProblem
from eulerivp.stepping.forward import forward_solve

logger = logging.getLogger(__name__)

SAMPLE_TIME_RTOL = 1.0e-9


@dataclass
class ConvergenceStudy:
    """Absolute error at a fixed time for a sequence of step sizes."""

    steps: NDArray      # (m,) step sizes
    errors: NDArray     # (m,) |x_h(T) - x(T)|
    order: float        # slope of log(error) vs log(h)
    at: float           # comparison time T

    @property
    def ratios(self) -> NDArray:
        """errors[i] / errors[i+1]; about 2**p when h is halved for order p."""
        return self.errors[:-1] / self.errors[1:]


def convergence_study(
    f: Derivative,
    x0: ArrayLike,
    t_span: tuple[float, float],
    exact: ExactSolution,
    steps: Sequence[float],
    at: Optional[float] = None,
    method: Optional[ExplicitTableau] = None,
    config: Optional[IntegratorConfig] = None,
) -> ConvergenceStudy:
    """
    Solve the same problem with each step size and measure the error at one time.

    Args:
        f: Derivative f(x, t)
        x0: Initial state
        t_span: (t_initial, t_final)
        exact: Vectorized analytical solution x(t)
        steps: Step sizes, at least two
        at: Comparison time, on every run's grid (earliest final sample
            time among the runs if None)
        method: Explicit tableau (forward Euler if None)
        config: Integrator configuration

    Returns:
        ConvergenceStudy with the fitted observed order

    Raises:
        InvalidArgumentError: Fewer than two steps, `at` outside the span,
            or a run with no sample at `at`
    """
    if len(steps) < 2:
        raise InvalidArgumentError(
            f"A convergence study needs at least two step sizes, got {len(steps)}"
        )

    problem = InitialValueProblem(f=f, x0=x0, t_span=t_span)
    trajectories = [
        forward_solve(problem, method=method, h=h, config=config) for h in steps
    ]

    if at is None:
        at = min(traj.t[-1] for traj in trajectories)

    # Sample window: [t_initial, t_final) shifted to the configured time origin
    first = float(trajectories[0].t[0])
    last = first + (problem.t_final - problem.t_initial)
    if not first <= at < last:
        raise InvalidArgumentError(
            f"Comparison time {at} lies outside the sampled span [{first}, {last})"
        )

    tol = SAMPLE_TIME_RTOL * max(1.0, abs(at))
    errors = np.empty(len(trajectories))
    for i, traj in enumerate(trajectories):
        t_sample, x_sample = traj.nearest(at)
        if abs(t_sample - at) > tol:
            raise InvalidArgumentError(
                f"Step size {traj.h} has no sample at t={at} (nearest is {t_sample}); "
                "choose step sizes whose grids share the comparison time"
            )
        errors[i] = np.max(np.abs(x_sample - np.asarray(exact(t_sample))))
        logger.debug("h=%g: |error| at t=%g is %.3e", traj.h, t_sample, errors[i])

    step_array = np.array([traj.h for traj in trajectories])
    return ConvergenceStudy(
        steps=step_array,
        errors=errors,
        order=_observed_order(step_array, errors),
        at=float(at),
    )


def _observed_order(steps: NDArray, errors: NDArray) -> float:
    """Least-squares slope of log(error) against log(h)."""
    positive = errors > 0
    if np.count_nonzero(positive) < 2:
        return float("nan")
    fit = stats.linregress(np.log(steps[positive]), np.log(errors[positive]))
    return float(fit.slope)
