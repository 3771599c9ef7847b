"""Forward state propagation on a fixed grid."""

import logging
from typing import Callable, Optional
import numpy as np
from numpy.typing import ArrayLike, NDArray

from eulerivp.stepping.trajectory import Trajectory
from eulerivp.solvers.factory import create_stage_solver
from eulerivp.core.config import IntegratorConfig, DEFAULT_CONFIG
from eulerivp.core.method import ExplicitTableau
from eulerivp.core.problem import Derivative, InitialValueProblem, StepGrid
from eulerivp.methods.runge_kutta import forward_euler

logger = logging.getLogger(__name__)


def euler(
    f: Derivative,
    x0: ArrayLike,
    t_span: tuple[float, float],
    h: Optional[float] = None,
    config: Optional[IntegratorConfig] = None,
) -> tuple[NDArray, NDArray]:
    """
    Forward Euler solve of ẋ = f(x, t) on [t_initial, t_final).

    With N = floor((t_final - t_initial)/h):
        x_1 = x0,  t_1 = t_initial (or 0 under TimeOrigin.ZERO)
        x_{n+1} = x_n + h f(x_n, t_n),  t_{n+1} = t_n + h

    Args:
        f: Derivative f(x, t)
        x0: Initial state, scalar or array
        t_span: (t_initial, t_final)
        h: Step size (config.default_step if None)
        config: Integrator configuration

    Returns:
        x: States, shape (N,) or (N, *x0.shape)
        t: Sample times, shape (N,)

    Raises:
        InvalidArgumentError: Degenerate step size or span
    """
    config = config or DEFAULT_CONFIG
    problem = InitialValueProblem(f=f, x0=x0, t_span=t_span)
    grid = StepGrid.from_span(problem.t_span, _step(h, config), config)

    def advance(x: NDArray, t: float) -> NDArray:
        return x + grid.h * problem.derivative(x, t)

    x, t = _march(problem, grid, advance, config, "euler")
    return x, t


def forward_solve(
    problem: InitialValueProblem,
    method: Optional[ExplicitTableau] = None,
    h: Optional[float] = None,
    config: Optional[IntegratorConfig] = None,
) -> Trajectory:
    """
    Fixed-step explicit Runge-Kutta solve.

    For n = 1, ..., N-1:
        1. Evaluate stages k_i at t_n + c_i h
        2. Update x_{n+1} = x_n + h Σ b_i k_i

    Args:
        problem: Initial value problem
        method: Explicit tableau (forward Euler if None)
        h: Step size (config.default_step if None)
        config: Integrator configuration

    Returns:
        Trajectory with N samples
    """
    config = config or DEFAULT_CONFIG
    method = method or forward_euler()
    stage_solver = create_stage_solver(method)
    grid = StepGrid.from_span(problem.t_span, _step(h, config), config)

    def advance(x: NDArray, t: float) -> NDArray:
        return x + stage_solver.increment(problem.derivative, x, t, grid.h, method)

    x, t = _march(problem, grid, advance, config, method.name)
    return Trajectory(x=x, t=t, h=grid.h, method=method.name, nfev=stage_solver.nfev)


def _step(h: Optional[float], config: IntegratorConfig) -> float:
    return config.default_step if h is None else h


def _march(
    problem: InitialValueProblem,
    grid: StepGrid,
    advance: Callable[[NDArray, float], NDArray],
    config: IntegratorConfig,
    label: str,
) -> tuple[NDArray, NDArray]:
    """Apply `advance` N-1 times from x0, storing every sample."""
    logger.debug(
        "%s: %d samples on [%g, %g) with h=%g",
        label, grid.N, problem.t_initial, problem.t_final, grid.h,
    )

    t = grid.times()
    x = np.empty((grid.N,) + problem.state_shape)
    x[0] = problem.initial_state

    warned = not config.warn_on_nonfinite
    for n in range(grid.steps):
        x[n + 1] = advance(x[n], t[n])

        if not warned and not np.all(np.isfinite(x[n + 1])):
            logger.warning(
                "%s: non-finite state at t=%g after %d steps (h=%g)",
                label, t[n + 1], n + 1, grid.h,
            )
            warned = True

    return x, t
