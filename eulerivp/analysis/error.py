"""Global error against a known solution."""

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from eulerivp.core.errors import InvalidArgumentError
from eulerivp.stepping.trajectory import Trajectory


ExactSolution = Callable[[NDArray], NDArray]


def global_error(trajectory: Trajectory, exact: ExactSolution) -> NDArray:
    """
    Signed error x_n - x(t_n) at every sample.

    Args:
        trajectory: Numerical solution
        exact: Vectorized x(t), returning shape (N, *state_shape) for t of shape (N,)

    Returns:
        Error array shaped like trajectory.x
    """
    reference = np.asarray(exact(trajectory.t), dtype=float)
    if reference.shape != trajectory.x.shape:
        raise InvalidArgumentError(
            f"Exact solution has shape {reference.shape}, "
            f"trajectory has {trajectory.x.shape}"
        )
    return trajectory.x - reference


def max_abs_error(trajectory: Trajectory, exact: ExactSolution) -> float:
    """Largest absolute error over the whole trajectory."""
    return float(np.max(np.abs(global_error(trajectory, exact))))
