"""Plain-text rendering of scalar trajectories."""

from typing import Optional
import numpy as np

from eulerivp.analysis.error import ExactSolution, global_error
from eulerivp.core.errors import InvalidArgumentError
from eulerivp.stepping.trajectory import Trajectory


def format_table(
    trajectory: Trajectory,
    exact: Optional[ExactSolution] = None,
    every: int = 1,
    precision: int = 6,
) -> str:
    """
    Tabulate t, x and, given an exact solution, x(t) and the error.

    Args:
        trajectory: Scalar-state trajectory
        exact: Vectorized analytical solution x(t)
        every: Keep one row in `every`; the last sample is always kept
        precision: Significant digits

    Returns:
        Table with a header row, one line per kept sample
    """
    if trajectory.state_shape != ():
        raise InvalidArgumentError(
            f"Tables need scalar states, got shape {trajectory.state_shape}"
        )
    if every < 1:
        raise InvalidArgumentError(f"Row stride must be at least 1, got {every}")

    rows = list(range(0, trajectory.N, every))
    if rows[-1] != trajectory.N - 1:
        rows.append(trajectory.N - 1)

    columns = {"t": trajectory.t, "x": trajectory.x}
    if exact is not None:
        err = global_error(trajectory, exact)
        columns["exact"] = np.asarray(exact(trajectory.t), dtype=float)
        columns["error"] = err

    width = precision + 8
    header = "".join(name.rjust(width) for name in columns)
    lines = [header]
    for i in rows:
        lines.append("".join(
            f"{values[i]:>{width}.{precision}g}" for values in columns.values()
        ))
    return "\n".join(lines)
