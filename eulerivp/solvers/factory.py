"""Solver factory and dispatch logic."""

from eulerivp.solvers.base import StageSolver
from eulerivp.solvers.explicit import ExplicitStageSolver
from eulerivp.core.errors import InvalidArgumentError
from eulerivp.core.method import ExplicitTableau


def create_stage_solver(method: ExplicitTableau) -> StageSolver:
    """
    Pick the stage solver for a tableau.

    Only explicit tableaux are supported; anything with a nonzero entry on
    or above the diagonal of A would need a nonlinear stage solve.

    Raises:
        InvalidArgumentError: A is not strictly lower triangular, or the
            tableau fails Σ b_i = 1 / c = A·1.
    """
    if not method.is_explicit:
        raise InvalidArgumentError(
            f"Method '{method.name}' is not explicit (A must be strictly lower triangular)"
        )
    if not method.is_consistent:
        raise InvalidArgumentError(
            f"Method '{method.name}' is not consistent "
            f"(weights sum to {float(sum(method.b)):g}, need 1 and c = A·1)"
        )
    return ExplicitStageSolver()
