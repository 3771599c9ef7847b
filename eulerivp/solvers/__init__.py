"""Stage solvers for explicit Runge-Kutta tableaux."""

from eulerivp.solvers.base import StageSolver
from eulerivp.solvers.explicit import ExplicitStageSolver
from eulerivp.solvers.factory import create_stage_solver

__all__ = [
    "StageSolver",
    "ExplicitStageSolver",
    "create_stage_solver",
]
