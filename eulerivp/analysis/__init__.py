"""Error and convergence analysis against analytical solutions."""

from eulerivp.analysis.error import global_error, max_abs_error
from eulerivp.analysis.convergence import ConvergenceStudy, convergence_study

__all__ = [
    "global_error",
    "max_abs_error",
    "ConvergenceStudy",
    "convergence_study",
]
