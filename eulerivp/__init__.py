"""
eulerivp: fixed-step integration of first-order initial value problems.

This library solves ẋ = f(x, t), x(t_initial) = x0 on an evenly spaced grid
with support for:
- The forward Euler method, returning (states, times)
- Other explicit Runge-Kutta tableaux (midpoint, Heun, RK4)
- Exponential and logistic growth models with analytical solutions
- Global error and observed-order convergence studies
"""

import logging

__version__ = "0.1.0"

from eulerivp.core.config import IntegratorConfig, TimeOrigin
from eulerivp.core.errors import InvalidArgumentError
from eulerivp.core.problem import InitialValueProblem
from eulerivp.stepping.forward import euler, forward_solve
from eulerivp.stepping.trajectory import Trajectory

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "IntegratorConfig",
    "TimeOrigin",
    "InvalidArgumentError",
    "InitialValueProblem",
    "euler",
    "forward_solve",
    "Trajectory",
]
