"""Standard explicit Runge-Kutta tableaux."""

import numpy as np
from eulerivp.core.method import ExplicitTableau


def forward_euler() -> ExplicitTableau:
    """Forward Euler method (1st order)."""
    A = np.array([[0.0]])
    b = np.array([1.0])
    c = np.array([0.0])
    return ExplicitTableau(A=A, b=b, c=c, name="euler", order=1)


def explicit_midpoint() -> ExplicitTableau:
    """Explicit midpoint method (2nd order)."""
    A = np.array([
        [0.0, 0.0],
        [0.5, 0.0],
    ])
    b = np.array([0.0, 1.0])
    c = np.array([0.0, 0.5])
    return ExplicitTableau(A=A, b=b, c=c, name="midpoint", order=2)


def heun() -> ExplicitTableau:
    """Heun's method (2nd order)."""
    A = np.array([
        [0.0, 0.0],
        [1.0, 0.0],
    ])
    b = np.array([0.5, 0.5])
    c = np.array([0.0, 1.0])
    return ExplicitTableau(A=A, b=b, c=c, name="heun", order=2)


def rk4() -> ExplicitTableau:
    """Classic 4th-order Runge-Kutta method."""
    A = np.array([
        [0.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
        [0.0, 0.5, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ])
    b = np.array([1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    c = np.array([0.0, 0.5, 0.5, 1.0])
    return ExplicitTableau(A=A, b=b, c=c, name="rk4", order=4)
