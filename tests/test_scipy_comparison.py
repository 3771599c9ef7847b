"""Comparison tests against scipy.integrate solvers."""

import numpy as np
import pytest
from scipy.integrate import solve_ivp

from eulerivp.core.problem import InitialValueProblem
from eulerivp.methods.runge_kutta import rk4
from eulerivp.stepping.forward import euler, forward_solve
from eulerivp.systems.growth import LogisticGrowth


class LinearODE:
    """ẋ = A x"""

    def __init__(self, A):
        self.A = A

    def __call__(self, x, t):
        return self.A @ x


def _reference(f, x0, t):
    """High-accuracy solve_ivp solution at the sample times."""
    sol = solve_ivp(
        lambda t, y: f(y, t),
        (t[0], t[-1]),
        np.atleast_1d(x0),
        t_eval=t,
        method="DOP853",
        rtol=1e-11,
        atol=1e-12,
    )
    assert sol.success
    return sol.y.T


def test_logistic_euler_against_scipy():
    model = LogisticGrowth(gamma=0.95, K=100.0)

    errors = []
    for h in (0.02, 0.01):
        x, t = euler(model, 1.0, (0.0, 11.0), h)
        reference = _reference(model, 1.0, t)[:, 0]
        errors.append(np.max(np.abs(x - reference)))

    assert errors[0] < 2.0
    assert 1.7 < errors[0] / errors[1] < 2.3


def test_logistic_rk4_against_scipy():
    model = LogisticGrowth(gamma=0.95, K=100.0)
    problem = InitialValueProblem(f=model, x0=1.0, t_span=(0.0, 11.0))

    trajectory = forward_solve(problem, rk4(), h=0.01)
    reference = _reference(model, 1.0, trajectory.t)[:, 0]

    assert np.max(np.abs(trajectory.x - reference)) < 1e-6


@pytest.mark.parametrize(
    "A",
    [
        np.array([[-1.0, 0.0], [0.0, -2.0]]),
        np.array([[0.0, 1.0], [-1.0, 0.0]]),
        np.array([[-0.5, 1.0], [-1.0, -0.5]]),
    ],
)
def test_linear_systems_against_scipy(A):
    f = LinearODE(A)
    x0 = np.array([1.0, 0.5])

    x, t = euler(f, x0, (0.0, 2.0), 1e-3)
    reference = _reference(f, x0, t)

    assert x.shape == reference.shape
    assert np.max(np.abs(x - reference)) < 5e-3
