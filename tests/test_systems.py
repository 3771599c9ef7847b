"""Tests for built-in growth models."""

import numpy as np
import pytest

from eulerivp.core.errors import InvalidArgumentError
from eulerivp.systems.growth import ExponentialGrowth, LogisticGrowth


def test_exponential_derivative_and_solution():
    model = ExponentialGrowth(10.0)

    assert model(2.0, 0.0) == 20.0
    assert np.allclose(model(np.array([1.0, -1.0]), 0.0), [10.0, -10.0])
    assert np.isclose(model.exact(0.1, 1.0, t0=0.1), 1.0)
    assert np.isclose(model.exact(1.0, 1.0, t0=0.1), np.exp(9.0))


def test_exponential_closed_form_euler_iterates():
    model = ExponentialGrowth(-10.0)

    assert np.allclose(model.euler_closed_form([0, 1, 2], 1.0, 0.01), [1.0, 0.9, 0.81])


def test_logistic_derivative_vanishes_at_equilibria():
    model = LogisticGrowth(gamma=0.95, K=100.0)

    assert model(0.0, 0.0) == 0.0
    assert model(100.0, 0.0) == 0.0
    assert model(50.0, 0.0) > 0.0
    assert model(150.0, 0.0) < 0.0


def test_logistic_exact_solution():
    model = LogisticGrowth(gamma=0.95, K=100.0)
    t = np.linspace(0.0, 50.0, 11)

    x = model.exact(t, 1.0)

    assert np.isclose(x[0], 1.0)
    assert np.all(np.diff(x) > 0)
    assert np.isclose(x[-1], 100.0)


def test_logistic_exact_solves_the_ode():
    model = LogisticGrowth(gamma=0.95, K=100.0)
    t, dt = 3.0, 1e-6

    slope = (model.exact(t + dt, 1.0) - model.exact(t - dt, 1.0)) / (2 * dt)

    assert np.isclose(slope, model(model.exact(t, 1.0), t), rtol=1e-6)


@pytest.mark.parametrize("K", [0.0, -5.0])
def test_logistic_rejects_non_positive_cap(K):
    with pytest.raises(InvalidArgumentError):
        LogisticGrowth(gamma=1.0, K=K)


def test_logistic_exact_needs_positive_initial_state():
    with pytest.raises(InvalidArgumentError):
        LogisticGrowth(gamma=1.0, K=10.0).exact(1.0, 0.0)


def test_repr():
    assert repr(ExponentialGrowth(2)) == "ExponentialGrowth(k=2.0)"
    assert repr(LogisticGrowth(0.5, 10)) == "LogisticGrowth(gamma=0.5, K=10.0)"
