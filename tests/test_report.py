"""Tests for plain-text trajectory tables."""

import numpy as np
import pytest

from eulerivp.core.errors import InvalidArgumentError
from eulerivp.core.problem import InitialValueProblem
from eulerivp.stepping.forward import forward_solve
from eulerivp.systems.growth import ExponentialGrowth
from eulerivp.utils.report import format_table


def _trajectory(x0=1.0):
    model = ExponentialGrowth(1.0)
    problem = InitialValueProblem(f=model, x0=x0, t_span=(0.0, 1.0))
    return model, forward_solve(problem, h=0.1)


def test_table_has_header_and_one_row_per_sample():
    _, trajectory = _trajectory()

    lines = format_table(trajectory).splitlines()

    assert lines[0].split() == ["t", "x"]
    assert len(lines) == 1 + trajectory.N
    assert [float(v) for v in lines[1].split()] == [0.0, 1.0]


def test_table_with_exact_solution_adds_error_columns():
    model, trajectory = _trajectory()

    lines = format_table(trajectory, exact=lambda t: model.exact(t, 1.0)).splitlines()
    t, x, exact, error = (float(v) for v in lines[-1].split())

    assert lines[0].split() == ["t", "x", "exact", "error"]
    assert np.isclose(t, 0.9)
    assert np.isclose(x, 1.1 ** 9, rtol=1e-5)
    assert np.isclose(exact, np.exp(0.9), rtol=1e-5)
    assert error < 0.0


def test_stride_keeps_last_sample():
    _, trajectory = _trajectory()

    lines = format_table(trajectory, every=4).splitlines()
    times = [float(line.split()[0]) for line in lines[1:]]

    assert np.allclose(times, [0.0, 0.4, 0.8, 0.9])


def test_stride_must_be_positive():
    _, trajectory = _trajectory()

    with pytest.raises(InvalidArgumentError):
        format_table(trajectory, every=0)


def test_vector_states_rejected():
    _, trajectory = _trajectory(x0=[1.0, 2.0])

    with pytest.raises(InvalidArgumentError, match="scalar"):
        format_table(trajectory)
