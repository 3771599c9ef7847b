"""Core abstractions for fixed-step IVP integration."""

from eulerivp.core.config import IntegratorConfig, TimeOrigin, DEFAULT_CONFIG
from eulerivp.core.errors import InvalidArgumentError
from eulerivp.core.method import ExplicitTableau
from eulerivp.core.problem import Derivative, InitialValueProblem, StepGrid

__all__ = [
    "IntegratorConfig",
    "TimeOrigin",
    "DEFAULT_CONFIG",
    "InvalidArgumentError",
    "ExplicitTableau",
    "Derivative",
    "InitialValueProblem",
    "StepGrid",
]
