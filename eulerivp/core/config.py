"""Integrator configuration."""

from dataclasses import dataclass, replace
from enum import Enum, auto


class TimeOrigin(Enum):
    """Where the first time sample is placed."""
    INITIAL = auto()   # t_1 = t_initial
    ZERO = auto()      # t_1 = 0, regardless of t_initial


@dataclass(frozen=True)
class IntegratorConfig:
    """Defaults shared by the fixed-step entry points."""

    default_step: float = 1.0e-3
    time_origin: TimeOrigin = TimeOrigin.INITIAL
    step_count_atol: float = 1.0e-9  # absorbs (tf - ti)/h representation error
    warn_on_nonfinite: bool = True

    def replace(self, **changes) -> "IntegratorConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


DEFAULT_CONFIG = IntegratorConfig()
