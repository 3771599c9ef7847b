"""Built-in right-hand sides with analytical solutions."""

from eulerivp.systems.growth import ExponentialGrowth, LogisticGrowth

__all__ = [
    "ExponentialGrowth",
    "LogisticGrowth",
]
