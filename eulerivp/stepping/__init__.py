"""Fixed-step state propagation."""

from eulerivp.stepping.trajectory import Trajectory
from eulerivp.stepping.forward import euler, forward_solve

__all__ = [
    "Trajectory",
    "euler",
    "forward_solve",
]
