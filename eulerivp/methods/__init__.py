"""Library of explicit Runge-Kutta tableaux."""

from eulerivp.methods.runge_kutta import forward_euler, explicit_midpoint, heun, rk4

__all__ = [
    "forward_euler",
    "explicit_midpoint",
    "heun",
    "rk4",
]
