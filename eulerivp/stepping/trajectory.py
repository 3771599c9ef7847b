"""Trajectory storage."""

from dataclasses import dataclass
from typing import Iterator
import numpy as np
from numpy.typing import NDArray


@dataclass
class Trajectory:
    """Paired state and time samples from a fixed-step solve."""

    x: NDArray          # (N, *state_shape) states
    t: NDArray          # (N,) sample times, spacing h
    h: float
    method: str = "euler"
    nfev: int = 0       # derivative evaluations

    @property
    def N(self) -> int:
        """Number of samples."""
        return self.t.shape[0]

    @property
    def state_shape(self) -> tuple[int, ...]:
        return self.x.shape[1:]

    @property
    def final(self) -> tuple[float, NDArray]:
        """Last (t, x) sample."""
        return float(self.t[-1]), self.x[-1]

    def as_tuple(self) -> tuple[NDArray, NDArray]:
        """(states, times), in that order."""
        return self.x, self.t

    def nearest(self, time: float) -> tuple[float, NDArray]:
        """Sample whose time is closest to `time`."""
        i = int(np.argmin(np.abs(self.t - time)))
        return float(self.t[i]), self.x[i]

    def __len__(self) -> int:
        return self.N

    def __iter__(self) -> Iterator[tuple[float, NDArray]]:
        for t, x in zip(self.t, self.x):
            yield float(t), x
