"""Mean squared error between predictions and targets."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


class MSEMeter:
    """Running average, over added pairs, of the summed squared error."""

    def __init__(self) -> None:
        self._n = 0
        self._value = 0.0

    def reset(self) -> None:
        """Set all counters to zero."""
        self._n = 0
        self._value = 0.0

    def add(self, output: ArrayLike, target: ArrayLike) -> None:
        """Accumulate the squared error of two arrays of identical shape."""
        out = np.asarray(output, dtype=np.float64)
        tgt = np.asarray(target, dtype=np.float64)
        if out.shape != tgt.shape:
            raise ValueError("dimension mismatch in MSEMeter")
        diff = out - tgt
        self._n += 1
        self._value = (self._value * (self._n - 1) + float((diff * diff).sum())) / self._n

    def value(self) -> float:
        """Return the current mean squared error."""
        return self._value