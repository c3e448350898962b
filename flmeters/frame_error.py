"""Element-level mismatch rate between predictions and targets."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


class FrameErrorMeter:
    """Measures the percentage of mismatched elements, or the accuracy."""

    def __init__(self, accuracy: bool = False) -> None:
        self._accuracy = accuracy
        self._n = 0
        self._sum = 0

    def reset(self) -> None:
        """Set all counters to zero."""
        self._n = 0
        self._sum = 0

    def add(self, output: ArrayLike, target: ArrayLike) -> None:
        """Count mismatches between two 1-D arrays of identical shape."""
        out = np.asarray(output)
        tgt = np.asarray(target)
        if out.shape != tgt.shape:
            raise ValueError("dimension mismatch in FrameErrorMeter")
        if tgt.ndim != 1:
            raise ValueError("output/target must be 1-dimensional for FrameErrorMeter")
        self._sum += int(np.count_nonzero(out != tgt))
        self._n += tgt.shape[0]

    def value(self) -> float:
        """Return the error rate, or the accuracy, as a percentage."""
        error = self._sum * 100.0 / self._n if self._n > 0 else 0.0
        return 100.0 - error if self._accuracy else error