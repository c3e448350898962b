"""Running mean and variance of a stream of values."""

from __future__ import annotations

from typing import Iterable

import numpy as np


class AverageValueMeter:
    """Measures the mean and unbiased variance of a sequence of values.

    The meter keeps three counters: the number of values, their sum and
    the sum of their squares.
    """

    def __init__(self) -> None:
        self._n = 0
        self._sum = 0.0
        self._squared_sum = 0.0

    def reset(self) -> None:
        """Set all counters to zero."""
        self._n = 0
        self._sum = 0.0
        self._squared_sum = 0.0

    def add(self, val: float, n: int = 1) -> None:
        """Add the value ``val`` repeated ``n`` times."""
        self._sum += n * val
        self._squared_sum += n * val * val
        self._n += n

    def add_values(self, vals: Iterable[float] | np.ndarray) -> None:
        """Add every element of ``vals``."""
        arr = np.asarray(vals, dtype=np.float64)
        self._sum += float(arr.sum())
        self._squared_sum += float((arr * arr).sum())
        self._n += int(arr.size)

    def value(self) -> list[float]:
        """Return ``[mean, variance, count]``."""
        n = self._n
        mean = self._sum / n if n > 0 else 0.0
        var = (self._squared_sum - n * mean * mean) / (n - 1) if n > 1 else 0.0
        return [mean, var, float(n)]