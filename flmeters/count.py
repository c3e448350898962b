"""Per-category running totals."""

from __future__ import annotations


class CountMeter:
    """Keeps a total value for each of ``num`` categories."""

    def __init__(self, num: int) -> None:
        self._counts = [0] * num

    def add(self, category: int, val: int) -> None:
        """Add ``val`` to ``category``, which must lie in ``[0, num)``."""
        if not 0 <= category < len(self._counts):
            raise IndexError("invalid id to update count for")
        self._counts[category] += val

    def value(self) -> list[int]:
        """Return the total of every category."""
        return list(self._counts)

    def reset(self) -> None:
        """Set every category back to zero."""
        self._counts = [0] * len(self._counts)