"""Edit distance between predicted and target sequences."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class ErrorState:
    """Counts of deletion, insertion and substitution errors."""

    ndel: int = 0
    nins: int = 0
    nsub: int = 0

    def sum(self) -> int:
        """Total number of errors."""
        return self.ndel + self.nins + self.nsub


def _as_list(seq: Iterable[Any], name: str) -> list[Any]:
    ndim = getattr(seq, "ndim", None)
    if ndim is not None:
        if ndim != 1:
            raise ValueError(f"{name} must be 1-dimensional for EditDistanceMeter")
        return list(seq.tolist())
    return list(seq)


def levenshtein_distance(output: Sequence[Any], target: Sequence[Any]) -> ErrorState:
    """Compute the edit operations turning ``output`` into ``target``.

    Ties between operations are broken in the order deletion, insertion,
    substitution.
    """
    out = list(output)
    tgt = list(target)
    column = [ErrorState(nins=i) for i in range(len(out) + 1)]

    for x, t in enumerate(tgt, start=1):
        last_diagonal = column[0]
        column[0] = replace(column[0], ndel=x)
        for y, o in enumerate(out, start=1):
            old_diagonal = column[y]
            mismatch = 0 if o == t else 1
            costs = (
                column[y].sum() + 1,
                column[y - 1].sum() + 1,
                last_diagonal.sum() + mismatch,
            )
            choice = costs.index(min(costs))
            if choice == 0:
                column[y] = replace(column[y], ndel=column[y].ndel + 1)
            elif choice == 1:
                column[y] = replace(column[y - 1], nins=column[y - 1].nins + 1)
            elif mismatch:
                column[y] = replace(last_diagonal, nsub=last_diagonal.nsub + 1)
            else:
                column[y] = last_diagonal
            last_diagonal = old_diagonal

    return column[-1]


class EditDistanceMeter:
    """Accumulates edit distance between predictions and targets.

    Counters: total target length, deletions, insertions, substitutions.
    """

    def __init__(self) -> None:
        self._n = 0
        self._ndel = 0
        self._nins = 0
        self._nsub = 0

    def reset(self) -> None:
        """Set all counters to zero."""
        self._n = 0
        self._ndel = 0
        self._nins = 0
        self._nsub = 0

    def add(self, output: Iterable[Any], target: Iterable[Any]) -> None:
        """Compute the edit distance of two 1-D sequences and accumulate it."""
        tgt = _as_list(target, "target")
        out = _as_list(output, "output")
        self.add_error_state(levenshtein_distance(out, tgt), len(tgt))

    def add_counts(self, n: int, ndel: int, nins: int, nsub: int) -> None:
        """Add raw counts to the counters."""
        self._n += n
        self._ndel += ndel
        self._nins += nins
        self._nsub += nsub

    def add_error_state(self, state: ErrorState, n: int) -> None:
        """Add an ``ErrorState`` computed over a target of length ``n``."""
        self.add_counts(n, state.ndel, state.nins, state.nsub)

    def value(self) -> list[float]:
        """Return ``[error rate, length, deletion, insertion, substitution rate]``.

        Rates are percentages of the total target length.
        """
        n = self._n

        def rate(count: int) -> float:
            return count * 100.0 / n if n > 0 else 0.0

        return [
            rate(self._ndel + self._nins + self._nsub),
            float(n),
            rate(self._ndel),
            rate(self._nins),
            rate(self._nsub),
        ]