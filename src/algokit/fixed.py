"""
Fixed-size sliding window
=========================
Useful when the window length k is given and you want sum/average/max etc.
of every contiguous window.

The first window is computed directly; every later window is derived from
the previous one by removing the element leaving on the left and adding
the one entering on the right. Sum and mean are invertible so a running
total is enough. Max and min are not, so they keep a monotonic deque of
candidates instead.

Complexity: O(n) time for the built-in aggregates, O(n*k) for a custom
callable (each window is recomputed).
"""
import logging
from collections import deque
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple, Union

import pandas as pd

from algokit.errors import InvalidWindowSize
from algokit.window import as_sequence

logger = logging.getLogger("algokit.fixed")

Combine = Union[str, Callable[[List[Any]], Any]]


# ---------------------------------------------------------------------
# Incremental aggregates
# ---------------------------------------------------------------------
class RunningSum:
    def __init__(self):
        self.total = 0

    def push(self, index, value):
        self.total += value

    def evict(self, index, value):
        self.total -= value

    def value(self, size):
        return self.total


class RunningMean(RunningSum):
    def value(self, size):
        return self.total / size


class MonotonicDeque:
    """
    Deque of (index, value) candidates, values kept in decreasing order for
    max (increasing for min). The front is always the current answer.
    """

    def __init__(self, maximum=True):
        self.maximum = maximum
        self._dq = deque()

    def _dominated(self, old, new):
        return old < new if self.maximum else old > new

    def push(self, index, value):
        # smaller (or larger) values behind the new one can never win again
        while self._dq and self._dominated(self._dq[-1][1], value):
            self._dq.pop()
        self._dq.append((index, value))

    def evict(self, index, value):
        while self._dq and self._dq[0][0] <= index:
            self._dq.popleft()

    def value(self, size):
        return self._dq[0][1]


_AGGREGATES: Dict[str, Callable[[], Any]] = {
    "sum": RunningSum,
    "mean": RunningMean,
    "max": lambda: MonotonicDeque(maximum=True),
    "min": lambda: MonotonicDeque(maximum=False),
}


class WindowAggregates:
    """
    Lazy, finite, restartable sequence of per-window aggregates.

    Nothing is computed until iteration, and every iteration starts a fresh
    scan, so the object can be consumed any number of times.
    """

    def __init__(self, values: Sequence[Any], window_size: int, combine: Combine):
        self._values = values
        self.window_size = window_size
        self.combine = combine

    def __len__(self):
        return len(self._values) - self.window_size + 1

    def __iter__(self) -> Iterator[Any]:
        values = self._values
        k = self.window_size

        if callable(self.combine):
            for start in range(len(self)):
                yield self.combine(list(values[start:start + k]))
            return

        op = _AGGREGATES[self.combine]()
        for i in range(k):
            op.push(i, values[i])
        yield op.value(k)
        for right in range(k, len(values)):
            # slide: add values[right], drop values[right - k]
            op.push(right, values[right])
            op.evict(right - k, values[right - k])
            yield op.value(k)

    def __repr__(self):
        name = getattr(self.combine, "__name__", self.combine)
        return f"WindowAggregates(n={len(self._values)}, k={self.window_size}, combine={name!r})"


def aggregate(sequence: Sequence[Any], window_size: int, combine: Combine = "sum") -> WindowAggregates:
    """
    Aggregate every contiguous window of `window_size` elements.

    Args:
        sequence: list, tuple, str, 1-D ndarray or pandas Series.
        window_size: k, with 1 <= k <= len(sequence).
        combine: "sum", "mean", "max", "min" or a callable taking the list
            of values in one window.

    Returns:
        WindowAggregates with len(sequence) - k + 1 values.

    Raises:
        InvalidWindowSize: k <= 0 or k > len(sequence). An empty sequence
            has no valid k, so it always lands here.
    """
    values = as_sequence(sequence)
    if window_size <= 0 or window_size > len(values):
        raise InvalidWindowSize(window_size, len(values))
    if not callable(combine) and combine not in _AGGREGATES:
        raise ValueError(
            f"unknown aggregate {combine!r}; expected one of {', '.join(sorted(_AGGREGATES))} or a callable"
        )
    logger.debug("aggregate n=%d k=%d combine=%s", len(values), window_size, combine)
    return WindowAggregates(values, window_size, combine)


# ---------------------------------------------------------------------
# Common problems
# ---------------------------------------------------------------------
def max_fixed_window_sum(sequence: Sequence[int], k: int) -> int:
    """Return the maximum sum of any subarray of length k."""
    return max(aggregate(sequence, k, "sum"))


def sliding_window_max(sequence: Sequence[Any], k: int) -> List[Any]:
    """Max of each window of size k (monotonic deque)."""
    return list(aggregate(sequence, k, "max"))


def sliding_window_min(sequence: Sequence[Any], k: int) -> List[Any]:
    return list(aggregate(sequence, k, "min"))


def window_averages(sequence: Sequence[float], k: int) -> List[float]:
    return list(aggregate(sequence, k, "mean"))


def window_table(sequence: Sequence[Any], k: int,
                 aggregates: Tuple[Combine, ...] = ("sum", "max", "min")) -> pd.DataFrame:
    """
    One row per window: its [start, end) bounds plus one column per aggregate.

    Custom callables are named after their __name__; repeated names get a
    numeric suffix (`<lambda>`, `<lambda>_1`, ...).
    """
    first = aggregate(sequence, k, aggregates[0] if aggregates else "sum")
    n_windows = len(first)
    data = {
        "start": list(range(n_windows)),
        "end": list(range(k, k + n_windows)),
    }
    for combine in aggregates:
        base = combine if isinstance(combine, str) else getattr(combine, "__name__", "custom")
        column = base
        suffix = 0
        while column in data:
            suffix += 1
            column = f"{base}_{suffix}"
        data[column] = list(aggregate(sequence, k, combine))
    return pd.DataFrame(data)
