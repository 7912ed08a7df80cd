"""
Variable-size sliding window (two pointers)
===========================================
Use when the window size changes and you need to expand/contract.

Common pattern: move `right` to expand; then move `left` to shrink, either
while the window is invalid (longest window under a constraint) or while it
is still valid (shortest window meeting a constraint).

The window's tracked state (frequency map, distinct count, running sum ...)
lives in a small WindowState record owned by a single scan. Each position is
added once by `right` and removed at most once by `left`, so a scan is O(n)
amortized no matter how many contraction steps happen.
"""
import logging
from abc import ABC, abstractmethod
from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import accumulate
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from algokit.errors import EmptyInput
from algokit.window import Window, as_sequence

logger = logging.getLogger("algokit.scanner")


class ScanMode(Enum):
    LONGEST = "longest"    # contract only while invalid
    SHORTEST = "shortest"  # contract while still valid
    ALL = "all"            # like LONGEST, every stabilized valid window is kept


# ---------------------------------------------------------------------
# Window states
# ---------------------------------------------------------------------
class WindowState(ABC):
    """Incrementally maintained summary of the elements inside the window."""

    @abstractmethod
    def add(self, item: Any) -> None:
        ...

    @abstractmethod
    def remove(self, item: Any) -> None:
        ...

    @abstractmethod
    def is_valid(self) -> bool:
        ...


@dataclass
class NoRepeatState(WindowState):
    """Valid while no element occurs twice."""
    counts: Dict[Any, int] = field(default_factory=lambda: defaultdict(int))
    duplicates: int = 0

    def add(self, item):
        self.counts[item] += 1
        if self.counts[item] == 2:
            self.duplicates += 1

    def remove(self, item):
        if self.counts[item] == 2:
            self.duplicates -= 1
        self.counts[item] -= 1
        if self.counts[item] == 0:
            del self.counts[item]

    def is_valid(self):
        return self.duplicates == 0


@dataclass
class AtMostKDistinctState(WindowState):
    k: int
    freq: Dict[Any, int] = field(default_factory=lambda: defaultdict(int))
    distinct: int = 0

    def add(self, item):
        if self.freq[item] == 0:
            self.distinct += 1
        self.freq[item] += 1

    def remove(self, item):
        self.freq[item] -= 1
        if self.freq[item] == 0:
            self.distinct -= 1
            del self.freq[item]

    def is_valid(self):
        return self.distinct <= self.k


@dataclass
class SumAtLeastState(WindowState):
    """Running sum; only meaningful for non-negative values."""
    target: float
    total: float = 0

    def add(self, item):
        self.total += item

    def remove(self, item):
        self.total -= item

    def is_valid(self):
        return self.total >= self.target


@dataclass
class CoverState(WindowState):
    """Valid once the window holds every element of `pattern` (with multiplicity)."""
    pattern: Sequence[Any]
    need: Dict[Any, int] = field(init=False)
    have: Dict[Any, int] = field(default_factory=lambda: defaultdict(int))
    missing: int = field(init=False)

    def __post_init__(self):
        self.need = Counter(self.pattern)
        self.missing = len(self.pattern)

    def add(self, item):
        if item in self.need:
            self.have[item] += 1
            if self.have[item] <= self.need[item]:
                self.missing -= 1

    def remove(self, item):
        if item in self.need:
            if self.have[item] <= self.need[item]:
                self.missing += 1
            self.have[item] -= 1

    def is_valid(self):
        return self.missing == 0


@dataclass
class WithinCountsState(WindowState):
    """
    Valid while no element occurs more often than it does in `pattern`.
    Elements absent from `pattern` are never allowed.
    """
    pattern: Sequence[Any]
    budget: Dict[Any, int] = field(init=False)
    have: Dict[Any, int] = field(default_factory=lambda: defaultdict(int))
    excess: int = 0

    def __post_init__(self):
        self.budget = Counter(self.pattern)

    def add(self, item):
        self.have[item] += 1
        if self.have[item] > self.budget[item]:
            self.excess += 1

    def remove(self, item):
        if self.have[item] > self.budget[item]:
            self.excess -= 1
        self.have[item] -= 1

    def is_valid(self):
        return self.excess == 0


@dataclass
class PredicateState(WindowState):
    """
    Generic state: keeps the window's values and asks `predicate` about them.

    The predicate must be monotone (if a window is valid, so is every
    sub-window) for the two-pointer scan to find the optimum. Each check
    copies the window, so this is O(n*k).
    """
    predicate: Callable[[List[Any]], bool]
    items: deque = field(default_factory=deque)

    def add(self, item):
        self.items.append(item)

    def remove(self, item):
        self.items.popleft()

    def is_valid(self):
        return bool(self.predicate(list(self.items)))


# ---------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------
@dataclass
class ScanStats:
    added: int = 0
    removed: int = 0
    reported: int = 0


class VariableWindowScanner:
    """
    Two-pointer scan over one sequence.

    Args:
        state_factory: builds a fresh WindowState for every scan.
        mode: ScanMode.LONGEST, SHORTEST or ALL.

    `windows()` yields reported windows in encounter order; `best()` keeps the
    first longest (or shortest) one.

    `stats` is the ScanStats of the most recent call to `windows()` or
    `best()`; it is replaced as soon as the call is made, before any window
    is produced. When one scanner drives several scans at once (interleaved
    iterators, threads), pass a ScanStats of your own per scan.
    """

    def __init__(self, state_factory: Callable[[], WindowState], mode: ScanMode = ScanMode.LONGEST):
        self.state_factory = state_factory
        self.mode = mode
        self.stats = ScanStats()

    def windows(self, sequence: Sequence[Any], stats: Optional[ScanStats] = None) -> Iterator[Window]:
        values = as_sequence(sequence)
        if stats is None:
            stats = ScanStats()
        self.stats = stats
        return self._scan(values, self.state_factory(), stats)

    def _scan(self, values, state, stats):
        left = 0

        for right in range(len(values)):
            state.add(values[right])
            stats.added += 1

            if self.mode is ScanMode.SHORTEST:
                # record before shrinking, the window stops being valid after
                while left <= right and state.is_valid():
                    stats.reported += 1
                    yield Window(left, right + 1)
                    state.remove(values[left])
                    stats.removed += 1
                    left += 1
            else:
                while left <= right and not state.is_valid():
                    state.remove(values[left])
                    stats.removed += 1
                    left += 1
                if left <= right and state.is_valid():
                    stats.reported += 1
                    yield Window(left, right + 1)

        logger.debug(
            "%s scan over %d items: added=%d removed=%d reported=%d",
            self.mode.value, len(values), stats.added, stats.removed, stats.reported,
        )

    def best(self, sequence: Sequence[Any], stats: Optional[ScanStats] = None) -> Optional[Window]:
        shortest = self.mode is ScanMode.SHORTEST
        best = None
        for window in self.windows(sequence, stats):
            if best is None:
                best = window
            elif shortest and window.length < best.length:
                best = window
            elif not shortest and window.length > best.length:
                best = window
        return best


# ---------------------------------------------------------------------
# Common problems
# ---------------------------------------------------------------------
def longest_window_satisfying(sequence: Sequence[Any], predicate: Callable[[List[Any]], bool]) -> Tuple[int, int]:
    """
    Bounds (start, end) of the first longest window whose values satisfy
    `predicate`. Returns (0, 0) when no non-empty window qualifies.
    """
    scanner = VariableWindowScanner(lambda: PredicateState(predicate))
    window = scanner.best(sequence)
    return window.as_tuple() if window else (0, 0)


def longest_unique_window(s: Sequence[Any]) -> Window:
    """First longest window without repeated elements; Window(0, 0) for empty input."""
    window = VariableWindowScanner(NoRepeatState).best(s)
    return window or Window(0, 0)


def longest_substring_without_repeat(s: Sequence[Any]) -> int:
    """
    Returns length of longest substring without repeating characters.

    >>> longest_substring_without_repeat("abcabcbb")
    3
    """
    return longest_unique_window(s).length


def longest_at_most_k_distinct(sequence: Sequence[Any], k: int) -> int:
    """Length of the longest subarray with at most k distinct elements."""
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    window = VariableWindowScanner(lambda: AtMostKDistinctState(k)).best(sequence)
    return window.length if window else 0


def min_subarray_len_at_least(sequence: Sequence[float], target: float) -> int:
    """
    Smallest subarray length with sum >= target, 0 if there is none.
    Works when the values are non-negative (sum grows as the window expands).
    """
    window = VariableWindowScanner(lambda: SumAtLeastState(target), ScanMode.SHORTEST).best(sequence)
    return window.length if window else 0


def min_window_substring(s: str, t: str) -> str:
    """
    Smallest substring of `s` containing every character of `t` (with
    multiplicity). Returns "" when there is none or `t` is empty.

    >>> min_window_substring("ADOBECODEBANC", "ABC")
    'BANC'
    """
    if not t:
        return ""
    window = VariableWindowScanner(lambda: CoverState(t), ScanMode.SHORTEST).best(s)
    return s[window.start:window.end] if window else ""


def find_all_anagrams(s: str, p: str) -> List[int]:
    """
    Start indices where a substring of `s` is an anagram of `p`.

    Every stabilized window of a WithinCountsState scan uses no character
    more often than `p` does, so it is an anagram exactly when it is as long
    as `p`.
    """
    if not p:
        raise EmptyInput("pattern")
    scanner = VariableWindowScanner(lambda: WithinCountsState(p), ScanMode.ALL)
    return [window.start for window in scanner.windows(s) if window.length == len(p)]


def count_subarrays_with_sum(sequence: Sequence[int], k: int) -> int:
    """
    Count subarrays that sum to k, negative values included.

    Two pointers cannot handle negatives (the sum is not monotone in the
    window size), so this counts pairs of prefix sums that differ by k.
    """
    prefix_counts = Counter({0: 1})
    matches = 0
    for prefix in accumulate(as_sequence(sequence)):
        matches += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return matches
