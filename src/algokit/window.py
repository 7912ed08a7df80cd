"""
Shared window types and input coercion for the sliding-window modules.
"""
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Window:
    """Half-open index range [start, end) over a sequence."""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid window bounds [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice_of(self, sequence: Sequence[Any]) -> Sequence[Any]:
        return sequence[self.start:self.end]

    def as_tuple(self):
        return self.start, self.end


def as_sequence(values: Any) -> Sequence[Any]:
    """
    Return an indexable, position-addressed view of `values`.

    Strings, lists and tuples pass through untouched. numpy arrays and
    pandas Series are converted to plain lists so that `values[i]` is
    always positional and yields Python scalars.
    """
    if isinstance(values, (str, list, tuple)):
        return values
    if isinstance(values, pd.Series):
        return values.tolist()
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D array, got {values.ndim}-D")
        return values.tolist()
    return list(values)

