"""
Side-by-side timing of the matrix zeroing strategies.
"""
import copy
import logging
import time
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from algokit import config
from algokit.matrix import Matrix, MatrixZeroer, available_zeroers, get_zeroer

logger = logging.getLogger("algokit.bench")


def _same(a, b) -> bool:
    return np.array_equal(np.asarray(a), np.asarray(b))


def compare_zeroers(matrix: Matrix,
                    strategies: Optional[Iterable[Union[str, MatrixZeroer]]] = None,
                    repeat: Optional[int] = None) -> pd.DataFrame:
    """
    Run every strategy on fresh deep copies of `matrix` and time it.

    The input matrix is never modified.

    Returns:
        DataFrame with columns strategy, best_seconds, agrees. `agrees` says
        whether the strategy produced the same matrix as the first one.
    """
    if strategies is None:
        strategies = available_zeroers()
    if repeat is None:
        repeat = config.BENCH_REPEAT
    if repeat <= 0:
        raise ValueError(f"repeat must be positive, got {repeat}")

    rows = []
    reference = None
    for strategy in strategies:
        zeroer = strategy if isinstance(strategy, MatrixZeroer) else get_zeroer(strategy)
        timings = []
        result = None
        for _ in range(repeat):
            work = copy.deepcopy(matrix)
            t0 = time.perf_counter()
            result = zeroer.zero(work)
            timings.append(time.perf_counter() - t0)

        if reference is None:
            reference = result
        rows.append({
            "strategy": zeroer.name,
            "best_seconds": min(timings),
            "agrees": _same(result, reference),
        })
        logger.debug("%s: best of %d = %.6fs", zeroer.name, repeat, min(timings))

    return pd.DataFrame(rows, columns=["strategy", "best_seconds", "agrees"])
