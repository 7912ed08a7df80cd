"""
algokit — matrix zeroing and sliding-window reference algorithms.

Public API::

    from algokit import zero_matrix, max_fixed_window_sum, min_window_substring
"""
from algokit.errors import AlgoKitError, EmptyInput, InvalidShape, InvalidWindowSize
from algokit.fixed import (
    WindowAggregates,
    aggregate,
    max_fixed_window_sum,
    sliding_window_max,
    sliding_window_min,
    window_averages,
    window_table,
)
from algokit.matrix import (
    BruteForceZeroer,
    ConstantSpaceZeroer,
    MatrixZeroer,
    VectorizedZeroer,
    available_zeroers,
    get_zeroer,
    validate_shape,
    zero_matrix,
)
from algokit.scanner import (
    AtMostKDistinctState,
    CoverState,
    NoRepeatState,
    PredicateState,
    ScanMode,
    ScanStats,
    SumAtLeastState,
    VariableWindowScanner,
    WithinCountsState,
    WindowState,
    count_subarrays_with_sum,
    find_all_anagrams,
    longest_at_most_k_distinct,
    longest_substring_without_repeat,
    longest_unique_window,
    longest_window_satisfying,
    min_subarray_len_at_least,
    min_window_substring,
)
from algokit.window import Window

__version__ = "0.1.0"

__all__ = [
    "AlgoKitError",
    "EmptyInput",
    "InvalidShape",
    "InvalidWindowSize",
    "WindowAggregates",
    "aggregate",
    "max_fixed_window_sum",
    "sliding_window_max",
    "sliding_window_min",
    "window_averages",
    "window_table",
    "BruteForceZeroer",
    "ConstantSpaceZeroer",
    "MatrixZeroer",
    "VectorizedZeroer",
    "available_zeroers",
    "get_zeroer",
    "validate_shape",
    "zero_matrix",
    "AtMostKDistinctState",
    "CoverState",
    "NoRepeatState",
    "PredicateState",
    "ScanMode",
    "ScanStats",
    "SumAtLeastState",
    "VariableWindowScanner",
    "WithinCountsState",
    "WindowState",
    "count_subarrays_with_sum",
    "find_all_anagrams",
    "longest_at_most_k_distinct",
    "longest_substring_without_repeat",
    "longest_unique_window",
    "longest_window_satisfying",
    "min_subarray_len_at_least",
    "min_window_substring",
    "Window",
]
