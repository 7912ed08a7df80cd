"""
Demo / Examples: prints the worked example for every algorithm.
"""
import logging

from algokit.fixed import max_fixed_window_sum, sliding_window_max, window_table
from algokit.logging_config import setup_logging
from algokit.matrix import available_zeroers, zero_matrix
from algokit.scanner import (
    count_subarrays_with_sum,
    find_all_anagrams,
    longest_at_most_k_distinct,
    longest_substring_without_repeat,
    min_subarray_len_at_least,
    min_window_substring,
)

logger = logging.getLogger("algokit.demo")


def main():
    setup_logging()
    logger.info("running algokit demo")

    print("--- Set matrix zeroes ---")
    for name in available_zeroers():
        matrix = [[1, 2, 3, 4], [5, 6, 7, 0], [9, 2, 0, 4]]
        print(f"{name:>15}:", zero_matrix(matrix, strategy=name))
    print()

    print("--- Fixed-size sliding window: max_fixed_window_sum ---")
    arr = [1, 4, 2, 9, 5, 10, 3]
    k = 3
    print("arr:", arr, "k:", k)
    print("max sum of subarray of length k ->", max_fixed_window_sum(arr, k))
    print(window_table(arr, k).to_string(index=False))
    print()

    print("--- Variable-size sliding window: min_subarray_len_at_least ---")
    arr = [2, 1, 5, 2, 3, 2]
    target = 7
    print("arr:", arr, "target:", target)
    print("min length with sum >= target ->", min_subarray_len_at_least(arr, target))
    print()

    print("--- Longest substring without repeating characters ---")
    s = "abcabcbb"
    print("s:", s)
    print("longest unique substring length ->", longest_substring_without_repeat(s))
    print()

    print("--- Minimum window substring ---")
    print("s: ADOBECODEBANC t: ABC ->", min_window_substring("ADOBECODEBANC", "ABC"))
    print()

    print("--- Subarray sum equals k (handles negatives) ---")
    nums = [1, -1, 0]
    print("nums:", nums, "k:", 0)
    print("count of subarrays equals k ->", count_subarrays_with_sum(nums, 0))
    print()

    print("--- Find all anagrams of p in s ---")
    print("s: cbaebabacd p: abc ->", find_all_anagrams("cbaebabacd", "abc"))
    print()

    print("--- Longest subarray with at most K distinct ---")
    arr = [1, 2, 1, 2, 3]
    print("arr:", arr, "k:", 2)
    print("longest length ->", longest_at_most_k_distinct(arr, 2))
    print()

    print("--- Sliding window maximum (deque) ---")
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    print("nums:", nums, "k:", 3)
    print("sliding window maxes ->", sliding_window_max(nums, 3))


if __name__ == '__main__':
    main()
