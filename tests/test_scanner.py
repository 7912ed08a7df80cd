"""
Tests for the variable-size window scanner and the problems built on it.
"""

import pytest

from algokit.errors import EmptyInput
from algokit.scanner import (
    AtMostKDistinctState,
    CoverState,
    NoRepeatState,
    ScanMode,
    ScanStats,
    SumAtLeastState,
    VariableWindowScanner,
    WithinCountsState,
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


def brute_longest_unique(s):
    best = 0
    for i in range(len(s)):
        for j in range(i, len(s) + 1):
            if len(set(s[i:j])) == j - i:
                best = max(best, j - i)
    return best


class TestLongestWithoutRepeat:
    def test_worked_example(self):
        assert longest_substring_without_repeat("abcabcbb") == 3

    def test_first_window_wins_ties(self):
        window = longest_unique_window("abcabcbb")
        assert window == Window(0, 3)
        assert window.slice_of("abcabcbb") == "abc"

    @pytest.mark.parametrize("s,expected", [
        ("", 0),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("dvdf", 3),
        ("abba", 2),
        (" ", 1),
    ])
    def test_known_cases(self, s, expected):
        assert longest_substring_without_repeat(s) == expected

    def test_empty_window_result(self):
        assert longest_unique_window("") == Window(0, 0)

    def test_bounded_by_distinct_and_length(self, rng):
        for _ in range(200):
            s = "".join(rng.choice("abcd") for _ in range(rng.randint(0, 12)))
            length = longest_substring_without_repeat(s)
            assert length <= len(set(s))
            assert length <= len(s)
            assert length == brute_longest_unique(s)

    def test_works_on_lists(self):
        assert longest_substring_without_repeat([1, 2, 1, 3, 4, 3]) == 4


class TestLongestWindowSatisfying:
    def test_sum_bound(self):
        seq = [2, 1, 3, 1, 1, 1, 5]
        assert longest_window_satisfying(seq, lambda w: sum(w) <= 4) == (3, 6)

    def test_empty_sequence(self):
        assert longest_window_satisfying([], lambda w: True) == (0, 0)

    def test_nothing_satisfies(self):
        assert longest_window_satisfying([5, 6], lambda w: sum(w) < 0) == (0, 0)

    def test_everything_satisfies(self):
        assert longest_window_satisfying("abc", lambda w: True) == (0, 3)

    def test_distinct_predicate_matches_state(self, rng):
        for _ in range(50):
            s = "".join(rng.choice("xyz") for _ in range(rng.randint(1, 10)))
            start, end = longest_window_satisfying(s, lambda w: len(set(w)) == len(w))
            assert longest_unique_window(s).as_tuple() == (start, end)


class TestAtMostKDistinct:
    def test_tutorial_example(self):
        assert longest_at_most_k_distinct([1, 2, 1, 2, 3], 2) == 4

    def test_k_zero(self):
        assert longest_at_most_k_distinct([1, 2, 3], 0) == 0

    def test_k_exceeds_distinct(self):
        assert longest_at_most_k_distinct("eceba", 5) == 5

    def test_string(self):
        assert longest_at_most_k_distinct("eceba", 2) == 3

    def test_negative_k(self):
        with pytest.raises(ValueError):
            longest_at_most_k_distinct([1], -1)


class TestMinSubarrayLen:
    def test_tutorial_example(self):
        assert min_subarray_len_at_least([2, 1, 5, 2, 3, 2], 7) == 2

    def test_none_possible(self):
        assert min_subarray_len_at_least([1, 1, 1], 10) == 0

    def test_single_element(self):
        assert min_subarray_len_at_least([1, 4, 4], 4) == 1

    def test_empty(self):
        assert min_subarray_len_at_least([], 3) == 0

    def test_brute_force_cross_check(self, rng):
        for _ in range(100):
            seq = [rng.randint(0, 6) for _ in range(rng.randint(1, 10))]
            target = rng.randint(1, 15)
            lengths = [
                j - i
                for i in range(len(seq))
                for j in range(i + 1, len(seq) + 1)
                if sum(seq[i:j]) >= target
            ]
            assert min_subarray_len_at_least(seq, target) == (min(lengths) if lengths else 0)


class TestMinWindowSubstring:
    def test_worked_example(self):
        assert min_window_substring("ADOBECODEBANC", "ABC") == "BANC"

    def test_whole_string(self):
        assert min_window_substring("a", "a") == "a"

    def test_multiplicity(self):
        assert min_window_substring("a", "aa") == ""
        assert min_window_substring("aab", "aa") == "aa"

    def test_empty_pattern(self):
        assert min_window_substring("abc", "") == ""

    def test_no_match(self):
        assert min_window_substring("abc", "d") == ""

    def test_first_shortest_wins(self):
        assert min_window_substring("abxba", "ab") == "ab"


class TestFindAllAnagrams:
    def test_classic(self):
        assert find_all_anagrams("cbaebabacd", "abc") == [0, 6]

    def test_overlapping(self):
        assert find_all_anagrams("abab", "ab") == [0, 1, 2]

    def test_pattern_longer_than_text(self):
        assert find_all_anagrams("ab", "abc") == []

    def test_empty_pattern(self):
        with pytest.raises(EmptyInput):
            find_all_anagrams("abc", "")

    def test_brute_force_cross_check(self, rng):
        for _ in range(100):
            s = "".join(rng.choice("abc") for _ in range(rng.randint(0, 12)))
            p = "".join(rng.choice("abc") for _ in range(rng.randint(1, 4)))
            expected = [
                i for i in range(len(s) - len(p) + 1)
                if sorted(s[i:i + len(p)]) == sorted(p)
            ]
            assert find_all_anagrams(s, p) == expected

    def test_foreign_characters_reset_window(self):
        assert find_all_anagrams("abxba", "ab") == [0, 3]


class TestCountSubarraysWithSum:
    def test_positive(self):
        assert count_subarrays_with_sum([1, 1, 1], 2) == 2

    def test_negatives_and_zero(self):
        assert count_subarrays_with_sum([1, -1, 0], 0) == 3

    def test_empty(self):
        assert count_subarrays_with_sum([], 0) == 0


class TestScannerEngine:
    def test_each_position_added_once_removed_at_most_once(self, rng):
        for mode in ScanMode:
            scanner = VariableWindowScanner(NoRepeatState, mode)
            s = "".join(rng.choice("abc") for _ in range(40))
            for window in scanner.windows(s):
                assert 0 <= window.start <= window.end <= len(s)
            assert scanner.stats.added == len(s)
            assert scanner.stats.removed <= scanner.stats.added

    def test_all_mode_yields_every_stabilized_window(self):
        scanner = VariableWindowScanner(NoRepeatState, ScanMode.ALL)
        windows = [w.as_tuple() for w in scanner.windows("abca")]
        assert windows == [(0, 1), (0, 2), (0, 3), (1, 4)]

    def test_shortest_mode_reports_while_valid(self):
        scanner = VariableWindowScanner(lambda: SumAtLeastState(3), ScanMode.SHORTEST)
        windows = [w.as_tuple() for w in scanner.windows([1, 2, 3])]
        assert windows == [(0, 2), (1, 3), (2, 3)]
        assert scanner.best([1, 2, 3]) == Window(2, 3)

    def test_fresh_state_per_scan(self):
        scanner = VariableWindowScanner(lambda: AtMostKDistinctState(1))
        assert scanner.best("aab") == Window(0, 2)
        assert scanner.best("bba") == Window(0, 2)

    def test_cover_state_counts(self):
        state = CoverState("aab")
        for ch in "ab":
            state.add(ch)
        assert not state.is_valid()
        state.add("a")
        assert state.is_valid()
        state.remove("a")
        assert not state.is_valid()

    def test_window_bounds_validated(self):
        with pytest.raises(ValueError):
            Window(3, 1)

    def test_within_counts_state(self):
        state = WithinCountsState("aab")
        for ch in "aba":
            state.add(ch)
        assert state.is_valid()
        state.add("b")
        assert not state.is_valid()
        state.remove("b")
        assert state.is_valid()
        state.add("z")
        assert not state.is_valid()

    def test_stats_replaced_when_scan_starts(self):
        scanner = VariableWindowScanner(NoRepeatState)
        list(scanner.windows("abc"))
        previous = scanner.stats
        windows = scanner.windows("xyzw")
        assert scanner.stats is not previous
        assert scanner.stats.added == 0
        list(windows)
        assert scanner.stats.added == 4

    def test_caller_owned_stats_per_scan(self):
        scanner = VariableWindowScanner(NoRepeatState)
        first, second = ScanStats(), ScanStats()
        it_first = scanner.windows("aaaa", stats=first)
        it_second = scanner.windows("abcdef", stats=second)
        list(it_second)
        list(it_first)
        assert (first.added, first.removed, first.reported) == (4, 3, 4)
        assert (second.added, second.removed, second.reported) == (6, 0, 6)

    def test_best_accepts_stats(self):
        stats = ScanStats()
        scanner = VariableWindowScanner(lambda: SumAtLeastState(3), ScanMode.SHORTEST)
        assert scanner.best([1, 2, 3], stats=stats) == Window(2, 3)
        assert stats.reported == 3
