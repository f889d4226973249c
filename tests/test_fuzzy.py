"""Tests for searchlight.core.search.fuzzy."""
from searchlight.core.search.fuzzy import (
    FuzzyHit,
    distance_table,
    fuzzy_search,
    max_errors,
    merge_overlapping,
    trace_start,
)


class TestMaxErrors:
    def test_default_threshold(self) -> None:
        assert max_errors(5) == 2

    def test_exact_threshold(self) -> None:
        assert max_errors(12, 1.0) == 0

    def test_zero_threshold_allows_everything(self) -> None:
        assert max_errors(7, 0.0) == 7

    def test_float_noise_does_not_lose_an_error(self) -> None:
        assert max_errors(10, 0.9) == 1


class TestDistanceTable:
    def test_free_start(self) -> None:
        table = distance_table("xxabc", "abc")
        assert all(row[0] == 0 for row in table)
        assert table[0] == [0, 1, 2, 3]
        assert table[5][3] == 0

    def test_traceback_finds_start(self) -> None:
        text, query = "xxabcx", "abc"
        table = distance_table(text, query)
        assert trace_start(table, text, query, 5) == 2


class TestFuzzySearch:
    def test_one_substitution_matches(self) -> None:
        hits = fuzzy_search("sayhallonow", "hello")
        assert len(hits) == 1
        assert hits[0] == FuzzyHit(3, 8, 1)

    def test_three_substitutions_rejected(self) -> None:
        assert fuzzy_search("sayhxyyonow", "hello") == []

    def test_exact_threshold_is_substring_search(self) -> None:
        hits = fuzzy_search("abcabd", "abc", threshold=1.0)
        assert hits == [FuzzyHit(0, 3, 0)]

    def test_multiple_disjoint_hits(self) -> None:
        hits = fuzzy_search("abcxxxxabc", "abc", threshold=1.0)
        assert [(h.start, h.end) for h in hits] == [(0, 3), (7, 10)]

    def test_case_folding(self) -> None:
        assert fuzzy_search("HELLO", "hello", threshold=1.0) == [FuzzyHit(0, 5, 0)]
        assert fuzzy_search("HELLO", "hello", threshold=1.0, case_sensitive=True) == []

    def test_empty_inputs(self) -> None:
        assert fuzzy_search("", "abc") == []
        assert fuzzy_search("abc", "") == []

    def test_adjacent_occurrences_both_found(self) -> None:
        assert fuzzy_search("hello,hello", "hello") == [FuzzyHit(0, 5, 0), FuzzyHit(6, 11, 0)]

    def test_hits_do_not_overlap(self) -> None:
        hits = fuzzy_search("helohelllohello", "hello")
        for left, right in zip(hits, hits[1:]):
            assert left.end <= right.start


class TestMergeOverlapping:
    def test_keeps_lower_distance(self) -> None:
        hits = [FuzzyHit(0, 4, 2), FuzzyHit(2, 6, 1)]
        assert merge_overlapping(hits) == [FuzzyHit(2, 6, 1)]

    def test_first_seen_wins_on_tie(self) -> None:
        hits = [FuzzyHit(0, 4, 1), FuzzyHit(2, 6, 1)]
        assert merge_overlapping(hits) == [FuzzyHit(0, 4, 1)]

    def test_disjoint_hits_kept(self) -> None:
        hits = [FuzzyHit(5, 7, 1), FuzzyHit(0, 2, 0)]
        assert merge_overlapping(hits) == [FuzzyHit(0, 2, 0), FuzzyHit(5, 7, 1)]

    def test_overlap_measured_against_kept_hit(self) -> None:
        hits = [FuzzyHit(0, 4, 1), FuzzyHit(3, 8, 1), FuzzyHit(7, 9, 0)]
        assert merge_overlapping(hits) == [FuzzyHit(0, 4, 1), FuzzyHit(7, 9, 0)]

    def test_longer_loser_does_not_swallow_next_hit(self) -> None:
        hits = [FuzzyHit(0, 5, 0), FuzzyHit(0, 7, 2), FuzzyHit(6, 11, 0)]
        assert merge_overlapping(hits) == [FuzzyHit(0, 5, 0), FuzzyHit(6, 11, 0)]

    def test_replacement_end_used_for_next_overlap(self) -> None:
        hits = [FuzzyHit(0, 3, 2), FuzzyHit(2, 8, 0), FuzzyHit(5, 9, 1)]
        assert merge_overlapping(hits) == [FuzzyHit(2, 8, 0)]
