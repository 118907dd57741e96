"""
Tests for the branch and bound search engine
"""

import itertools
import random

import pytest

from wordcover.cover.greedy import greedy_cover
from wordcover.cover.search import branch_and_bound_search
from wordcover.dictionary.indexer import build_continuation_tables
from wordcover.dictionary.vocabulary import filter_vocabulary
from wordcover.eval.coverage import verify_cover
from wordcover.types import BestResult


def _tables(keys, vocab):
    return build_continuation_tables(keys, filter_vocabulary(vocab, keys))


def _search(keys, vocab, use_greedy=True, **kwargs):
    tables = _tables(keys, vocab)
    initial = greedy_cover(tables) if use_greedy else None
    return branch_and_bound_search(tables, initial=initial, **kwargs)


def brute_force_cost(keys, vocab):
    """Cheapest concatenation of up to 2 * len(keys) words containing every key.

    In a cheapest cover every word is needed by some key, and a key spans
    at most two words, so longer sequences never need to be tried.
    """
    words = sorted(set(vocab))
    best = None
    for r in range(1, 2 * len(keys) + 1):
        for seq in itertools.product(words, repeat=r):
            text = "".join(seq)
            if all(k in text for k in keys):
                cost = len(text)
                if best is None or cost < best:
                    best = cost
    return best


class TestScenarios:
    def test_single_word_covers_both_keys(self):
        best, stats = _search(["a", "b"], ["ab", "a", "b", "cab"])
        assert best.terms == ["ab"]
        assert best.cost == 2
        assert stats.complete

    def test_single_word_preferred_over_boundary_pair(self):
        best, _ = _search(["lon"], ["wil", "onion", "lonely"])
        assert best.terms == ["lonely"]
        assert best.cost == 6

    def test_boundary_span_beats_single_words(self):
        keys = ["wil", "lon"]
        best, _ = _search(keys, ["wil", "on", "lonely", "wilt", "onto"])
        assert best.terms == ["wil", "on"]
        assert best.cost == 5
        assert verify_cover(best.terms, keys)

    def test_first_word_of_pair_covers_nothing_alone(self):
        best, _ = _search(["lon"], ["wil", "onion"])
        assert best.terms == ["wil", "onion"]
        assert best.cost == 8

    def test_pair_leads_into_a_shared_boundary(self):
        keys = ["a", "bb", "ca"]
        vocab = ["acb", "bd", "ca", "db"]
        best, _ = _search(keys, vocab)
        assert best.terms == ["ca", "db", "bd"]
        assert best.cost == 6
        assert verify_cover(best.terms, keys)

    def test_overlapping_keys_in_one_word(self):
        best, _ = _search(["ab", "bc"], ["abc", "ab", "bc", "xab", "bcd"])
        assert best.terms == ["abc"]
        assert best.cost == 3

    def test_uncoverable(self):
        best, stats = _search(["lon", "zzz"], ["lonely", "wil", "onion"])
        assert best is None
        assert stats.complete
        assert stats.improvements == 0


class TestBounds:
    def test_never_worse_than_greedy(self):
        keys = ["a", "b", "c"]
        vocab = ["ab", "bc", "ca", "abc", "cab", "xy"]
        tables = _tables(keys, vocab)
        greedy = greedy_cover(tables)
        best, _ = branch_and_bound_search(tables, initial=greedy)
        assert best.cost <= greedy.cost
        assert best.cost == 3

    def test_returns_greedy_when_nothing_better(self):
        tables = _tables(["lon"], ["lonely"])
        greedy = greedy_cover(tables)
        best, stats = branch_and_bound_search(tables, initial=greedy)
        assert best.terms == ["lonely"]
        assert stats.improvements == 0

    def test_initial_result_is_not_mutated(self):
        tables = _tables(["a", "b"], ["ab", "a", "b"])
        greedy = greedy_cover(tables)
        branch_and_bound_search(tables, initial=greedy)
        assert greedy.terms == ["a", "b"]

    def test_ties_keep_first_found(self):
        tables = _tables(["a", "b"], ["ba", "ab"])
        for prune in (True, False):
            best, _ = branch_and_bound_search(tables, prune=prune)
            assert best.terms == ["ab"]

    def test_node_budget_stops_early(self):
        keys = ["ab", "cd", "ef"]
        vocab = ["ab", "cd", "ef", "abx", "cdx", "efx", "abcd"]
        best, stats = _search(keys, vocab, use_greedy=False, max_nodes=2)
        assert not stats.complete
        assert stats.nodes_visited <= 3

    def test_depth_bounded_by_key_count(self):
        keys = ["ab", "cd", "ef"]
        vocab = ["ab", "cd", "ef"]
        best, _ = _search(keys, vocab, use_greedy=False, prune=False)
        assert best.length <= len(keys)
        assert best.cost == 6


class TestAgainstBruteForce:
    @pytest.mark.parametrize(
        "keys,vocab",
        [
            (["a", "b"], ["ab", "a", "b", "cab"]),
            (["ab", "bc"], ["abc", "ab", "bc", "xab", "bcd"]),
            (["a", "b", "c"], ["ab", "bc", "ca", "abc", "cab", "xy"]),
            (["wil", "lon"], ["wil", "on", "lonely", "wilt", "onto"]),
            (["lon"], ["wil", "onion", "lonely"]),
            (["lon"], ["wil", "onion"]),
            (["a", "bb", "ca"], ["acb", "bd", "ca", "db"]),
            (["ab", "ba"], ["xa", "bx", "ax", "xb"]),
        ],
    )
    def test_matches_brute_force(self, keys, vocab):
        best, _ = _search(keys, vocab)
        assert best.cost == brute_force_cost(keys, vocab)

    def test_random_instances(self):
        rng = random.Random(1234)
        alphabet = "abc"
        for _ in range(40):
            vocab = sorted(
                {
                    "".join(rng.choice(alphabet) for _ in range(rng.randint(2, 3)))
                    for _ in range(8)
                }
            )
            keys = sorted(
                {"".join(rng.choice(alphabet) for _ in range(rng.randint(1, 2))) for _ in range(2)}
            )

            tables = _tables(keys, vocab)
            greedy = greedy_cover(tables)
            pruned, _ = branch_and_bound_search(tables, initial=greedy)
            exhaustive, _ = branch_and_bound_search(tables, prune=False)
            truth = brute_force_cost(keys, vocab)

            if truth is None:
                assert greedy is None
                assert pruned is None
                assert exhaustive is None
                continue

            # pruning changes the work done, never the answer
            assert pruned.cost == exhaustive.cost == truth
            assert verify_cover(pruned.terms, keys)
            if greedy is not None:
                assert pruned.cost <= greedy.cost


class TestBestResult:
    def test_length(self):
        assert BestResult(terms=["a", "bc"], cost=3).length == 2
