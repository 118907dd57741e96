"""
Tests for the find_minimum_cover pipeline
"""

import pytest

from wordcover import (
    CoverResult,
    EmptySearchKeys,
    TooManySearchKeys,
    WordCoverError,
    find_minimum_cover,
)
from wordcover.eval.coverage import verify_cover


class TestFindMinimumCover:
    def test_unpacks_as_terms_and_cost(self):
        terms, cost = find_minimum_cover(["a", "b"], {"ab", "a", "b", "cab"})
        assert terms == ("ab",)
        assert cost == 2

    def test_boundary_scenario(self):
        result = find_minimum_cover(["lon"], {"wil", "onion", "lonely"})
        assert result.terms == ("lonely",)
        assert result.total_cost == 6
        assert result.covered
        assert result.complete

    def test_boundary_pair_without_full_match(self):
        result = find_minimum_cover(["lon"], {"wil", "onion"})
        assert result.terms == ("wil", "onion")
        assert result.total_cost == 8
        assert result.greedy_cost is None

    def test_result_metadata(self):
        result = find_minimum_cover(["Wil", "lon", "wil"], ["wil", "on", "lonely", "wilt", "onto"])
        assert result.search_keys == ("wil", "lon")
        assert result.terms == ("wil", "on")
        assert result.greedy_cost == 9
        assert result.nodes_visited > 0
        assert verify_cover(result.terms, result.search_keys)

    def test_without_greedy_bound(self):
        with_bound = find_minimum_cover(["a", "b", "c"], ["ab", "bc", "ca", "abc", "cab"])
        without = find_minimum_cover(
            ["a", "b", "c"], ["ab", "bc", "ca", "abc", "cab"], use_greedy_bound=False
        )
        assert with_bound.total_cost == without.total_cost == 3

    def test_empty_keys_short_circuit(self):
        result = find_minimum_cover([], ["anything"])
        assert result.terms == ()
        assert result.total_cost == 0
        assert result.covered

    def test_blank_keys_are_empty(self):
        terms, cost = find_minimum_cover(["", "  "], ["word"])
        assert terms == ()
        assert cost == 0

    def test_uncoverable(self):
        result = find_minimum_cover(["zz"], ["ab", "cd"])
        assert result.terms == ()
        assert result.total_cost is None
        assert not result.covered

    def test_capacity_32(self):
        keys = [f"k{i:02d}" for i in range(32)]
        word = "".join(keys)
        result = find_minimum_cover(keys, [word], mask_bits=32)
        assert result.terms == (word,)

    def test_capacity_33_with_32_bits(self):
        keys = [f"k{i:02d}" for i in range(33)]
        with pytest.raises(TooManySearchKeys):
            find_minimum_cover(keys, ["".join(keys)], mask_bits=32)

    def test_capacity_checked_after_deduplication(self):
        keys = [f"k{i:02d}" for i in range(32)] + ["k00"]
        result = find_minimum_cover(keys, ["".join(keys)], mask_bits=32)
        assert result.covered

    def test_unsupported_width(self):
        with pytest.raises(ValueError):
            find_minimum_cover(["a"], ["a"], mask_bits=8)

    def test_errors_share_a_base(self):
        assert issubclass(TooManySearchKeys, WordCoverError)
        assert issubclass(EmptySearchKeys, WordCoverError)

    def test_node_budget(self):
        result = find_minimum_cover(
            ["ab", "cd", "ef"], ["ab", "cd", "ef", "abcd"], use_greedy_bound=False, max_nodes=1
        )
        assert not result.complete

    def test_accepts_unnormalized_vocabulary(self):
        result = find_minimum_cover(["ab"], ["AB", "x", "", "ab's", "cabin"])
        assert isinstance(result, CoverResult)
        assert result.total_cost == 4
        assert result.terms == ("ab's",)
