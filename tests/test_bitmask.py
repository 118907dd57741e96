"""
Tests for the cover bitmask helpers
"""

import pytest

from wordcover.cover.bitmask import (
    check_capacity,
    encode_cover,
    full_mask,
    iter_bits,
    mask_width,
)
from wordcover.errors import EmptySearchKeys, TooManySearchKeys


class TestMaskWidth:
    def test_supported_widths(self):
        assert mask_width(32) == 32
        assert mask_width(64) == 64

    def test_unsupported_width(self):
        with pytest.raises(ValueError):
            mask_width(16)


class TestCheckCapacity:
    def test_exactly_full_32(self):
        keys = [f"k{i:02d}" for i in range(32)]
        assert check_capacity(keys, 32) == 32

    def test_one_over_32(self):
        keys = [f"k{i:02d}" for i in range(33)]
        with pytest.raises(TooManySearchKeys) as excinfo:
            check_capacity(keys, 32)
        assert excinfo.value.count == 33
        assert excinfo.value.capacity == 32

    def test_33_fits_in_64(self):
        keys = [f"k{i:02d}" for i in range(33)]
        assert check_capacity(keys, 64) == 64

    def test_too_many_is_a_value_error(self):
        with pytest.raises(ValueError):
            check_capacity(["x"] * 65, 64)

    def test_empty_allowed_by_default(self):
        assert check_capacity([], 64) == 64

    def test_empty_rejected_on_request(self):
        with pytest.raises(EmptySearchKeys):
            check_capacity([], 64, allow_empty=False)


class TestEncodeCover:
    def test_single_word(self):
        keys = ["a", "b", "z"]
        assert encode_cover("cab", keys) == 0b011

    def test_boundary_prefix_counts(self):
        keys = ["lon", "ion", "wil"]
        # "l" + "onion"
        assert encode_cover("lonion", keys) == 0b011

    def test_no_match(self):
        assert encode_cover("xyz", ["ab", "cd"]) == 0

    def test_full_mask(self):
        assert full_mask(0) == 0
        assert full_mask(3) == 0b111
        assert full_mask(64) == 2 ** 64 - 1


class TestBits:
    def test_iter_bits(self):
        assert list(iter_bits(0b101001)) == [0, 3, 5]
        assert list(iter_bits(0)) == []
