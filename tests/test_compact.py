"""
Unit tests for the compact index representation.
"""
import pytest
import h3
from src.h3range.compact import (
    COMPACT_MASK,
    compact_index_of,
    to_compact,
)


@pytest.mark.unit
class TestToCompact:
    """Test suite for to_compact function."""

    def test_mask_is_52_bits(self):
        assert COMPACT_MASK == 0xFFFFFFFFFFFFF
        assert COMPACT_MASK.bit_length() == 52

    def test_strips_mode_and_resolution(self):
        """Test that only base cell and digit bits survive."""
        cell_id = h3.latlng_to_cell(40.7128, -74.0060, 9)
        value = h3.str_to_int(cell_id)

        compact = to_compact(cell_id)

        assert compact == value & 0xFFFFFFFFFFFFF
        assert compact >> 52 == 0
        assert compact < value

    def test_accepts_str_and_int(self):
        cell_id = h3.latlng_to_cell(40.7128, -74.0060, 9)
        assert to_compact(cell_id) == to_compact(h3.str_to_int(cell_id))

    def test_masking_is_idempotent(self):
        """Test that masking an already compact value changes nothing."""
        compact = to_compact(h3.latlng_to_cell(-33.8688, 151.2093, 12))
        assert to_compact(compact) == compact

    def test_base_cell_is_kept(self):
        """Test that the base cell number sits just under the mask boundary."""
        cell_id = h3.latlng_to_cell(35.6762, 139.6503, 6)
        assert to_compact(cell_id) >> 45 == h3.get_base_cell_number(cell_id)

    def test_unused_digits_are_all_ones(self):
        """Coarse cells read as the largest value among their descendants."""
        cell_id = h3.latlng_to_cell(40.7128, -74.0060, 13)
        unused_bits = 3 * (15 - 13)
        low_bits = to_compact(cell_id) & ((1 << unused_bits) - 1)
        assert low_bits == (1 << unused_bits) - 1

    def test_fits_signed_bigint(self):
        """Compact values are storable in a signed 64-bit column."""
        compact = to_compact(h3.latlng_to_cell(89.9, 179.9, 15))
        assert 0 <= compact < 2 ** 63


@pytest.mark.unit
class TestCompactIndexOf:
    """Test suite for compact_index_of function."""

    def test_matches_manual_lookup(self):
        lat, lon = 55.7558, 37.6173
        expected = h3.str_to_int(h3.latlng_to_cell(lat, lon, 11)) & COMPACT_MASK
        assert compact_index_of(lat, lon, 11) == expected

    def test_default_resolution_from_config(self, monkeypatch):
        from src.h3range import config
        monkeypatch.setattr(config, "INDEX_RESOLUTION", 10)

        lat, lon = 55.7558, 37.6173
        assert compact_index_of(lat, lon) == to_compact(h3.latlng_to_cell(lat, lon, 10))

    def test_invalid_coordinates_propagate(self):
        with pytest.raises(h3.H3BaseException):
            compact_index_of(float("nan"), 37.6173, 15)
