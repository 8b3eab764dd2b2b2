"""Tests for the aging category taxonomy."""

from __future__ import annotations

from gilded_rose.taxonomy.aging_taxonomy import (
    AGED_STOCK_NAME,
    SUBSTRING_MARKERS,
    AgingCategory,
)


class TestAgingCategoryEnum:
    def test_all_values_are_strings(self):
        for member in AgingCategory:
            assert isinstance(member.value, str)

    def test_no_duplicate_values(self):
        values = [m.value for m in AgingCategory]
        assert len(values) == len(set(values)), "AgingCategory has duplicate values"

    def test_exactly_five_categories(self):
        assert {m.value for m in AgingCategory} == {
            "ordinary", "aged_stock", "event_pass", "legendary", "perishable",
        }


class TestMarkers:
    def test_markers_are_unique(self):
        markers = [m for m, _ in SUBSTRING_MARKERS]
        assert len(markers) == len(set(markers))

    def test_no_marker_maps_to_ordinary_or_aged_stock(self):
        targets = {c for _, c in SUBSTRING_MARKERS}
        assert AgingCategory.ORDINARY not in targets
        assert AgingCategory.AGED_STOCK not in targets

    def test_aged_stock_name_contains_no_marker(self):
        for marker, _ in SUBSTRING_MARKERS:
            assert marker not in AGED_STOCK_NAME
