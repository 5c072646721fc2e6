"""
Tests for catalog module.
"""

import pytest

import catalog
from errors import ConfigurationError
from models import GROUP_SIZE
from conftest import make_category


def test_shipped_catalog_is_valid():
    catalog.validate_catalog(catalog.list_all())


def test_shipped_catalog_has_single_pinned_category():
    pinned = [c for c in catalog.list_all() if c.pinned]
    assert len(pinned) == 1
    assert pinned[0].id == "anniversary"


def test_every_category_has_four_distinct_words():
    for category in catalog.list_all():
        assert len(category.words) == GROUP_SIZE
        assert len(set(category.words)) == GROUP_SIZE


def test_no_pinned_category_rejected(small_catalog):
    unpinned = [c for c in small_catalog if not c.pinned]
    with pytest.raises(ConfigurationError):
        catalog.validate_catalog(unpinned)


def test_two_pinned_categories_rejected(small_catalog):
    extra = make_category("tools", ["SAW", "AXE", "DRILL", "FILE"], pinned=True)
    with pytest.raises(ConfigurationError):
        catalog.validate_catalog((*small_catalog, extra))


def test_wrong_word_count_rejected(small_catalog):
    short = make_category("tools", ["SAW", "AXE", "DRILL"])
    with pytest.raises(ConfigurationError):
        catalog.validate_catalog((*small_catalog, short))


def test_repeated_word_within_category_rejected(small_catalog):
    repeated = make_category("tools", ["SAW", "SAW", "DRILL", "FILE"])
    with pytest.raises(ConfigurationError):
        catalog.validate_catalog((*small_catalog, repeated))


def test_duplicate_ids_rejected(small_catalog):
    clash = make_category("fruit", ["SAW", "AXE", "DRILL", "FILE"])
    with pytest.raises(ConfigurationError):
        catalog.validate_catalog((*small_catalog, clash))


def test_words_may_repeat_across_categories(small_catalog):
    overlap = make_category("tools", ["FIG", "AXE", "DRILL", "FILE"])
    catalog.validate_catalog((*small_catalog, overlap))
