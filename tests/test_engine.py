"""
Tests for emojicatalog/engine.py

Covers search, category filtering, sorting, their composition and category
extraction.
"""
import pytest

from emojicatalog.emoji import EmojiRecord
from emojicatalog.engine import (
    apply_controls,
    filter_by_category,
    filter_by_search,
    name_sort_key,
    sort_emojis,
    unique_categories,
)
from emojicatalog.state import Controls


def rec(name, category="Misc", description="", id=None):
    return EmojiRecord(id=id, name=name, category=category, unicode="?",
                       description=description)


def names(records):
    return [r.name for r in records]


# ── filter_by_search ──────────────────────────────────────────────────────────

class TestFilterBySearch:
    def test_matches_name(self):
        data = [rec("Grinning", "Smileys"), rec("Heart", "Love")]
        assert names(filter_by_search(data, "grin")) == ["Grinning"]

    def test_matches_description(self, records):
        assert names(filter_by_search(records, "FRUIT")) == ["Banana"]

    def test_matches_category(self, records):
        assert names(filter_by_search(records, "smiley")) == ["Grinning", "Winking"]

    def test_empty_term_returns_input(self, records):
        assert filter_by_search(records, "") is records

    def test_blank_term_returns_input(self, records):
        assert filter_by_search(records, "   ") is records

    def test_term_is_trimmed(self, records):
        assert names(filter_by_search(records, "  heart ")) == ["Heart"]

    def test_substring_not_fuzzy(self, records):
        assert filter_by_search(records, "hrt") == []

    def test_every_result_contains_term(self, records):
        for term in ("a", "e", "face", "o"):
            for r in filter_by_search(records, term):
                haystack = (r.name + r.description + r.category).lower()
                assert term in haystack
                assert r in records

    def test_input_not_mutated(self, records):
        data = list(records)
        filter_by_search(data, "heart")
        assert data == list(records)


# ── filter_by_category ────────────────────────────────────────────────────────

class TestFilterByCategory:
    def test_exact_match(self):
        data = [rec("Grinning", "Smileys"), rec("Heart", "Love")]
        assert names(filter_by_category(data, "Love")) == ["Heart"]

    def test_case_sensitive(self, records):
        assert filter_by_category(records, "love") == []

    def test_empty_category_returns_input(self, records):
        assert filter_by_category(records, "") is records

    def test_keeps_order(self, records):
        assert names(filter_by_category(records, "Food")) == ["Banana", "apple"]


# ── sort_emojis ───────────────────────────────────────────────────────────────

class TestSortEmojis:
    def test_ascending(self):
        data = [rec("Banana"), rec("Apple")]
        assert names(sort_emojis(data, "asc")) == ["Apple", "Banana"]

    def test_descending(self):
        data = [rec("Banana"), rec("Apple")]
        assert names(sort_emojis(data, "desc")) == ["Banana", "Apple"]

    def test_case_insensitive_like_locale_compare(self):
        data = [rec("banana"), rec("Cherry"), rec("apple")]
        assert names(sort_emojis(data, "asc")) == ["apple", "banana", "Cherry"]

    def test_accents_sort_with_base_letter(self):
        data = [rec("Fig"), rec("Éclair"), rec("Date")]
        assert names(sort_emojis(data, "asc")) == ["Date", "Éclair", "Fig"]

    @pytest.mark.parametrize("order", ["", "none", "ASC", None])
    def test_other_orders_keep_input_order(self, records, order):
        assert sort_emojis(records, order) == list(records)

    def test_returns_new_list(self, records):
        data = list(records)
        result = sort_emojis(data, "")
        assert result == data
        assert result is not data

    def test_input_not_mutated(self):
        data = [rec("Banana"), rec("Apple")]
        sort_emojis(data, "asc")
        assert names(data) == ["Banana", "Apple"]

    def test_stable_ascending(self):
        data = [rec("Star", id=1), rec("Moon", id=2), rec("Star", id=3)]
        assert [r.id for r in sort_emojis(data, "asc")] == [2, 1, 3]

    def test_stable_descending(self):
        data = [rec("Star", id=1), rec("Moon", id=2), rec("Star", id=3)]
        assert [r.id for r in sort_emojis(data, "desc")] == [1, 3, 2]

    def test_asc_is_reverse_of_desc_for_distinct_names(self, records):
        asc = sort_emojis(records, "asc")
        desc = sort_emojis(records, "desc")
        assert asc == list(reversed(desc))

    def test_name_sort_key_breaks_ties_on_raw_name(self):
        assert name_sort_key("apple") != name_sort_key("Apple")
        assert name_sort_key("apple")[0] == name_sort_key("Apple")[0]


# ── apply_controls ────────────────────────────────────────────────────────────

class TestApplyControls:
    def test_default_controls_return_everything_in_order(self, records):
        assert apply_controls(records, Controls()) == tuple(records)

    def test_search_then_category_then_sort(self, records):
        controls = Controls(search_term="a", category="Food", sort_order="asc")
        assert names(apply_controls(records, controls)) == ["apple", "Banana"]

    def test_filters_commute(self, records):
        by_search_first = filter_by_category(filter_by_search(records, "e"), "Smileys")
        by_category_first = filter_by_search(filter_by_category(records, "Smileys"), "e")
        assert list(by_search_first) == list(by_category_first)

    def test_idempotent(self, records):
        controls = Controls(search_term="o", sort_order="desc")
        once = apply_controls(records, controls)
        assert apply_controls(once, controls) == once

    def test_result_is_subset(self, records):
        controls = Controls(search_term="e", sort_order="asc")
        for r in apply_controls(records, controls):
            assert r in records

    def test_no_match_is_empty(self, records):
        assert apply_controls(records, Controls(search_term="zzz")) == ()


# ── unique_categories ────────────────────────────────────────────────────────

class TestUniqueCategories:
    def test_sorted_without_duplicates(self, records):
        assert unique_categories(records) == ["Food", "Love", "Smileys"]

    def test_codepoint_order(self):
        data = [rec("a", "beta"), rec("b", "Alpha"), rec("c", "alpha")]
        assert unique_categories(data) == ["Alpha", "alpha", "beta"]

    def test_empty(self):
        assert unique_categories([]) == []
