# SPDX-License-Identifier: MIT
"""
Search, category filtering and sorting of emoji records.

All functions here are pure: they never modify the sequence they are given
and always return a new one (or the input itself when a filter is a no-op).
"""

from .emoji import EmojiRecord
from .state import Controls

import unicodedata
from typing import List, Sequence, Tuple

#: Values offered by the sort control. The empty string keeps catalog order.
SORT_ORDERS = ("", "asc", "desc")


def filter_by_search(records: Sequence[EmojiRecord], term: str) -> Sequence[EmojiRecord]:
    """
    Keep records whose name, description or category contains ``term``.

    Matching is a case-insensitive substring test. A blank term returns
    ``records`` unchanged.
    """
    term = term.strip().lower()
    if not term:
        return records

    return [
        emoji
        for emoji in records
        if term in emoji.name.lower()
        or term in emoji.description.lower()
        or term in emoji.category.lower()
    ]


def filter_by_category(records: Sequence[EmojiRecord], category: str) -> Sequence[EmojiRecord]:
    """Keep records whose category is exactly ``category`` (empty keeps all)."""
    if not category:
        return records
    return [emoji for emoji in records if emoji.category == category]


def name_sort_key(name: str) -> Tuple[str, str]:
    """
    Collation key for emoji names.

    Accents and case are ignored first, so "apple" sorts before "Banana" and
    "Éclair" next to "Eclair"; the raw name breaks the remaining ties.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name


def sort_emojis(records: Sequence[EmojiRecord], order: str) -> List[EmojiRecord]:
    """
    Sort records by name.

    ``order`` is "asc" or "desc"; any other value keeps the input order.
    The sort is stable in both directions.
    """
    if order == "asc":
        return sorted(records, key=lambda emoji: name_sort_key(emoji.name))
    elif order == "desc":
        # reverse=True keeps equal names in their original order
        return sorted(records, key=lambda emoji: name_sort_key(emoji.name), reverse=True)
    return list(records)


def apply_controls(records: Sequence[EmojiRecord], controls: Controls) -> Tuple[EmojiRecord, ...]:
    """Run search, category filter and sort over ``records``, in that order."""
    result = filter_by_search(records, controls.search_term)
    result = filter_by_category(result, controls.category)
    return tuple(sort_emojis(result, controls.sort_order))


def unique_categories(records: Sequence[EmojiRecord]) -> List[str]:
    """Return the distinct categories of ``records``, sorted."""
    return sorted({emoji.category for emoji in records})
