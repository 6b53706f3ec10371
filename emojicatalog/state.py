# SPDX-License-Identifier: MIT
"""State of a catalog browsing session."""

from dataclasses import dataclass, field
from typing import Tuple

from .emoji import EmojiRecord


@dataclass(frozen=True)
class Controls:
    """Current values of the search, category and sort controls."""

    search_term: str = ""
    category: str = ""
    sort_order: str = ""


@dataclass
class CatalogState:
    """
    The records of a session and the controls applied to them.

    ``all_records`` is set once after loading. ``visible_records`` and
    ``controls`` are replaced as a whole, never modified in place.
    """

    all_records: Tuple[EmojiRecord, ...] = ()
    visible_records: Tuple[EmojiRecord, ...] = ()
    controls: Controls = field(default_factory=Controls)
