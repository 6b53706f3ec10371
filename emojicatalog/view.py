# SPDX-License-Identifier: MIT
"""
Terminal rendering of the emoji catalog.
"""

from . import logger
from .emoji import EmojiRecord
from .utils import colors, badge_color, plural

import textwrap
from typing import List, Sequence

#: Label of the category option that disables category filtering.
ALL_CATEGORIES = "All Categories"

NO_RESULTS_GLYPH = "🔍"


class CatalogView:
    """
    Displays cards, the result count and the loading overlay.

    The view keeps what it currently shows in ``content`` (one string per
    block), ``results_count``, ``loading`` and ``category_options`` and prints
    every change through the package logger.
    """

    def __init__(self, color: bool = True, card_width: int = 40):
        self.color = color
        self.card_width = card_width

        #: Blocks currently shown in the card area.
        self.content: List[str] = []

        #: Summary line, e.g. "Showing 3 emojis".
        self.results_count = ""

        #: Whether the loading overlay is visible.
        self.loading = False

        #: (value, label) pairs of the category selector.
        self.category_options = [("", ALL_CATEGORIES)]

    def _style(self, text: str, *names: str) -> str:
        if not self.color:
            return text
        prefix = "".join(colors[name] for name in names)
        return f"{prefix}{text}{colors['reset']}"

    def _show(self, blocks: List[str]):
        self.content = blocks
        logger.info("\n\n".join(blocks))

    # Loading overlay

    def show_loading(self):
        self.loading = True
        logger.info(self._style("Loading emoji catalog...", "dim"))

    def hide_loading(self):
        self.loading = False

    def show_progress(self):
        """Replace the cards with a transient progress line."""
        self._show([self._style("...", "dim")])

    # Category selector

    def populate_categories(self, categories: Sequence[str]):
        self.category_options = [("", ALL_CATEGORIES)]
        self.category_options.extend((category, category) for category in categories)

    def format_categories(self) -> str:
        return "\n".join(
            f" {label}" if value else f" {self._style(label, 'bold')}"
            for value, label in self.category_options
        )

    # Cards

    def format_badge(self, category: str) -> str:
        return self._style(f"[{category}]", badge_color(category))

    def format_card(self, emoji: EmojiRecord) -> str:
        lines = [
            f" {emoji.unicode}  {self.format_badge(emoji.category)}",
            " " + self._style(emoji.name, "bold"),
        ]
        lines.extend(
            textwrap.wrap(
                emoji.description,
                width=self.card_width,
                initial_indent="   ",
                subsequent_indent="   ",
            )
        )
        return "\n".join(lines)

    def format_no_results(self) -> str:
        return "\n".join(
            [
                f" {NO_RESULTS_GLYPH}",
                " " + self._style("No emojis found", "bold"),
                "   Try adjusting your search or filter criteria.",
            ]
        )

    def render_cards(self, records: Sequence[EmojiRecord]):
        """Show one card per record, or a placeholder if there are none."""
        if not records:
            self._show([self.format_no_results()])
            self._set_count(0)
            return

        self._show([self.format_card(emoji) for emoji in records])
        self._set_count(len(records))

    def _set_count(self, count: int):
        self.results_count = f"Showing {count} {plural(count, 'emoji')}"
        logger.info(self._style(self.results_count, "dim"))

    def render_error(self, message: str):
        """Replace the cards with an error block."""
        self._show([self._style("Error:", "bold", "red") + " " + message])
