# SPDX-License-Identifier: MIT
"""Terminal helpers."""

import zlib

#: ANSI escape sequences used for terminal output.
colors = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
}

#: Colors that category badges are picked from.
BADGE_COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan")


def badge_color(category: str) -> str:
    """
    Pick a badge color for a category.

    The color only depends on the category string, so a category keeps its
    color between runs.
    """
    index = zlib.crc32(category.encode("utf-8")) % len(BADGE_COLORS)
    return BADGE_COLORS[index]


def plural(count: int, word: str) -> str:
    """Return ``word`` with an "s" appended unless ``count`` is 1."""
    if count != 1:
        return word + "s"
    return word
