# SPDX-License-Identifier: MIT
"""Code for emoji parsing."""

from dataclasses import dataclass
from typing import Any, Self

from .request import ParseError


@dataclass(frozen=True)
class EmojiRecord:
    """Class representing a single emoji in the catalog."""

    #: Identifier of the emoji. Any JSON scalar.
    id: Any

    #: Display name, e.g. "Grinning Face".
    name: str

    #: Category label, e.g. "Smileys".
    category: str

    #: The emoji itself, as a string.
    unicode: str

    #: Longer description shown on the card.
    description: str

    @classmethod
    def from_json(cls, data: dict) -> Self:
        """
        Create a record from one object of the catalog JSON.

        Missing text fields are treated as empty strings.

        :raises ParseError: if ``data`` is not a JSON object.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Expected an emoji object, got {type(data).__name__}")

        return cls(
            id=data.get("id"),
            name=_text(data.get("name")),
            category=_text(data.get("category")),
            unicode=_text(data.get("unicode")),
            description=_text(data.get("description")),
        )


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)
