# SPDX-License-Identifier: MIT
"""Runtime configuration."""

from dataclasses import dataclass

DEFAULT_URL = (
    "https://raw.githubusercontent.com/kaybeenwar/cs3870_assignment2"
    "/refs/heads/main/emojis.json"
)


@dataclass
class CatalogConfig:
    #: URL of the JSON array of emoji records.
    url: str = DEFAULT_URL

    #: Seconds the loading indicator stays up after a successful fetch.
    reveal_delay: float = 0.0

    #: Seconds the progress indicator is shown before each recompute.
    recompute_delay: float = 0.0

    #: Use ANSI colors in output.
    color: bool = True

    #: Wrap width of card descriptions.
    card_width: int = 40

    verbose: bool = False
