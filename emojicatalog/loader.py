# SPDX-License-Identifier: MIT
"""
Loading of the emoji catalog from a remote JSON file.
"""

from . import logger
from .emoji import EmojiRecord
from .request import request_get, CatalogError, ParseError

from dataclasses import dataclass
from typing import Optional, Tuple
import time


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a catalog load: either records or the error that stopped it."""

    records: Tuple[EmojiRecord, ...] = ()
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_catalog(data) -> Tuple[EmojiRecord, ...]:
    """
    Turn decoded catalog JSON into records.

    :raises ParseError: if the data is not an array of objects.
    """
    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array, got {type(data).__name__}")
    return tuple(EmojiRecord.from_json(item) for item in data)


def load(url: str, indicator=None, reveal_delay: float = 0.0) -> LoadResult:
    """
    Fetch the catalog at ``url``.

    Errors are logged and returned in the result instead of being raised.

    :param indicator: object with ``show_loading()`` and ``hide_loading()``
        methods; the indicator is shown for the whole call.
    :param reveal_delay: seconds to keep the indicator up after a successful
        fetch.
    """
    if indicator is not None:
        indicator.show_loading()

    try:
        logger.debug(f"Fetching emoji catalog from {url}")
        records = parse_catalog(request_get(url, parse_json=True))
        if reveal_delay > 0:
            time.sleep(reveal_delay)
    except CatalogError as e:
        logger.error(f"Error fetching emoji data: {e}")
        return LoadResult(error=e)
    finally:
        if indicator is not None:
            indicator.hide_loading()

    return LoadResult(records=records)
