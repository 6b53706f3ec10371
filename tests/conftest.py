"""
Shared fixtures for the emojicatalog tests.

No test talks to the network: HTTP responses are faked by patching the
shared session in emojicatalog.request.
"""
from unittest.mock import MagicMock

import pytest

from emojicatalog.emoji import EmojiRecord


SAMPLE_JSON = [
    {"id": 1, "name": "Grinning", "category": "Smileys", "unicode": "😀",
     "description": "A big grin"},
    {"id": 2, "name": "Heart", "category": "Love", "unicode": "❤️",
     "description": "Classic red heart"},
    {"id": 3, "name": "Banana", "category": "Food", "unicode": "🍌",
     "description": "Yellow fruit"},
    {"id": 4, "name": "apple", "category": "Food", "unicode": "🍎",
     "description": "Keeps the doctor away"},
    {"id": 5, "name": "Winking", "category": "Smileys", "unicode": "😉",
     "description": "Playful face, loves a joke"},
]


def make_response(status_code=200, json_data=None, text=""):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def records():
    return tuple(EmojiRecord.from_json(item) for item in SAMPLE_JSON)


@pytest.fixture
def sample_json():
    return [dict(item) for item in SAMPLE_JSON]
