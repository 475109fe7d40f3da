"""Reply-markup helpers.

Each helper returns the JSON string the Bot API expects in a `reply_markup`
field, so the value can be passed straight into any send method.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any


def _dumps(markup: Mapping[str, Any]) -> str:
    return json.dumps(dict(markup), ensure_ascii=False)


def reply_keyboard_markup(parameters: Mapping[str, Any]) -> str:
    """Serialize a ReplyKeyboardMarkup (https://core.telegram.org/bots/api#replykeyboardmarkup)."""
    return _dumps(parameters)


def inline_keyboard_markup(rows: Sequence[Sequence[Mapping[str, Any]]]) -> str:
    """Serialize an InlineKeyboardMarkup from rows of buttons."""
    return _dumps({"inline_keyboard": [[dict(button) for button in row] for row in rows]})


def reply_keyboard_remove(parameters: Mapping[str, Any] | None = None) -> str:
    """Serialize a ReplyKeyboardRemove (https://core.telegram.org/bots/api#replykeyboardremove)."""
    return _dumps({"remove_keyboard": True, "selective": False, **(parameters or {})})


def force_reply(parameters: Mapping[str, Any] | None = None) -> str:
    """Serialize a ForceReply (https://core.telegram.org/bots/api#forcereply)."""
    return _dumps({"force_reply": True, "selective": False, **(parameters or {})})
