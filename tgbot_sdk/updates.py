"""Inbound update parsing.

An update is the JSON object Telegram POSTs to a webhook (or returns from
getUpdates). Parsing it yields an `UpdateContext`: the sender and chat the
update came from. Pass that context to `TelegramClient.send_method()` (or any
method wrapper) so failure reports reach the user who triggered them.
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

# Update variant -> (path to chat id, path to sender id)
_VARIANTS: dict[str, tuple[tuple[str, ...] | None, tuple[str, ...] | None]] = {
    "message": (("chat", "id"), ("from", "id")),
    "edited_message": (("chat", "id"), ("from", "id")),
    "channel_post": (("chat", "id"), None),
    "edited_channel_post": (("chat", "id"), None),
    "inline_query": (None, ("from", "id")),
    "chosen_inline_result": (None, ("from", "id")),
    "callback_query": (("message", "chat", "id"), ("from", "id")),
    "shipping_query": (None, ("from", "id")),
    "pre_checkout_query": (None, ("from", "id")),
    "poll_answer": (None, ("user", "id")),
    "my_chat_member": (("chat", "id"), ("from", "id")),
    "chat_member": (("chat", "id"), ("from", "id")),
    "chat_join_request": (("chat", "id"), ("from", "id")),
}


class UpdateContext(BaseModel):
    """Who an update came from, used to route failure reports."""

    model_config = ConfigDict(frozen=True)

    from_id: int | str | None = None
    from_chat_id: int | str | None = None


class ParsedUpdate(BaseModel):
    """An inbound update with its variant and routing context."""

    model_config = ConfigDict(frozen=True)

    update: dict[str, Any]
    kind: str | None = None
    context: UpdateContext = UpdateContext()


def read_update(body: bytes | str | None) -> dict[str, Any] | None:
    """Decode an inbound request body.

    Returns:
        The update as a dict, or None if the body is empty, not JSON, or not
        a JSON object.
    """
    if not body:
        return None
    try:
        decoded = json.loads(body)
    except ValueError:
        return None
    return decoded if isinstance(decoded, dict) and decoded else None


def _dig(data: Any, path: tuple[str, ...] | None) -> Any:
    if path is None:
        return None
    for key in path:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data


def parse_update(update: Mapping[str, Any] | bytes | str | None) -> ParsedUpdate | None:
    """Parse an update and extract its routing context.

    Args:
        update: The update as a mapping, or the raw JSON request body.

    Returns:
        A ParsedUpdate, or None for an empty or undecodable update. Updates
        of an unknown variant are returned with an empty context.
    """
    if isinstance(update, (bytes, str)):
        update = read_update(update)
    if not update:
        return None

    for kind, (chat_path, from_path) in _VARIANTS.items():
        payload = update.get(kind)
        if not payload:
            continue
        context = UpdateContext(
            from_id=_dig(payload, from_path),
            from_chat_id=_dig(payload, chat_path),
        )
        return ParsedUpdate(update=dict(update), kind=kind, context=context)

    return ParsedUpdate(update=dict(update))
