"""Diagnostic messages for failed requests and where to send them."""

from tgbot_sdk.exceptions import ApiError, EmptyResponseError, TelegramAPIError
from tgbot_sdk.updates import UpdateContext

# Telegram rejects messages longer than this
MESSAGE_MAX_LENGTH = 4096


def error_message(error: TelegramAPIError) -> str:
    """Render a request failure as the text of a diagnostic message."""
    if isinstance(error, EmptyResponseError):
        text = str(error)
        if error.reason:
            text += f"\nReason: {error.reason}"
        if error.error_code is not None:
            text += f"\nCode: {error.error_code}"
    elif isinstance(error, ApiError):
        text = str(error) or error.body
    else:
        text = str(error)

    if len(text) > MESSAGE_MAX_LENGTH:
        text = text[: MESSAGE_MAX_LENGTH - 3] + "..."
    return text


def error_targets(
    context: UpdateContext | None,
    error_chat_id: int | str | None,
) -> list[int | str]:
    """Pick the chats a diagnostic message goes to.

    The chat of the current update comes first (or its sender, when the update
    has no chat). The configured error chat is added when it is a different one.
    """
    targets: list[int | str] = []
    if context is not None:
        if context.from_chat_id is not None:
            targets.append(context.from_chat_id)
        elif context.from_id is not None:
            targets.append(context.from_id)

    if error_chat_id is not None and not _same_chat(error_chat_id, context):
        targets.append(error_chat_id)
    return targets


def _same_chat(chat_id: int | str, context: UpdateContext | None) -> bool:
    if context is None:
        return False
    known = {str(context.from_chat_id), str(context.from_id)}
    return str(chat_id) in known
