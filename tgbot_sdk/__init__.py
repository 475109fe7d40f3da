"""Telegram Bot SDK for Python.

Public API:
    TelegramClient - Bot API client (single calls, batches, background calls)
    Flat, Batched, InputFile - Explicit parameter sets and file uploads
    OutputMode, DispatchOptions - Response shapes and call options
    parse_update, UpdateContext - Inbound update parsing

Helpers:
    keyboards - reply_markup serialization
    webhook - Telegram source-IP check
"""

from tgbot_sdk._internal.dispatch.options import DispatchOptions, OutputMode
from tgbot_sdk._internal.dispatch.params import Batched, Flat, InputFile
from tgbot_sdk._version import __version__
from tgbot_sdk.client import TelegramClient, get_client
from tgbot_sdk.updates import ParsedUpdate, UpdateContext, parse_update, read_update

__all__ = [
    "__version__",
    "TelegramClient",
    "get_client",
    "Flat",
    "Batched",
    "InputFile",
    "OutputMode",
    "DispatchOptions",
    "ParsedUpdate",
    "UpdateContext",
    "parse_update",
    "read_update",
]
