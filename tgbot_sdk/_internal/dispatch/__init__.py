"""Request dispatch engine behind TelegramClient.send_method().

WARNING: This is an internal module. Use TelegramClient instead.
"""

from tgbot_sdk._internal.dispatch.background import BackgroundExecutor, build_curl_command
from tgbot_sdk._internal.dispatch.engine import ConcurrentDispatcher, RawResult
from tgbot_sdk._internal.dispatch.options import (
    DispatchOptions,
    OutputMode,
    resolve_options,
    validate_options,
)
from tgbot_sdk._internal.dispatch.params import (
    Batched,
    Flat,
    InputFile,
    classify_parameters,
)
from tgbot_sdk._internal.dispatch.resolver import resolve_response

__all__ = [
    "BackgroundExecutor",
    "build_curl_command",
    "ConcurrentDispatcher",
    "RawResult",
    "DispatchOptions",
    "OutputMode",
    "resolve_options",
    "validate_options",
    "Batched",
    "Flat",
    "InputFile",
    "classify_parameters",
    "resolve_response",
]
