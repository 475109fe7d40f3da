"""Telegram Bot API client."""

import os
import sys
from typing import Any

from tgbot_sdk._internal.dispatch.background import BackgroundExecutor
from tgbot_sdk._internal.dispatch.engine import ConcurrentDispatcher
from tgbot_sdk._internal.dispatch.escalation import error_message, error_targets
from tgbot_sdk._internal.dispatch.options import (
    DispatchOptions,
    Options,
    resolve_options,
    validate_options,
)
from tgbot_sdk._internal.dispatch.params import Batched, Parameters, classify_parameters
from tgbot_sdk._internal.dispatch.resolver import resolve_response
from tgbot_sdk._internal.http import DEFAULT_API_URL, DEFAULT_MAX_CONCURRENCY, DEFAULT_TIMEOUT
from tgbot_sdk.exceptions import TelegramAPIError, TelegramConfigError
from tgbot_sdk.methods import BotMethodsMixin
from tgbot_sdk.updates import UpdateContext

DIAGNOSTIC_METHOD = "sendMessage"


class TelegramClient(BotMethodsMixin):
    """Client for the Telegram Bot API.

    Every method call goes through `send_method()`, which accepts a single
    parameter mapping or a batch of them. Synchronous calls run the whole batch
    concurrently and return resolved values; background calls launch detached
    processes and return right away.

    Failed requests can be reported as Telegram messages (`send_error`
    option). Reports go to the chat of the update passed as `context` and to
    `error_chat_id`, and a failing report is never reported again.

    Use `TelegramClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        error_chat_id: int | str | None = None,
        default_options: Options = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        api_url: str = DEFAULT_API_URL,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            token: Bot token issued by @BotFather.
            error_chat_id: Chat that receives failure reports, or None.
            default_options: Defaults for `send_error`, `run_in_background`
                and `return`, validated like per-call options.
            timeout: Request timeout in seconds.
            max_concurrency: Maximum requests of one batch in flight at once.
            api_url: Base URL of the Bot API server.
            debug: Enable debug logging to stderr.

        Raises:
            InvalidOptionError: If `default_options` is invalid.
        """
        self._token = token
        self._error_chat_id = error_chat_id
        self._default_options = DispatchOptions().model_copy(
            update=validate_options(default_options)
        )
        self._timeout = timeout
        self._api_url = api_url.rstrip("/")
        self._debug = debug
        self._engine = ConcurrentDispatcher(
            base_url=self._api_url,
            timeout=timeout,
            max_concurrency=max_concurrency,
            debug=debug,
        )
        self._background = BackgroundExecutor(debug=debug)

    @classmethod
    def from_env(cls) -> "TelegramClient":
        """Create a client from environment variables.

        Environment variables:
            TELEGRAM_BOT_TOKEN: The bot token.
            TELEGRAM_ERROR_CHAT_ID: Chat that receives failure reports.
            TELEGRAM_TIMEOUT: Request timeout in seconds.
            TELEGRAM_MAX_CONCURRENCY: Maximum requests of one batch in flight.
            TELEGRAM_API_URL: Base URL of the Bot API server.
            TELEGRAM_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured TelegramClient. Without a token the client is created,
            but every request raises TelegramConfigError.
        """
        token = os.environ.get("TELEGRAM_BOT_TOKEN") or None
        error_chat_id = os.environ.get("TELEGRAM_ERROR_CHAT_ID") or None

        debug = os.environ.get("TELEGRAM_DEBUG", "") == "1"
        timeout = int(os.environ.get("TELEGRAM_TIMEOUT", str(int(DEFAULT_TIMEOUT))))
        max_concurrency = int(
            os.environ.get("TELEGRAM_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY))
        )
        api_url = os.environ.get("TELEGRAM_API_URL") or DEFAULT_API_URL

        return cls(
            token,
            error_chat_id=error_chat_id,
            timeout=timeout,
            max_concurrency=max_concurrency,
            api_url=api_url,
            debug=debug,
        )

    def __enter__(self) -> "TelegramClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._engine.close()

    @property
    def bot_id(self) -> str | None:
        """The bot's numeric ID (the token part before the colon)."""
        if not self._token:
            return None
        return self._token.split(":", 1)[0]

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def default_options(self) -> DispatchOptions:
        return self._default_options

    def set_timeout(self, timeout: float) -> "TelegramClient":
        """Change the per-request timeout for later calls.

        Returns:
            The client itself, so calls can be chained.
        """
        self._timeout = timeout
        self._engine.set_timeout(timeout)
        return self

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[tgbot-sdk] {message}", file=sys.stderr)

    def _method_path(self, method_name: str) -> str:
        return f"/bot{self._token}/{method_name}"

    def send_method(
        self,
        method_name: str,
        parameters: Parameters = None,
        options: Options = None,
        *,
        context: UpdateContext | None = None,
    ) -> Any:
        """Call a Bot API method once or for a whole batch of parameter sets.

        Args:
            method_name: Bot API method name, e.g. "sendMessage".
            parameters: One mapping of fields, a list of mappings, a mapping
                of mappings, or an explicit `Flat` / `Batched`.
            options: Per-call overrides for `send_error`, `run_in_background`
                and `return`.
            context: Routing context from `parse_update()`, used to send
                failure reports to the chat the update came from.

        Returns:
            For a single parameter mapping, the resolved value (False on
            failure). For a batch, a dict of resolved values keyed like the
            input. In background mode the values are launch flags.

        Raises:
            TelegramConfigError: If the client has no token.
            InvalidOptionError: If `options` has an unknown key or bad value.
            InvalidShapeError: If `parameters` is not a mapping or a batch of them.
        """
        if not self._token:
            raise TelegramConfigError("Token is empty.")

        effective = resolve_options(options, self._default_options)
        parameter_set = classify_parameters(parameters)
        requests = parameter_set.items()
        batched = isinstance(parameter_set, Batched)

        self._log_debug(
            f"Dispatching {method_name} ({len(requests)} request(s), "
            f"background={effective.run_in_background})"
        )

        if effective.run_in_background:
            launched = self._background.launch_many(
                self._api_url + self._method_path(method_name),
                requests,
                timeout=self._timeout,
            )
            return launched if batched else launched[0]

        raw_results = self._engine.post_many(self._method_path(method_name), requests)

        resolved: dict[Any, Any] = {}
        for key, raw in raw_results.items():
            if raw.error is not None and effective.send_error:
                self._escalate(raw.error, context)
            resolved[key] = resolve_response(raw.body, effective.return_mode)

        return resolved if batched else resolved[0]

    def report_error(
        self,
        message: str,
        error_code: int | None = None,
        *,
        context: UpdateContext | None = None,
    ) -> bool:
        """Send a failure report to the update's chat and the error chat.

        Args:
            message: Report text.
            error_code: Optional code appended to the text.
            context: Routing context from `parse_update()`.

        Returns:
            True if every report was delivered, False otherwise.
        """
        if error_code is not None:
            message += f"\nCode: {error_code}"
        return self._deliver(message, context)

    def _escalate(self, error: TelegramAPIError, context: UpdateContext | None) -> None:
        self._deliver(error_message(error), context)

    def _deliver(self, text: str, context: UpdateContext | None) -> bool:
        delivered = True
        for chat_id in error_targets(context, self._error_chat_id):
            delivered = self._notify(chat_id, text) and delivered
        return delivered

    def _notify(self, chat_id: int | str, text: str) -> bool:
        """Send one diagnostic message.

        The message goes through the same engine as regular calls but is
        never resolved or reported again: a failure here is dropped.
        """
        if not self._token:
            return False
        try:
            raw = self._engine.post_many(
                self._method_path(DIAGNOSTIC_METHOD),
                {0: {"chat_id": chat_id, "text": text}},
            )[0]
        except Exception:
            return False
        return raw.error is None


def get_client() -> TelegramClient:
    """Get a client configured from environment variables.

    Returns:
        A configured TelegramClient instance.
    """
    return TelegramClient.from_env()
