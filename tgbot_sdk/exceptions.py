"""Public exceptions for the Telegram Bot SDK."""

import json
from typing import Any


class TelegramError(Exception):
    """Base exception for all Telegram Bot SDK errors."""


class TelegramConfigError(TelegramError):
    """Configuration error (missing token, invalid client settings)."""


class TelegramValidationError(TelegramError):
    """Validation error raised before any request is sent."""


class InvalidShapeError(TelegramValidationError):
    """Parameters are neither a single mapping nor a batch of mappings."""


class InvalidOptionError(TelegramValidationError):
    """Unknown option key or an option value outside its domain."""


class TelegramAPIError(TelegramError):
    """Error from the Telegram Bot API for a single request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(TelegramAPIError):
    """The API answered with a body, but flagged the request as failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        body: str = "",
        error_code: int | None = None,
        description: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body
        self.error_code = error_code
        self.description = description

    @classmethod
    def from_body(cls, body: str, status_code: int | None = None) -> "ApiError":
        """Build an ApiError from a raw response body.

        Args:
            body: The raw response body.
            status_code: HTTP status of the response.

        Returns:
            An ApiError with `error_code` and `description` filled in when
            the body is a JSON object.
        """
        decoded: Any
        try:
            decoded = json.loads(body)
        except ValueError:
            decoded = None

        if isinstance(decoded, dict):
            return cls(
                json.dumps(decoded, indent=2, ensure_ascii=False),
                status_code=status_code,
                body=body,
                error_code=decoded.get("error_code"),
                description=decoded.get("description"),
            )
        return cls(body, status_code=status_code, body=body)


class EmptyResponseError(TelegramAPIError):
    """No response body was received (empty body, timeout or network error)."""

    def __init__(
        self,
        message: str = "Response is empty!",
        error_code: int | None = None,
        *,
        reason: str | None = None,
    ) -> None:
        super().__init__(message, status_code=error_code)
        self.error_code = error_code
        self.reason = reason
