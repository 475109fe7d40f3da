"""Internal modules for the Telegram Bot SDK.

WARNING: This package contains the request machinery behind TelegramClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch engine
    http - Shared HTTP client configuration
"""
