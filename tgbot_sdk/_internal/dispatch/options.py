"""Dispatch options: validation and merging over client defaults."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from tgbot_sdk.exceptions import InvalidOptionError

OPTION_KEYS = frozenset({"send_error", "run_in_background", "return"})


class OutputMode(str, Enum):
    """Shape in which a resolved response is handed back to the caller."""

    RESULT_MAP = "result_map"
    RESULT_OBJECT = "result_object"
    RAW_RESPONSE = "raw_response"
    RAW_RESPONSE_MAP = "raw_response_map"
    RAW_RESPONSE_OBJECT = "raw_response_object"


class DispatchOptions(BaseModel):
    """Effective options for one dispatch call.

    Fields:
        send_error: Report failed requests as Telegram messages.
        run_in_background: Launch detached requests and return without results.
        return_mode: Output shape, set through the `return` key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    send_error: StrictBool = True
    run_in_background: StrictBool = False
    return_mode: OutputMode = Field(default=OutputMode.RESULT_MAP, alias="return")


class _OptionOverrides(BaseModel):
    """Per-call overrides; every key is optional, unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    send_error: StrictBool | None = None
    run_in_background: StrictBool | None = None
    return_mode: OutputMode | None = Field(default=None, alias="return")


# Anything send_method() accepts as options
Options = Mapping[str, Any] | DispatchOptions | None


def validate_options(options: Options) -> dict[str, Any]:
    """Validate an override set without merging it.

    Args:
        options: Mapping using the keys `send_error`, `run_in_background` and
            `return`. `None` counts as an empty mapping.

    Returns:
        The validated overrides, keyed by `DispatchOptions` field name.

    Raises:
        InvalidOptionError: If a key is unknown, a flag is not a bool, or
            `return` is not one of the `OutputMode` values.
    """
    if options is None:
        return {}
    if isinstance(options, DispatchOptions):
        return options.model_dump()
    if not isinstance(options, Mapping):
        raise InvalidOptionError(f"Invalid options: expected a mapping, got {type(options).__name__}.")

    for key, value in options.items():
        if key not in OPTION_KEYS:
            raise InvalidOptionError(f"Invalid option {key!r}.")
        if value is None:
            raise InvalidOptionError(f"Invalid {key} option.")

    try:
        overrides = _OptionOverrides.model_validate(dict(options))
    except ValidationError as e:
        bad = e.errors()[0]["loc"][0] if e.errors() else "options"
        raise InvalidOptionError(f"Invalid {bad} option.") from e
    return overrides.model_dump(exclude_unset=True)


def resolve_options(
    options: Options,
    defaults: DispatchOptions,
) -> DispatchOptions:
    """Merge validated overrides over the client defaults.

    Args:
        options: Per-call overrides, validated before anything is merged.
        defaults: The client's stored defaults.

    Returns:
        The effective DispatchOptions for the call.
    """
    overrides = validate_options(options)
    return defaults.model_copy(update=overrides)
