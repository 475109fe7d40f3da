"""Turn raw response bodies into the shape the caller asked for."""

import json
from types import SimpleNamespace
from typing import Any, Literal

from tgbot_sdk._internal.dispatch.options import OutputMode


def _decode_map(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return None


def _decode_object(body: str) -> Any:
    try:
        return json.loads(body, object_hook=lambda d: SimpleNamespace(**d))
    except ValueError:
        return None


def resolve_response(body: str | None, mode: OutputMode) -> Any | Literal[False]:
    """Resolve one raw response body according to an OutputMode.

    | mode                | result                                           |
    |---------------------|--------------------------------------------------|
    | raw_response        | the body string                                  |
    | raw_response_map    | decoded JSON object as a dict                    |
    | raw_response_object | decoded JSON object as a SimpleNamespace tree    |
    | result_map          | the `result` field, with dicts                   |
    | result_object       | the `result` field, with SimpleNamespace objects |

    A missing or empty body resolves to False in every mode. Decoding
    failures resolve to False, and so do `result_*` modes when `ok` is falsy
    or `result` is empty.

    Args:
        body: The raw response body, or None when no response arrived.
        mode: Requested output shape.

    Returns:
        The resolved value, or False.
    """
    if not body:
        return False

    if mode is OutputMode.RAW_RESPONSE:
        return body

    if mode is OutputMode.RAW_RESPONSE_MAP:
        decoded = _decode_map(body)
        return decoded if isinstance(decoded, dict) else False

    if mode is OutputMode.RAW_RESPONSE_OBJECT:
        decoded = _decode_object(body)
        return decoded if isinstance(decoded, SimpleNamespace) else False

    if mode is OutputMode.RESULT_MAP:
        decoded = _decode_map(body)
        if not isinstance(decoded, dict) or not decoded.get("ok") or not decoded.get("result"):
            return False
        return decoded["result"]

    # OutputMode.RESULT_OBJECT
    decoded = _decode_object(body)
    if (
        not isinstance(decoded, SimpleNamespace)
        or not getattr(decoded, "ok", False)
        or not getattr(decoded, "result", None)
    ):
        return False
    return decoded.result
