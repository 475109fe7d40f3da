"""Concurrent request engine for synchronous dispatch."""

import sys
import threading
from collections.abc import Hashable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from tgbot_sdk._internal.dispatch.params import encode_fields, open_files
from tgbot_sdk._internal.http import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_TIMEOUT,
    create_http_client,
)
from tgbot_sdk.exceptions import ApiError, EmptyResponseError, TelegramAPIError


class RawResult(BaseModel):
    """The outcome of one POST before it is resolved for the caller.

    `body` is the raw response text (None when no response arrived) and
    `error` holds the failure, if the request failed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    body: str | None = None
    status_code: int | None = None
    error: TelegramAPIError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ConcurrentDispatcher:
    """Issues a batch of POSTs concurrently and collects every outcome.

    One httpx.Client is created with the dispatcher and reused for every
    batch. Requests of a batch run on a bounded thread pool; completions are
    collected in any order and re-associated with their key. Only one batch
    is in flight at a time: `post_many()` holds a lock from start to collect.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        debug: bool = False,
    ) -> None:
        self._max_concurrency = max(1, max_concurrency)
        self._debug = debug
        self._lock = threading.Lock()
        self._client = create_http_client(
            timeout=timeout,
            base_url=base_url,
            max_connections=self._max_concurrency,
        )

    @property
    def timeout(self) -> float | None:
        return self._client.timeout.read

    def set_timeout(self, timeout: float) -> None:
        self._client.timeout = httpx.Timeout(timeout)

    def close(self) -> None:
        self._client.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[tgbot-sdk:engine] {message}", file=sys.stderr)

    def post_many(
        self,
        url: str,
        requests: Mapping[Hashable, Mapping[str, Any]],
    ) -> dict[Hashable, RawResult]:
        """POST every field mapping to the same URL concurrently.

        Every request is submitted before any is awaited. A failure in one
        request never affects the others.

        Args:
            url: Target URL, relative to the client base URL.
            requests: Field mappings keyed by their position or name.

        Returns:
            One RawResult per key, in the order of `requests`.
        """
        if not requests:
            return {}

        workers = min(self._max_concurrency, len(requests))
        collected: dict[Hashable, RawResult] = {}
        with self._lock, ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(self._post, url, fields): key
                for key, fields in requests.items()
            }
            for future in as_completed(futures):
                collected[futures[future]] = future.result()

        return {key: collected[key] for key in requests}

    def _post(self, url: str, fields: Mapping[str, Any]) -> RawResult:
        """Send one POST and capture its outcome instead of raising."""
        opened = []
        try:
            data, files = encode_fields(fields)
            parts, opened = open_files(files)
            response = self._client.post(url, data=data, files=parts or None)
        except httpx.TimeoutException as e:
            self._log_debug(f"Request timed out: {e}")
            return RawResult(error=EmptyResponseError(reason=f"timeout: {e}"))
        except httpx.HTTPError as e:
            self._log_debug(f"Request error: {e}")
            return RawResult(error=EmptyResponseError(reason=str(e)))
        except OSError as e:
            self._log_debug(f"Could not read upload: {e}")
            return RawResult(error=EmptyResponseError(reason=str(e)))
        except (TypeError, ValueError) as e:
            # e.g. a text-mode file handle, which httpx refuses to upload
            self._log_debug(f"Could not encode request: {e}")
            return RawResult(error=EmptyResponseError(reason=f"invalid field: {e}"))
        finally:
            for handle in opened:
                handle.close()

        body = response.text
        if not body:
            self._log_debug(f"Empty response with status {response.status_code}")
            return RawResult(
                status_code=response.status_code,
                error=EmptyResponseError(error_code=response.status_code),
            )
        if response.is_error:
            self._log_debug(f"Request failed with status {response.status_code}")
            return RawResult(
                body=body,
                status_code=response.status_code,
                error=ApiError.from_body(body, status_code=response.status_code),
            )
        return RawResult(body=body, status_code=response.status_code)
