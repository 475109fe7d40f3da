"""Fire-and-forget dispatch through detached curl processes."""

import subprocess
import sys
from collections.abc import Mapping
from typing import Any

from tgbot_sdk._internal.dispatch.params import SCALAR_TYPES, InputFile, encode_scalar

CURL_BINARY = "curl"


class UnsupportedFieldError(TypeError):
    """A field value cannot be expressed as a curl form argument."""


def build_curl_command(
    url: str,
    fields: Mapping[str, Any],
    *,
    timeout: float,
    curl_binary: str = CURL_BINARY,
) -> list[str]:
    """Build the argument list for one detached curl POST.

    Scalars are URL-encoded form fields. When any field is an InputFile the
    whole request becomes multipart: scalars are sent with `--form-string` and
    files with `--form key=@path`. `None` and empty-string fields are skipped.

    Args:
        url: Absolute request URL.
        fields: Field mapping for this request.
        timeout: Maximum request time in seconds.
        curl_binary: Name or path of the curl executable.

    Returns:
        The command as an argument list (no shell involved).

    Raises:
        UnsupportedFieldError: If a value is not a bool, str, number or InputFile.
    """
    multipart = any(isinstance(value, InputFile) for value in fields.values())
    cmd = [curl_binary, "--silent", "--max-time", f"{timeout:g}"]

    for key, value in fields.items():
        if value is None or value == "":
            continue
        if isinstance(value, InputFile):
            part = f"{key}=@{value.path}"
            if value.filename:
                part += f";filename={value.filename}"
            if value.mime_type:
                part += f";type={value.mime_type}"
            cmd += ["--form", part]
        elif isinstance(value, SCALAR_TYPES):
            flag = "--form-string" if multipart else "--data-urlencode"
            cmd += [flag, f"{key}={encode_scalar(value)}"]
        else:
            raise UnsupportedFieldError(
                f"Field {key!r} has unsupported type {type(value).__name__}"
            )

    cmd.append(url)
    return cmd


class BackgroundExecutor:
    """Launches one detached curl process per request and never waits on it.

    The process output is discarded and its exit status is never collected.
    A True result only means the process was started.
    """

    def __init__(self, *, curl_binary: str = CURL_BINARY, debug: bool = False) -> None:
        self._curl_binary = curl_binary
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[tgbot-sdk:background] {message}", file=sys.stderr)

    def launch(self, url: str, fields: Mapping[str, Any], *, timeout: float) -> bool:
        """Start a detached POST for one field mapping.

        Args:
            url: Absolute request URL.
            fields: Field mapping for this request.
            timeout: Maximum request time in seconds.

        Returns:
            True if the process was launched, False if a field had an
            unsupported value kind or the process could not be started.
        """
        try:
            cmd = build_curl_command(url, fields, timeout=timeout, curl_binary=self._curl_binary)
        except UnsupportedFieldError as e:
            self._log_debug(f"Not launched: {e}")
            return False

        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            self._log_debug(f"Launch failed: {e}")
            return False
        return True

    def launch_many(
        self,
        url: str,
        requests: Mapping[Any, Mapping[str, Any]],
        *,
        timeout: float,
    ) -> dict[Any, bool]:
        """Launch every request and report, per key, whether it started."""
        return {key: self.launch(url, fields, timeout=timeout) for key, fields in requests.items()}
