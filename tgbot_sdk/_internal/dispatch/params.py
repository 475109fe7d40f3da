"""Parameter sets for dispatch: single invocations, batches and uploads.

A parameter set is either one mapping of field name to value (`Flat`) or a
keyed collection of such mappings (`Batched`). Callers can build either one
explicitly; `classify_parameters()` infers the shape from plain dicts and lists.
"""

import json
from collections.abc import Hashable, Mapping, Sequence
from pathlib import Path
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tgbot_sdk.exceptions import InvalidShapeError

# Value kinds that can be sent as a plain form field
SCALAR_TYPES = (bool, str, int, float)

# =============================================================================
# Models
# =============================================================================


class InputFile(BaseModel):
    """A local file uploaded as a multipart form part."""

    model_config = ConfigDict(frozen=True)

    path: Path
    filename: str | None = None
    mime_type: str | None = None

    @property
    def upload_name(self) -> str:
        return self.filename or self.path.name


class Flat(BaseModel):
    """A single invocation: one mapping of field name to value."""

    model_config = ConfigDict(frozen=True)

    params: dict[str, Any] = Field(default_factory=dict)

    def items(self) -> dict[Hashable, dict[str, Any]]:
        return {0: self.params}


class Batched(BaseModel):
    """Several invocations of the same method, keyed by position or name."""

    model_config = ConfigDict(frozen=True)

    entries: dict[Any, dict[str, Any]] = Field(default_factory=dict)

    @classmethod
    def of(cls, parameters: Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]]) -> "Batched":
        """Build a batch from a list of mappings or a mapping of mappings.

        List positions become keys; mapping keys are kept as they are.
        """
        if isinstance(parameters, Mapping):
            pairs = parameters.items()
        else:
            pairs = enumerate(parameters)
        entries: dict[Hashable, dict[str, Any]] = {}
        for key, fields in pairs:
            if not isinstance(fields, Mapping):
                raise InvalidShapeError(f"Batch entry {key!r} is not a mapping.")
            entries[key] = dict(fields)
        try:
            return cls(entries=entries)
        except ValidationError as e:
            raise InvalidShapeError("Invalid batch: field names must be strings.") from e

    def items(self) -> dict[Hashable, dict[str, Any]]:
        return self.entries


ParameterSet = Flat | Batched

# Anything send_method() accepts as parameters
Parameters = Flat | Batched | Mapping[Any, Any] | Sequence[Mapping[str, Any]] | None

# =============================================================================
# Shape classification
# =============================================================================


def _is_container(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
    )


def _first(container: Any) -> Any:
    values = container.values() if isinstance(container, Mapping) else container
    return next(iter(values), None)


def nesting_depth(value: Any) -> int:
    """Return how deeply containers nest, following the first element only.

    Scalars have depth 0, a flat mapping or list has depth 1, a list of
    mappings has depth 2, and so on. Only the first element of each level is
    inspected; the remaining elements are assumed to have the same shape.
    """
    if not _is_container(value):
        return 0
    first = _first(value)
    if _is_container(first):
        return nesting_depth(first) + 1
    return 1


def classify_parameters(parameters: Any) -> ParameterSet:
    """Decide whether a parameter set is one invocation or a batch.

    Args:
        parameters: A `Flat`, a `Batched`, `None`, a mapping of fields, a
            list of such mappings, or a mapping of such mappings.

    Returns:
        A `Flat` or `Batched` parameter set.

    Raises:
        InvalidShapeError: If the nesting depth is 0 or greater than 2, or the
            top level is a list of scalars.
    """
    if isinstance(parameters, (Flat, Batched)):
        return parameters
    if parameters is None:
        return Flat()

    depth = nesting_depth(parameters)
    if depth == 1 and isinstance(parameters, Mapping):
        try:
            return Flat(params=dict(parameters))
        except ValidationError as e:
            raise InvalidShapeError("Invalid parameters: field names must be strings.") from e
    if depth == 1 and not parameters:
        # An empty list is a batch with nothing in it
        return Batched()
    if depth == 2 and isinstance(_first(parameters), Mapping):
        return Batched.of(parameters)
    raise InvalidShapeError(f"Invalid parameters (nesting depth {depth}).")


# =============================================================================
# Field encoding
# =============================================================================


def encode_scalar(value: bool | str | int | float) -> str:
    """Encode a scalar the way the Bot API expects it in a form field."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_fields(
    fields: Mapping[str, Any],
) -> tuple[dict[str, str], dict[str, tuple[str, Any] | tuple[str, Any, str]]]:
    """Split a field mapping into form data and multipart file parts.

    `None` values are dropped, mappings and lists are sent as JSON, and
    `InputFile` values, raw bytes or open binary files become file parts.
    File parts for `InputFile` hold the path; `open_files()` turns them into
    handles.

    Returns:
        A `(data, files)` pair suitable for `httpx.Client.post()`.
    """
    data: dict[str, str] = {}
    files: dict[str, tuple[str, Any] | tuple[str, Any, str]] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, InputFile):
            if value.mime_type:
                files[key] = (value.upload_name, value.path, value.mime_type)
            else:
                files[key] = (value.upload_name, value.path)
        elif isinstance(value, SCALAR_TYPES):
            data[key] = encode_scalar(value)
        elif isinstance(value, (Mapping, list, tuple)):
            data[key] = json.dumps(value, ensure_ascii=False, default=_json_default)
        elif isinstance(value, (bytes, bytearray)):
            files[key] = (key, bytes(value))
        elif hasattr(value, "read"):
            files[key] = (Path(str(getattr(value, "name", key))).name, value)
        else:
            data[key] = str(value)
    return data, files


def open_files(
    files: Mapping[str, tuple[str, Any] | tuple[str, Any, str]],
) -> tuple[dict[str, tuple[Any, ...]], list[IO[bytes]]]:
    """Replace `InputFile` paths with open handles.

    Returns:
        The file parts ready for httpx and the handles the caller must close.
    """
    opened: list[IO[bytes]] = []
    parts: dict[str, tuple[Any, ...]] = {}
    try:
        for key, (name, source, *rest) in files.items():
            if isinstance(source, Path):
                handle = source.open("rb")
                opened.append(handle)
                source = handle
            parts[key] = (name, source, *rest)
    except OSError:
        for handle in opened:
            handle.close()
        raise
    return parts, opened


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return str(value)
