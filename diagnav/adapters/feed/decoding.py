"""Decode the JSON snapshot wire format into core domain models.

Accepted shapes: a top-level list of messages, or an object with a
"messages" list. Field names follow the upstream camelCase convention
(filePath, providerName).
"""

import json
from typing import Any

from diagnav.core.models import (
    DiagnosticMessage,
    DiagnosticScope,
    MessageType,
    Point,
    Range,
    Snapshot,
    Trace,
)


class SnapshotDecodeError(ValueError):
    """Raised when a snapshot payload cannot be decoded."""


def _decode_point(data: Any, where: str) -> Point:
    if not isinstance(data, dict):
        raise SnapshotDecodeError(f"{where}: expected an object, got {type(data).__name__}")
    row = data.get("row")
    column = data.get("column")
    if not isinstance(row, int) or not isinstance(column, int):
        raise SnapshotDecodeError(f"{where}: row and column must be integers")
    return Point(row=row, column=column)


def _decode_range(data: Any, where: str) -> Range | None:
    if data is None:
        return None
    if not isinstance(data, dict) or "start" not in data:
        raise SnapshotDecodeError(f"{where}: range must be an object with a start point")
    start = _decode_point(data["start"], f"{where}.start")
    end_data = data.get("end")
    end = start if end_data is None else _decode_point(end_data, f"{where}.end")
    return Range(start=start, end=end)


def _decode_trace(data: Any, where: str) -> Trace:
    if not isinstance(data, dict):
        raise SnapshotDecodeError(f"{where}: trace must be an object")
    return Trace(
        file_path=data.get("filePath"),
        range=_decode_range(data.get("range"), f"{where}.range"),
        text=data.get("text"),
    )


def decode_message(data: Any, where: str = "message") -> DiagnosticMessage:
    """Decode a single diagnostic message.

    Raises:
        SnapshotDecodeError: If the payload is malformed.
    """
    if not isinstance(data, dict):
        raise SnapshotDecodeError(f"{where}: expected an object, got {type(data).__name__}")

    try:
        scope = DiagnosticScope(data.get("scope", "file"))
    except ValueError as e:
        raise SnapshotDecodeError(f"{where}: unknown scope {data.get('scope')!r}") from e

    try:
        message_type = MessageType(data.get("type", "Error"))
    except ValueError as e:
        raise SnapshotDecodeError(f"{where}: unknown type {data.get('type')!r}") from e

    raw_traces = data.get("trace") or []
    if not isinstance(raw_traces, list):
        raise SnapshotDecodeError(f"{where}.trace: expected a list")

    try:
        return DiagnosticMessage(
            scope=scope,
            file_path=data.get("filePath"),
            range=_decode_range(data.get("range"), f"{where}.range"),
            trace=tuple(
                _decode_trace(trace, f"{where}.trace[{i}]")
                for i, trace in enumerate(raw_traces)
            ),
            provider_name=data.get("providerName") or "",
            type=message_type,
            text=data.get("text"),
        )
    except SnapshotDecodeError:
        raise
    except ValueError as e:
        raise SnapshotDecodeError(f"{where}: {e}") from e


def decode_snapshot(payload: Any) -> Snapshot:
    """Decode an already-parsed JSON payload into a snapshot.

    Raises:
        SnapshotDecodeError: If the payload or any message is malformed.
    """
    if isinstance(payload, dict):
        payload = payload.get("messages")
    if not isinstance(payload, list):
        raise SnapshotDecodeError("snapshot must be a list of messages")
    return tuple(decode_message(item, f"messages[{i}]") for i, item in enumerate(payload))


def parse_snapshot(text: str) -> Snapshot:
    """Parse JSON text into a snapshot. Blank text is an empty snapshot.

    Raises:
        SnapshotDecodeError: If the text is not valid JSON or is malformed.
    """
    if not text.strip():
        return ()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotDecodeError(f"invalid JSON: {e}") from e
    return decode_snapshot(payload)
