"""Envelope Intake - Parse the event JSON the host framework writes to stdin."""

import json
from dataclasses import dataclass, field

DEFAULT_EVENT_TYPE = "PostToolUse"

# Tools report the edited file under one of these keys
PATH_KEYS = ('file_path', 'filePath')


class InputError(Exception):
    """Raised when the envelope is not a JSON object."""
    pass


class MissingPathError(InputError):
    """Raised when the tool input carries no file path."""
    pass


@dataclass
class Envelope:
    """One triggering event."""
    file_path: str
    tool_name: str = ""
    tool_input: dict = field(default_factory=dict)
    session_id: str = ""
    event_type: str = DEFAULT_EVENT_TYPE
    raw: dict = field(default_factory=dict)


def _tool_input(data: dict) -> dict:
    tool_input = data.get('tool_input') or {}
    # Some hosts pass tool_input as an encoded JSON string
    if isinstance(tool_input, str):
        try:
            tool_input = json.loads(tool_input)
        except json.JSONDecodeError:
            raise InputError("tool_input is not valid JSON")
    if not isinstance(tool_input, dict):
        raise InputError("tool_input must be a JSON object")
    return tool_input


def parse_envelope(text: str | bytes) -> Envelope:
    """Parse stdin text (or raw stdin bytes) into an Envelope.

    Raises:
        InputError: text is not a UTF-8 encoded JSON object
        MissingPathError: neither file_path nor filePath is present
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputError(f"Invalid input encoding: {e}")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON input: {e}")
    if not isinstance(data, dict):
        raise InputError("Input must be a JSON object")

    tool_input = _tool_input(data)
    file_path = next((tool_input[k] for k in PATH_KEYS if tool_input.get(k)), None)
    if not isinstance(file_path, str) or not file_path:
        raise MissingPathError("No file path in tool_input (expected file_path or filePath)")

    return Envelope(
        file_path=file_path,
        tool_name=str(data.get('tool_name') or ""),
        tool_input=tool_input,
        session_id=str(data.get('session_id') or ""),
        event_type=str(data.get('hook_event_name') or DEFAULT_EVENT_TYPE),
        raw=data,
    )
