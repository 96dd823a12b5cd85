"""Generation Base Classes and Shared Code"""

import json
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

AGENT_MESSAGE_TYPE = "agent_message"


def iter_json_records(output: str) -> Iterator[dict]:
    """Yield each line of output that parses as a JSON object.

    Lines that aren't JSON (progress output, banners, framing) are skipped.
    """
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(record, dict):
            yield record


def _agent_message(record: dict) -> str | None:
    """The message text if the record is shaped {msg: {type: agent_message, message: str}}."""
    msg = record.get("msg")
    if not isinstance(msg, dict) or msg.get("type") != AGENT_MESSAGE_TYPE:
        return None
    message = msg.get("message")
    return message if isinstance(message, str) else None


def extract_agent_message(output: str) -> str | None:
    """First agent message in line-delimited JSON output, trimmed. None if there isn't one."""
    messages = (_agent_message(record) for record in iter_json_records(output))
    found = next((m for m in messages if m is not None), None)
    return found.strip() if found is not None else None


@dataclass
class GeneratedMessage:
    """Structured response from a generation backend."""
    content: str
    backend: str = ""


class GenerationError(Exception):
    """Raised when commit message generation fails."""
    pass


class MessageGenerator(ABC):
    """Abstract base for commit message generators."""

    @abstractmethod
    def generate(self, prompt: str) -> GeneratedMessage:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
