"""Event Log - Append-only record of every event the hook handles."""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path

from autocommit_hook.hook.envelope import Envelope
from autocommit_hook.output import print_warning

DEFAULT_LOG_FILENAME = ".autocommit-hook.log"


def build_event_record(envelope: Envelope, now: datetime | None = None) -> dict:
    """Summarize an envelope by its key names only; file contents never reach the log."""
    now = now or datetime.now(timezone.utc)
    return {
        "timestamp": now.isoformat(),
        "event_type": envelope.event_type,
        "tool_name": envelope.tool_name,
        "parameter_keys": list(envelope.tool_input.keys()),
        "session_id": envelope.session_id,
        "envelope_keys": list(envelope.raw.keys()),
    }


class EventLog(ABC):
    """Sink for event records. `path` is the backing file, if there is one."""

    path: Path | None = None

    @abstractmethod
    def record(self, entry: dict) -> None:
        pass


class FileEventLog(EventLog):
    """Appends pretty-printed JSON records separated by a blank line. Never reads or truncates."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def record(self, entry: dict) -> None:
        try:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(json.dumps(entry, indent=2) + "\n\n")
        except OSError as e:
            print_warning(f"Could not write event log {self.path}: {e}")


class MemoryEventLog(EventLog):
    """Keeps records in memory."""

    def __init__(self):
        self.records: list[dict] = []

    def record(self, entry: dict) -> None:
        self.records.append(entry)


class NullEventLog(EventLog):
    """Discards records."""

    def record(self, entry: dict) -> None:
        pass
