"""Hook Pipeline Package"""

from autocommit_hook.hook.commit_hook import CommitHook, fallback_message, truncate_message
from autocommit_hook.hook.envelope import Envelope, InputError, MissingPathError, parse_envelope
from autocommit_hook.hook.events import (
    DEFAULT_LOG_FILENAME,
    EventLog,
    FileEventLog,
    MemoryEventLog,
    NullEventLog,
    build_event_record,
)
from autocommit_hook.hook.exclusion import glob_to_regex, is_excluded
from autocommit_hook.hook.gating import GateOutcome, branch_restricted, nothing_to_commit
from autocommit_hook.hook.result import HookDecision, HookResult, emit_result

__all__ = [
    "CommitHook",
    "fallback_message",
    "truncate_message",
    "Envelope",
    "InputError",
    "MissingPathError",
    "parse_envelope",
    "EventLog",
    "FileEventLog",
    "MemoryEventLog",
    "NullEventLog",
    "DEFAULT_LOG_FILENAME",
    "build_event_record",
    "glob_to_regex",
    "is_excluded",
    "GateOutcome",
    "branch_restricted",
    "nothing_to_commit",
    "HookDecision",
    "HookResult",
    "emit_result",
]
