"""Message Generation Package"""

from autocommit_hook.llm.base import (
    GeneratedMessage,
    GenerationError,
    MessageGenerator,
    extract_agent_message,
    iter_json_records,
)
from autocommit_hook.llm.codex import CodexGenerator

__all__ = [
    "GeneratedMessage",
    "GenerationError",
    "MessageGenerator",
    "CodexGenerator",
    "extract_agent_message",
    "iter_json_records",
]
