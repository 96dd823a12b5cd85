"""Prompt Builder - Construct the generation prompt from git state."""

from dataclasses import dataclass

from autocommit_hook import DEFAULT_COMMIT_PROMPT

# Linux caps a single argv string at 128 KiB; the prompt travels as one argument
DEFAULT_MAX_DIFF_BYTES = 100_000


@dataclass
class PromptConfig:
    """Settings that shape the prompt."""
    instructions: str = DEFAULT_COMMIT_PROMPT
    max_diff_bytes: int = DEFAULT_MAX_DIFF_BYTES


class PromptBuilder:
    """Concatenates instructions, short status and staged diff into one prompt."""

    def build(self, status: str, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            config.instructions.strip(),
            self._build_status_section(status),
            self._build_diff_section(diff, config.max_diff_bytes),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_status_section(self, status: str) -> str:
        status = status.strip()
        if not status:
            return ""
        return f"Git status:\n{status}"

    def _build_diff_section(self, diff: str, max_bytes: int) -> str:
        diff = diff.strip()
        if not diff:
            return ""
        encoded = diff.encode('utf-8')
        if len(encoded) > max_bytes:
            # Cutting mid-character leaves a partial sequence; drop it
            diff = encoded[:max_bytes].decode('utf-8', errors='ignore').rstrip()
            diff += "\n\n(Note: diff truncated due to size)"
        return f"Staged diff:\n{diff}"
