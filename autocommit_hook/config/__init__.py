"""Configuration Management Package"""

import json
import re
import sys
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from autocommit_hook import DEFAULT_COMMIT_PROMPT, DEFAULT_EXCLUDE_PATTERNS
from autocommit_hook.llm import CodexGenerator
from autocommit_hook.prompts import DEFAULT_MAX_DIFF_BYTES

# Below this, "..." leaves no room for any of the message
MIN_MESSAGE_LENGTH = 4

# Hook settings files written for the host framework use camelCase
KEY_ALIASES = {
    "excludePatterns": "exclude_patterns",
    "skipEmptyCommits": "skip_empty_commits",
    "addAllFiles": "add_all_files",
    "branchRestrictions": "branch_restrictions",
    "maxCommitMessageLength": "max_commit_message_length",
    "commitPrompt": "commit_prompt",
    "generatorCommand": "generator_command",
    "generatorArgs": "generator_args",
    "maxDiffBytes": "max_diff_bytes",
    "blockOnCommitFailure": "block_on_commit_failure",
}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def _is_regex(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        re.compile(value)
    except re.error:
        return False
    return True


# field -> (check, description used in warnings)
VALIDATORS = {
    "enabled": (lambda v: isinstance(v, bool), "a boolean"),
    "matcher": (_is_regex, "a regular expression"),
    "timeout": (lambda v: _is_int(v) and v > 0, "a positive integer"),
    "exclude_patterns": (_is_str_list, "a list of glob patterns"),
    "skip_empty_commits": (lambda v: isinstance(v, bool), "a boolean"),
    "add_all_files": (lambda v: isinstance(v, bool), "a boolean"),
    "branch_restrictions": (_is_str_list, "a list of branch names"),
    "max_commit_message_length": (lambda v: _is_int(v) and v >= MIN_MESSAGE_LENGTH, f"an integer >= {MIN_MESSAGE_LENGTH}"),
    "commit_prompt": (lambda v: isinstance(v, str) and bool(v.strip()), "non-empty text"),
    "generator_command": (lambda v: isinstance(v, str) and bool(v.strip()), "a command name"),
    "generator_args": (_is_str_list, "a list of arguments"),
    "max_diff_bytes": (lambda v: _is_int(v) and v > 0, "a positive integer"),
    "block_on_commit_failure": (lambda v: isinstance(v, bool), "a boolean"),
}


@dataclass(frozen=True)
class HookConfig:
    """Hook settings. Immutable once built; build from overrides with from_dict()."""
    enabled: bool = True
    matcher: str = "Edit|Write|MultiEdit"
    timeout: int = 30  # seconds; read by the host framework, not enforced here
    exclude_patterns: tuple[str, ...] = tuple(DEFAULT_EXCLUDE_PATTERNS)
    skip_empty_commits: bool = True
    add_all_files: bool = False
    branch_restrictions: tuple[str, ...] = ()
    max_commit_message_length: int = 500
    commit_prompt: str = DEFAULT_COMMIT_PROMPT
    generator_command: str = CodexGenerator.DEFAULT_COMMAND
    generator_args: tuple[str, ...] = CodexGenerator.DEFAULT_ARGS
    max_diff_bytes: int = DEFAULT_MAX_DIFF_BYTES
    block_on_commit_failure: bool = False

    def __post_init__(self):
        # Validate and print warnings to stderr
        for warning in self.validate():
            print(f"Config warning: {warning}", file=sys.stderr)

    def matches_tool(self, tool_name: str) -> bool:
        return re.fullmatch(self.matcher, tool_name) is not None

    def to_dict(self) -> dict:
        return {k: list(v) if isinstance(v, tuple) else v for k, v in asdict(self).items()}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                value = tuple(value)
                object.__setattr__(self, f.name, value)
            check, expected = VALIDATORS[f.name]
            if not check(value):
                warnings.append(f"Invalid {f.name} {value!r} (expected {expected}), using default")
                object.__setattr__(self, f.name, f.default)
        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'HookConfig':
        valid_keys = {f.name for f in fields(cls)}
        filtered = {}
        for key, value in data.items():
            key = KEY_ALIASES.get(key, key)
            if key in valid_keys:
                filtered[key] = value
        return cls(**filtered)


class ConfigManager:
    """Finds and loads the hook's JSON settings file."""

    CONFIG_FILENAME = ".autocommit-hook.json"

    def __init__(self):
        self._config: Optional[HookConfig] = None
        self._config_path: Optional[Path] = None

    def load(self, path: Optional[Path] = None) -> HookConfig:
        if self._config is not None:
            return self._config

        candidates = [path] if path else [
            Path.cwd() / self.CONFIG_FILENAME,
            Path.home() / self.CONFIG_FILENAME,
        ]
        for candidate in candidates:
            if candidate.exists():
                self._config = self._load_from_file(candidate)
                self._config_path = candidate
                return self._config

        if path:
            print(f"Warning: Config file {path} not found, using defaults", file=sys.stderr)
        self._config = HookConfig()
        return self._config

    def _load_from_file(self, path: Path) -> HookConfig:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return HookConfig()
        if not isinstance(data, dict):
            print(f"Warning: {path} must contain a JSON object, using defaults", file=sys.stderr)
            return HookConfig()
        return HookConfig.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_config(path: Optional[Path] = None) -> HookConfig:
    return ConfigManager().load(path)


__all__ = [
    "HookConfig",
    "ConfigManager",
    "load_config",
    "KEY_ALIASES",
    "MIN_MESSAGE_LENGTH",
]
