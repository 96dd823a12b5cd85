"""Prompt Construction Package"""

from autocommit_hook.prompts.builder import PromptBuilder, PromptConfig, DEFAULT_MAX_DIFF_BYTES

__all__ = [
    "PromptBuilder",
    "PromptConfig",
    "DEFAULT_MAX_DIFF_BYTES",
]
