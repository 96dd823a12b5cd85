"""Exclusion Filter - Glob patterns for files that must never be auto-committed."""

import os
import re
from functools import lru_cache


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a glob into an anchored regex.

    `**/` matches zero or more leading directories, `**` matches anything,
    `*` matches within one path segment, `?` matches one non-separator char.
    """
    parts = []
    i = 0
    while i < len(pattern):
        if pattern.startswith('**/', i):
            parts.append('(?:.*/)?')
            i += 3
        elif pattern.startswith('**', i):
            parts.append('.*')
            i += 2
        elif pattern[i] == '*':
            parts.append('[^/]*')
            i += 1
        elif pattern[i] == '?':
            parts.append('[^/]')
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile(''.join(parts) + r'\Z')


def _relative_path(file_path: str, cwd: str) -> str:
    absolute = os.path.normpath(os.path.join(cwd, file_path))
    try:
        relative = os.path.relpath(absolute, cwd)
    except ValueError:
        # Different drive on Windows
        relative = absolute
    return relative.replace('\\', '/')


def is_excluded(file_path: str, patterns: list[str] | tuple[str, ...], cwd: str | None = None) -> bool:
    """True if the bare filename or the cwd-relative path matches any pattern."""
    if not patterns:
        return False
    cwd = cwd or os.getcwd()
    candidates = (
        os.path.basename(file_path.replace('\\', '/')),
        _relative_path(file_path, cwd),
    )
    return any(
        glob_to_regex(pattern).match(candidate)
        for pattern in patterns
        for candidate in candidates
    )
