"""
Auto-Commit Hook

Commits every file an agent edits, with a generated commit message.
"""

__version__ = "1.0.0"

HOOK_NAME = "auto-commit"

# Files matching any of these are never staged or committed
DEFAULT_EXCLUDE_PATTERNS = [
    '*.log',
    '*.tmp',
    '*.temp',
    '.env*',
    '*.env',
    '*.key',
    '*.pem',
    '*.p12',
    '*.pfx',
    '**/node_modules/**',
    '**/.git/**',
    '*.pyc',
    '**/__pycache__/**',
]

DEFAULT_COMMIT_PROMPT = """Write a git commit message for the staged changes below.

Rules:
- First line: imperative mood, what changed and why, at most 72 characters
- Add a short body only if the change needs explaining
- Reply with the commit message only: no quotes, no code fences, no preamble"""
