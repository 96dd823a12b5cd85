"""Git Operations Package"""

from autocommit_hook.git.repo import GitRepo, GitError

__all__ = [
    "GitRepo",
    "GitError",
]
