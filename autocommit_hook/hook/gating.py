"""Gating Queries - Checks that decide whether an auto-commit applies at all.

Each check reports UNKNOWN when git can't answer; callers decide what
UNKNOWN means with resolve(), so the fail-open policy is visible at the call site.
"""

from enum import Enum

from autocommit_hook.git import GitRepo


class GateOutcome(Enum):
    APPLICABLE = "applicable"
    NOT_APPLICABLE = "not_applicable"
    UNKNOWN = "unknown"

    def resolve(self, unknown_as: 'GateOutcome') -> 'GateOutcome':
        return unknown_as if self is GateOutcome.UNKNOWN else self


def branch_restricted(repo: GitRepo, restricted: list[str] | tuple[str, ...]) -> GateOutcome:
    """APPLICABLE when the current branch is in the restricted set."""
    if not restricted:
        return GateOutcome.NOT_APPLICABLE
    branch = repo.current_branch()
    if branch is None:
        return GateOutcome.UNKNOWN
    return GateOutcome.APPLICABLE if branch in restricted else GateOutcome.NOT_APPLICABLE


def nothing_to_commit(repo: GitRepo) -> GateOutcome:
    """APPLICABLE when no tracked path is changed. Untracked files never count."""
    status = repo.status(include_untracked=False)
    if status is None:
        return GateOutcome.UNKNOWN
    return GateOutcome.APPLICABLE if not status.strip() else GateOutcome.NOT_APPLICABLE
