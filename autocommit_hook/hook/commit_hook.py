"""Commit Hook - Stage, describe and commit the file an agent just edited."""

import os

from autocommit_hook.config import HookConfig, MIN_MESSAGE_LENGTH
from autocommit_hook.git import GitRepo, GitError
from autocommit_hook.hook.envelope import Envelope, InputError, parse_envelope
from autocommit_hook.hook.events import EventLog, NullEventLog, build_event_record
from autocommit_hook.hook.exclusion import is_excluded
from autocommit_hook.hook.gating import GateOutcome, branch_restricted, nothing_to_commit
from autocommit_hook.hook.result import HookDecision, HookResult
from autocommit_hook.llm import CodexGenerator, MessageGenerator
from autocommit_hook.output import print_debug
from autocommit_hook.process import ProcessRunner, SubprocessRunner
from autocommit_hook.prompts import PromptBuilder, PromptConfig

ELLIPSIS = "..."


def fallback_message(file_path: str) -> str:
    return f"Update {os.path.basename(file_path)}"


def truncate_message(message: str, max_length: int) -> str:
    """Cut message to max_length characters, ending in '...' when cut."""
    if max_length < MIN_MESSAGE_LENGTH:
        raise ValueError(f"max_length must be at least {MIN_MESSAGE_LENGTH}, got {max_length}")
    if len(message) <= max_length:
        return message
    return message[:max_length - len(ELLIPSIS)] + ELLIPSIS


class CommitHook:
    """Handles one file-edit event end to end.

    Every step that finds the commit doesn't apply returns a successful no-op;
    only bad input and git refusing to stage or commit are errors.
    """

    def __init__(
        self,
        config: HookConfig | None = None,
        runner: ProcessRunner | None = None,
        generator: MessageGenerator | None = None,
        event_log: EventLog | None = None,
        cwd: str | None = None,
        verbose: bool = False,
    ):
        self.config = config or HookConfig()
        self.cwd = cwd or os.getcwd()
        runner = runner or SubprocessRunner(cwd=self.cwd)
        self.repo = GitRepo(runner)
        self.generator = generator or CodexGenerator(
            runner,
            command=self.config.generator_command,
            args=list(self.config.generator_args),
        )
        self.event_log = event_log or NullEventLog()
        self.verbose = verbose
        self.prompt_builder = PromptBuilder()

    def _debug(self, message: str) -> None:
        if self.verbose:
            print_debug(message)

    def run(self, text: str | bytes) -> HookResult | HookDecision:
        """Handle raw stdin text or bytes."""
        try:
            envelope = parse_envelope(text)
        except InputError as e:
            return HookResult.fail(str(e))
        return self.handle(envelope)

    def handle(self, envelope: Envelope) -> HookResult | HookDecision:
        self.event_log.record(build_event_record(envelope))
        config = self.config
        file_path = envelope.file_path

        if not config.enabled:
            return HookResult.ok("Auto-commit hook is disabled")

        if envelope.tool_name and not config.matches_tool(envelope.tool_name):
            return HookResult.ok(f"Tool {envelope.tool_name} does not match '{config.matcher}'")

        if is_excluded(file_path, config.exclude_patterns, self.cwd):
            return HookResult.ok(f"File {file_path} is excluded from auto-commits")

        if not self.repo.is_repository():
            return HookResult.ok("Not a git repository, skipping auto-commit")

        restricted = branch_restricted(self.repo, config.branch_restrictions)
        self._debug(f"branch restriction: {restricted.value}")
        if restricted.resolve(unknown_as=GateOutcome.NOT_APPLICABLE) is GateOutcome.APPLICABLE:
            return HookResult.ok("Current branch is restricted from auto-commits")

        if not os.path.exists(os.path.join(self.cwd, file_path)):
            return HookResult.ok(f"File does not exist: {file_path}")

        try:
            if config.add_all_files:
                self.repo.stage_all(exclude=self._log_exclusion())
            else:
                self.repo.stage(file_path)
        except GitError as e:
            return HookResult.fail(f"Failed to stage {file_path}: {e}")

        if config.skip_empty_commits:
            empty = nothing_to_commit(self.repo)
            self._debug(f"empty change check: {empty.value}")
            if empty.resolve(unknown_as=GateOutcome.NOT_APPLICABLE) is GateOutcome.APPLICABLE:
                return HookResult.ok("No changes to commit")

        message, generated = self._commit_message(file_path)

        try:
            self.repo.commit(message)
        except GitError as e:
            error = f"Failed to commit {file_path}: {e}"
            if config.block_on_commit_failure:
                return HookDecision.block(error)
            return HookResult.fail(error)

        return HookResult.ok(
            f"Successfully committed {file_path}",
            data={"file": file_path, "commit_message": message, "generated": generated},
        )

    def _log_exclusion(self) -> list[str]:
        """The event log file, relative to cwd, when it lives inside it."""
        if self.event_log.path is None:
            return []
        log_path = os.path.relpath(os.path.join(self.cwd, self.event_log.path), self.cwd)
        if log_path == os.pardir or log_path.startswith(os.pardir + os.sep):
            return []
        return [log_path.replace(os.sep, "/")]

    def _commit_message(self, file_path: str) -> tuple[str, bool]:
        """Generated message, or the fallback if anything about generation fails."""
        try:
            prompt = self.prompt_builder.build(
                self.repo.status() or "",
                self.repo.staged_diff(),
                PromptConfig(
                    instructions=self.config.commit_prompt,
                    max_diff_bytes=self.config.max_diff_bytes,
                ),
            )
            self._debug(f"generating with {self.generator.name} ({len(prompt)} chars)")
            message = self.generator.generate(prompt).content.strip()
            if not message:
                raise ValueError("empty message")
            generated = True
        except Exception as e:
            self._debug(f"generation failed, using fallback: {e}")
            message = fallback_message(file_path)
            generated = False
        return truncate_message(message, self.config.max_commit_message_length), generated
