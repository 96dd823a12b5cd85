"""Codex CLI Generator"""

from autocommit_hook.llm.base import GeneratedMessage, GenerationError, MessageGenerator, extract_agent_message
from autocommit_hook.process import ProcessError, ProcessRunner, SubprocessRunner


class CodexGenerator(MessageGenerator):
    """Generates messages by running the codex CLI non-interactively with JSON output."""

    DEFAULT_COMMAND = "codex"
    DEFAULT_ARGS = ("exec", "--json", "--sandbox", "read-only")

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        command: str | None = None,
        args: list[str] | None = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.command = command or self.DEFAULT_COMMAND
        self.args = list(args) if args is not None else list(self.DEFAULT_ARGS)

    @property
    def name(self) -> str:
        return f"{self.command} {' '.join(self.args)}".strip()

    def generate(self, prompt: str) -> GeneratedMessage:
        try:
            result = self.runner.run(self.command, [*self.args, prompt], merge_stderr=True)
        except ProcessError as e:
            raise GenerationError(str(e))

        if not result.ok:
            raise GenerationError(f"{self.command} exited with code {result.exit_code}")

        content = extract_agent_message(result.stdout)
        if not content:
            raise GenerationError(f"No agent message in {self.command} output")

        return GeneratedMessage(content=content, backend=self.name)
