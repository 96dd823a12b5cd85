"""Shared fixtures: a scripted stand-in for git and the generation backend."""

import json

import pytest

from autocommit_hook.llm import GeneratedMessage, MessageGenerator
from autocommit_hook.process import ProcessResult, ProcessRunner


class FakeRunner(ProcessRunner):
    """Answers commands by longest matching prefix and records every call.

    A response is a ProcessResult, an exception to raise, or a list of those
    consumed in order (the last one repeats).
    """

    def __init__(self, responses=None):
        self.responses = {tuple(k.split()): v for k, v in (responses or {}).items()}
        self.calls: list[list[str]] = []

    def run(self, command, args, merge_stderr=False):
        call = [command, *args]
        self.calls.append(call)
        for key in sorted(self.responses, key=len, reverse=True):
            if tuple(call[:len(key)]) == key:
                return self._next(key)
        return ProcessResult(stdout="", exit_code=0)

    def _next(self, key):
        response = self.responses[key]
        if isinstance(response, list):
            response = response.pop(0) if len(response) > 1 else response[0]
        if isinstance(response, Exception):
            raise response
        return response

    def calls_to(self, prefix: str) -> list[list[str]]:
        key = prefix.split()
        return [c for c in self.calls if c[:len(key)] == key]


class FakeGenerator(MessageGenerator):
    """Returns a fixed message, or raises if given an exception."""

    def __init__(self, reply):
        self.reply = reply
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def generate(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return GeneratedMessage(content=self.reply, backend=self.name)


def ok(stdout: str = "") -> ProcessResult:
    return ProcessResult(stdout=stdout, exit_code=0)


def failed(stderr: str = "fatal", code: int = 1) -> ProcessResult:
    return ProcessResult(stdout="", exit_code=code, stderr=stderr)


def agent_output(message: str) -> str:
    """Codex-style line-delimited JSON with one agent message among noise."""
    return "\n".join([
        "Reading prompt from arguments...",
        json.dumps({"id": "0", "msg": {"type": "task_started"}}),
        json.dumps({"id": "0", "msg": {"type": "agent_message", "message": message}}),
        json.dumps({"id": "0", "msg": {"type": "task_complete"}}),
    ])


@pytest.fixture
def make_runner():
    """Return a factory for FakeRunner."""
    def _make(responses=None):
        return FakeRunner(responses)
    return _make


@pytest.fixture
def make_generator():
    """Return a factory for FakeGenerator."""
    def _make(reply="Add feature"):
        return FakeGenerator(reply)
    return _make


@pytest.fixture
def repo_responses():
    """git answers for a repository on 'feature' with one modified file."""
    return {
        "git rev-parse --git-dir": ok(".git\n"),
        "git rev-parse --abbrev-ref HEAD": ok("feature\n"),
        "git status --porcelain": ok("M  README.md\n"),
        "git diff --cached": ok("diff --git a/README.md b/README.md\n+new line\n"),
        "git add": ok(),
        "git commit": ok("[feature abc123] msg\n"),
    }


@pytest.fixture
def workdir(tmp_path):
    """A working directory containing README.md."""
    (tmp_path / "README.md").write_text("# Project\n")
    return tmp_path
