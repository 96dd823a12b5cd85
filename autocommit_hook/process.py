"""Child Process Execution - the one place external tools get spawned."""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ProcessResult:
    """Captured output of a finished child process."""
    stdout: str
    exit_code: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class ProcessError(Exception):
    """Raised when a child process cannot be started at all."""
    pass


class ProcessRunner(ABC):
    """Runs a command with an argument vector and waits for it to finish."""

    @abstractmethod
    def run(self, command: str, args: list[str], merge_stderr: bool = False) -> ProcessResult:
        pass


class SubprocessRunner(ProcessRunner):
    """ProcessRunner backed by subprocess.run. Arguments are never passed through a shell."""

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd

    def run(self, command: str, args: list[str], merge_stderr: bool = False) -> ProcessResult:
        try:
            result = subprocess.run(
                [command, *args],
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise ProcessError(f"{command} is not installed or not in PATH")
        except OSError as e:
            raise ProcessError(f"Could not run {command}: {e}")

        return ProcessResult(
            stdout=result.stdout or "",
            exit_code=result.returncode,
            stderr=result.stderr or "",
        )


__all__ = [
    "ProcessResult",
    "ProcessError",
    "ProcessRunner",
    "SubprocessRunner",
]
