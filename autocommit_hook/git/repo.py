"""Git Repository - The git operations the hook needs, run through a ProcessRunner."""

from autocommit_hook.process import ProcessError, ProcessResult, ProcessRunner, SubprocessRunner


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepo:
    """Git operations against the working directory of a runner."""

    GIT = 'git'

    def __init__(self, runner: ProcessRunner | None = None):
        self.runner = runner or SubprocessRunner()

    def _run_git(self, *args: str) -> ProcessResult:
        """Run a git command and return the raw result, whatever its exit code."""
        try:
            return self.runner.run(self.GIT, list(args))
        except ProcessError as e:
            raise GitError(str(e))

    def _check_git(self, *args: str) -> str:
        """Run a git command and return stdout, raising on a non-zero exit."""
        result = self._run_git(*args)
        if not result.ok:
            detail = (result.stderr or result.stdout).strip()
            raise GitError(f"Git command failed: git {' '.join(args)}\n{detail}".rstrip())
        return result.stdout

    def is_repository(self) -> bool:
        """Any failure to resolve the git dir means we're not in a repository."""
        try:
            return self._run_git('rev-parse', '--git-dir').ok
        except GitError:
            return False

    def current_branch(self) -> str | None:
        """Current branch name, or None if it can't be determined."""
        try:
            result = self._run_git('rev-parse', '--abbrev-ref', 'HEAD')
        except GitError:
            return None
        branch = result.stdout.strip()
        if not result.ok or not branch:
            return None
        return branch

    def status(self, include_untracked: bool = True) -> str | None:
        """Short-form status, or None if the query failed."""
        args = ['status', '--porcelain']
        if not include_untracked:
            args.append('--untracked-files=no')
        try:
            result = self._run_git(*args)
        except GitError:
            return None
        return result.stdout if result.ok else None

    def stage(self, path: str) -> None:
        self._check_git('add', '--', path)

    def stage_all(self, exclude: list[str] | tuple[str, ...] = ()) -> None:
        """Stage every change in the repository except paths in `exclude` (relative to cwd)."""
        if not exclude:
            self._check_git('add', '-A')
            return
        self._check_git('add', '-A', '--', ':/', *(f':(exclude){path}' for path in exclude))

    def staged_diff(self) -> str:
        return self._check_git('diff', '--cached')

    def commit(self, message: str) -> None:
        """Commit staged changes. The message is a single argv element, never shell-parsed."""
        self._check_git('commit', '-m', message)
