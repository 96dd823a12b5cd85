"""CLI Main Entry Point"""

import sys
from pathlib import Path

from autocommit_hook.config import load_config
from autocommit_hook.hook import (
    CommitHook,
    DEFAULT_LOG_FILENAME,
    EventLog,
    FileEventLog,
    NullEventLog,
    emit_result,
)

from autocommit_hook.cli.args import parse_args


def _build_event_log(args) -> EventLog:
    if args.no_log:
        return NullEventLog()
    return FileEventLog(args.log_file or Path.cwd() / DEFAULT_LOG_FILENAME)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    config = load_config(Path(args.config) if args.config else None)
    hook = CommitHook(
        config=config,
        event_log=_build_event_log(args),
        verbose=args.verbose,
    )

    # Raw bytes, so bad encodings surface as input errors rather than crashes
    result = hook.run(sys.stdin.buffer.read())
    return emit_result(result, verbose=args.verbose)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
