"""Command Line Interface Package"""

from autocommit_hook.cli.main import main, run

__all__ = ["main", "run"]
