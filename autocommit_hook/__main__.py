from autocommit_hook.cli import run

run()
