"""CLI Argument Parsing"""

import argparse
import argcomplete

from autocommit_hook import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='autocommit-hook',
        description='Commit each edited file with a generated message. Reads the hook event JSON from stdin.',
        epilog='Example: echo \'{"tool_name":"Edit","tool_input":{"file_path":"README.md"}}\' | autocommit-hook'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('-c', '--config', type=str, metavar='PATH', help='Settings file (default: .autocommit-hook.json here or in ~)')
    parser.add_argument('--log-file', type=str, metavar='PATH', help='Event log file (default: .autocommit-hook.log)')
    parser.add_argument('--no-log', action='store_true', help='Do not write the event log')
    parser.add_argument('--verbose', action='store_true', help='Show each pipeline step on stderr')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
