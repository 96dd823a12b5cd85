"""Terminal Output Formatting Package

stdout carries the hook's result, so every diagnostic here goes to stderr.
"""

import sys
import os


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stderr, 'isatty') or not sys.stderr.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-12), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    try:
        '✓'.encode(sys.stderr.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}", file=sys.stderr)


def print_info(message: str) -> None:
    print(f"{info('auto-commit:')} {message}", file=sys.stderr)


def print_debug(message: str) -> None:
    print(dim(f"  {message}"), file=sys.stderr)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CROSS",
    "error", "warning", "info", "dim",
    "print_error", "print_warning", "print_info", "print_debug",
]
