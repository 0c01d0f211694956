"""Console logger with printf-style formatting and level prefixes."""

import sys


def _emit(prefix: str, fmt: str, args: tuple) -> None:
    message = fmt % args if args else fmt
    sys.stdout.write(f"{prefix}{message}\n")


def log_error(fmt, *args):
    """Print an error message."""
    _emit("error: ", fmt, args)


def log_warning(fmt, *args):
    """Print a warning message."""
    _emit("warn:  ", fmt, args)


def log_info(fmt, *args):
    """Print an informational message."""
    _emit("info:  ", fmt, args)


def log_debug(fmt, *args):
    """Print a debug message."""
    _emit("debug: ", fmt, args)