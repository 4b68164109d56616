"""Issuing user notifications on STDERR"""

from __future__ import annotations

import sys

from .ctlseqs import SGR_FG_RED, SGR_FG_YELLOW, SGR_NORMAL

DEBUG = INFO = 0
WARNING = 1
ERROR = 2
CRITICAL = 3


def notify(msg: str, *, verbose: bool = False, level: int = INFO) -> None:
    """Displays a message on STDERR.

    Warnings are shown in yellow and errors in red. Messages below ERROR-level are
    suppressed in quiet mode and *verbose* messages are shown only in verbose mode.
    """
    if QUIET and level < ERROR or verbose and not VERBOSE:
        return

    print(
        (
            f"{SGR_FG_YELLOW}{msg}{SGR_NORMAL}"
            if level == WARNING
            else f"{SGR_FG_RED}{msg}{SGR_NORMAL}"
            if level >= ERROR
            else msg
        ),
        file=sys.stderr,
        flush=True,
    )


# Set from `.logging.init_log()`.
QUIET: bool = False
VERBOSE: bool = False
