"""Event logging"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Set

from . import notify


def init_log(
    logfile: Optional[str],
    level: int,
    debug: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Initialize event logging

    Events are written to *logfile* if given, otherwise to STDERR.
    """
    global DEBUG, QUIET, VERBOSE

    QUIET, VERBOSE = quiet, verbose or debug
    DEBUG = debug = debug or level == logging.DEBUG
    if debug:
        level = logging.DEBUG
    elif VERBOSE:
        level = min(level, logging.INFO)
    elif QUIET and not logfile:
        level = max(level, logging.ERROR)
    notify.QUIET, notify.VERBOSE = QUIET, VERBOSE

    if logfile:
        handler = RotatingFileHandler(
            logfile,
            maxBytes=2**20,  # 1 MiB
            backupCount=1,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(filter_)

    FORMAT = (
        "({process}) ({asctime}) " * bool(logfile)
        + "[{levelname}] {name}: "
        + "{funcName}: " * debug
        + "{message}"
    )
    logging.basicConfig(
        handlers=(handler,),
        format=FORMAT,
        style="{",
        level=level,
        force=True,
    )

    _logger.setLevel(level)
    _logger.info("Starting a new session")
    _logger.info(f"Logging level set to {logging.getLevelName(level)}")


def log(
    msg: str,
    logger: logging.Logger,
    level: int = logging.INFO,
    *,
    direct: bool = True,
    file: bool = True,
    verbose: bool = False,
) -> None:
    """Report events to various destinations"""
    if verbose and not VERBOSE:
        return

    if file:
        logger.log(level, msg, **_kwargs)
    # Avoid repeating what the log already shows on STDERR
    if direct and not (file and _logged_to_stderr(logger, level)):
        notify.notify(msg, level=getattr(notify, logging.getLevelName(level)))


def log_exception(
    msg: str, logger: logging.Logger, *, direct: bool = False, fatal: bool = False
) -> None:
    """Report an error with the exception reponsible

    NOTE: Should be called from within an exception handler
    i.e from (also possibly in a nested context) within an except or finally clause.
    """
    if DEBUG:
        logger.exception(f"{msg} due to:", **_kwargs_exc)
    elif VERBOSE:
        exc_type, exc, _ = sys.exc_info()
        logger.error(
            f"{msg} due to: ({exc_type.__module__}.{exc_type.__qualname__}) {exc}",
            **_kwargs,
        )
    else:
        logger.error(msg, **_kwargs)

    if direct and not _logged_to_stderr(logger, logging.ERROR):
        notify.notify(msg, level=notify.CRITICAL if fatal else notify.ERROR)


def _logged_to_stderr(logger: logging.Logger, level: int) -> bool:
    return logger.isEnabledFor(level) and any(
        not isinstance(handler, logging.FileHandler)
        for handler in logging.getLogger().handlers
    )


# See "Filters" section in `logging` standard library documentation.
class Filter:
    def __init__(self, disallowed: Set[str]):
        self.disallowed = disallowed

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.partition(".")[0] not in self.disallowed


filter_ = Filter({"PIL", "urllib3"})

# Parent of every module logger in the package
_logger = logging.getLogger("term_crt")

# > log > logger.log > _log
_kwargs = {"stacklevel": 2}
# > exception-handler > log_exception > logger.exception > _log
_kwargs_exc = {"stacklevel": 3}

# Set from within `init_log()`
DEBUG: Optional[bool] = None
QUIET: Optional[bool] = None
VERBOSE: Optional[bool] = None
