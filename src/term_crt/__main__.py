"""Support for command-line execution using `python -m term_crt`"""

from __future__ import annotations

import logging as _logging
import sys

from .exit_codes import FAILURE, codes


def main() -> int:
    """CLI execution entry-point"""
    from . import cli, logging

    logger = _logging.getLogger("term_crt")

    try:
        exit_code = cli.main()
    except KeyboardInterrupt:
        logging.log("Interrupted", logger, _logging.CRITICAL)
        return FAILURE
    except Exception as e:
        logging.log_exception(
            "Session not ended successfully: "
            f"({type(e).__module__}.{type(e).__qualname__}) {e}",
            logger,
            direct=True,
            fatal=True,
        )
        if cli.args and cli.args.debug:
            raise
        return FAILURE
    else:
        logger.info(f"Session ended with return-code {exit_code} ({codes[exit_code]})")
        return exit_code


if __name__ == "__main__":
    sys.exit(main())
