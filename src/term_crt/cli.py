"""term-crt's CLI Implementation"""

from __future__ import annotations

import logging as _logging
import sys
from typing import List, Optional, Tuple

from . import config, notify
from .color import Color
from .config import config_options
from .exceptions import ArgumentMissing, CrtError
from .exit_codes import FAILURE, SUCCESS
from .logging import init_log, log
from .render import RenderMode, open_image, render


def resolve_tokens(tokens: List[str]) -> Tuple[Optional[str], Optional[RenderMode]]:
    """Splits positional arguments into the image source and render mode.

    Returns:
        ``(source, mode)``. The first token is the source. The last token naming a
        render mode, if any, is the mode. Every other token is ignored.
    """
    if not tokens:
        return None, None

    source, *rest = tokens
    mode = None
    for token in rest:
        try:
            mode = RenderMode(token)
        except ValueError:
            logger.debug(f"Ignored argument {token!r}")

    return source, mode


def main() -> int:
    """CLI execution sub-entry-point"""
    from .parsers import parser

    global args

    args, unknown = parser.parse_known_intermixed_args()

    init_log(
        args.log_file,
        getattr(_logging, args.log_level),
        args.debug,
        args.quiet,
        args.verbose,
    )
    if unknown:
        logger.debug(f"Ignored unrecognized arguments: {unknown}")

    try:
        if args.config:
            config.load_config(args.config)

        source, mode = resolve_tokens(args.tokens)
        if source is None:
            raise ArgumentMissing("No image source given")

        mode = mode or RenderMode(config_options.mode)
        center = config_options.center if args.center is None else args.center
        logger.info(f"Rendering {source!r} in {mode.value!r} mode (center={center})")

        img = open_image(source)
        try:
            render(
                img,
                mode,
                center,
                background=Color.from_hex(config_options.alpha_bg),
                dither=config_options.dither,
            )
        finally:
            img.close()
    except ArgumentMissing as e:
        log(f"Error: {e}", logger, _logging.CRITICAL)
        if not notify.QUIET:
            parser.print_usage(sys.stderr)
        return FAILURE
    except CrtError as e:
        log(f"Error: {e}", logger, _logging.CRITICAL)
        return FAILURE

    return SUCCESS


logger = _logging.getLogger(__name__)

# Set from within `main()`
args = None  #: Optional[argparse.Namespace]
