"""CLI argument parsers"""

import argparse

from . import __version__
from .render import RenderMode

MODES = tuple(mode.value for mode in RenderMode)

parser = argparse.ArgumentParser(
    prog="crt",
    formatter_class=argparse.RawDescriptionHelpFormatter,
    allow_abbrev=False,
    usage="%(prog)s <image_file> [mode] [--center] [options]",
    description="Display an image in the terminal",
    epilog=""" \

Supported formats: JPEG, PNG, BMP, TIFF, GIF and WebP.
GIF and WebP images show the first frame only (no animation).

Modes:
  block: Uses unicode half blocks with 24-bit color escape codes to represent images
      with a density of two pixels per character cell. Works everywhere truecolor
      is supported. This is the default.
  sixel: Uses the sixel graphics protocol. Highest quality, but requires a
      compatible terminal emulator such as xterm (with sixel enabled), mlterm, foot
      or WezTerm.

The mode and flags may appear in any order after the image source.
Unrecognized arguments are ignored.
""",
)

parser.add_argument(
    "tokens",
    nargs="*",
    metavar="<image_file> [mode]",
    help=(
        "Path or HTTP(S) URL of the image, optionally followed by the mode "
        f"({' or '.join(MODES)})"
    ),
)
parser.add_argument(
    "--center",
    action="store_true",
    default=None,
    help="Center the image horizontally",
)
parser.add_argument(
    "--version",
    action="version",
    version=f"%(prog)s {__version__}",
)

config_options = parser.add_argument_group("Config Options")
config_options.add_argument(
    "--config",
    metavar="FILE",
    help="Load user configuration from FILE (JSON)",
)

log_options = parser.add_argument_group(
    "Logging Options",
    "NOTE: These are mutually exclusive",
)
log_options.add_argument(
    "-l",
    "--log-file",
    metavar="FILE",
    help="Write events to FILE, instead of STDERR",
)
log_options_ex = log_options.add_mutually_exclusive_group()
log_options_ex.add_argument(
    "--log-level",
    choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    default="WARNING",
    help="Set logging level to any of the specified values (default: WARNING)",
)
log_options_ex.add_argument(
    "-q",
    "--quiet",
    action="store_true",
    help="No notifications, except fatal errors",
)
log_options_ex.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="More detailed event reporting",
)
log_options_ex.add_argument(
    "--debug",
    action="store_true",
    help="Log debug messages and raise unexpected errors",
)
