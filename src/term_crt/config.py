"""term-crt's Configuration"""

from __future__ import annotations

import json
import logging as _logging
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from . import logging
from .color import Color
from .exceptions import ConfigError


class ConfigOptions(dict):
    """Config options store

    * Subscription with an option name returns the corresponding :py:class:`Option`
      instance.
    * Attribute reference with a variable name ('s/ /_/g') returns the option's current
      value.
    * Attribute reference with a "private" name ('s/ /_/g' and preceded by '_') returns
      the option's default value.
    """

    def _attr_to_option(self, attr: str) -> Tuple[Option, str]:
        default = attr.startswith("_")
        name = attr.replace("_", " ")
        if default:
            name = name[1:]
        try:
            return self[name], "default" if default else "value"
        except KeyError:
            raise AttributeError(f"Ain't no such config option as {name!r}") from None

    def __getattr__(self, attr: str):
        return getattr(*self._attr_to_option(attr))

    def __setattr__(self, attr: str, value: Any):
        setattr(*self._attr_to_option(attr), value)

    def reset(self) -> None:
        """Restores every option to its default value."""
        for option in self.values():
            option.value = option.default


@dataclass
class Option:
    """A config option."""

    value: Any = field(init=False)
    default: Any
    is_valid: Callable[[Any], bool]
    error_msg: str

    def __post_init__(self):
        self.value = self.default


def is_hex_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        Color.from_hex(value)
    except ValueError:
        return False

    return len(value.lstrip("#")) == 6


def load_config(config_file: str) -> None:
    """Loads a user config file.

    Raises:
        term_crt.exceptions.ConfigError: The file could not be read or is not a
          valid JSON object.

    Invalid option values are reported and the option's default is kept. Unknown
    options are reported and ignored.
    """
    try:
        with open(config_file, encoding="utf-8") as f:
            config = json.load(f)
    except OSError as e:
        raise ConfigError(
            f"Could not read the config file {config_file!r}: {e}"
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Failed to decode the config file {config_file!r}: {e}"
        ) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"The config file {config_file!r} must contain a JSON object "
            f"(got: {type(config).__name__})"
        )

    for name, value in config.items():
        try:
            option = config_options[name]
        except KeyError:
            warn(f"Unknown config option {name!r}, ignored")
            continue

        if option.is_valid(value):
            option.value = value
        else:
            warn(f"Config option {name!r}: {option.error_msg} (got: {value!r})")
            warn(f"Using the default {name!r}: {option.default!r}")

    _logger.info(f"Loaded the config file {config_file!r}")


def warn(msg: str) -> None:
    logging.log(msg, _logger, _logging.WARNING)


_logger = _logging.getLogger(__name__)

config_options = ConfigOptions(
    {
        "mode": Option(
            "block",
            lambda x: x in {"block", "sixel"},
            "must be one of 'block' or 'sixel'",
        ),
        "center": Option(
            False,
            lambda x: isinstance(x, bool),
            "must be a boolean",
        ),
        "alpha bg": Option(
            "#000000",
            is_hex_color,
            "must be a hex color of the form '#rrggbb'",
        ),
        "dither": Option(
            True,
            lambda x: isinstance(x, bool),
            "must be a boolean",
        ),
    }
)
