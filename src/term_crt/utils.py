"""
.. Utilities
"""

from __future__ import annotations

from typing import Any


def arg_value_error_msg(msg: str, value: Any) -> ValueError:
    return ValueError(f"{msg} (got: {value!r})")


def arg_value_error_range(arg: str, value: Any) -> ValueError:
    return ValueError(f"{arg!r} out of range (got: {value!r})")
