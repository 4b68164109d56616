"""Exit codes for fatal errors"""

from __future__ import annotations

codes = {
    0: "SUCCESS",
    1: "FAILURE",
}

globals().update((v, k) for k, v in codes.items())
