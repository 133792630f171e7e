"""Timeout constants for requests made outside the inventory query.

The inventory query itself is bounded by the configured timeout.
"""

from typing import Final

# Readiness probe used for debug diagnostics (float, in seconds)
READY_CHECK_TIMEOUT: Final = 5.0

__all__ = [
    "READY_CHECK_TIMEOUT",
]
