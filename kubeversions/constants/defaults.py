"""Default values for settings.

All default values used by the InventorySettings model and the CLI options.
"""

from typing import Final

# ============================================================================
# Backend defaults
# ============================================================================

PROM_API_DEFAULT: Final = "localhost:9090"
NAMESPACE_DEFAULT: Final = "default"
TIMEOUT_SECONDS_DEFAULT: Final = 10

__all__ = [
    "NAMESPACE_DEFAULT",
    "PROM_API_DEFAULT",
    "TIMEOUT_SECONDS_DEFAULT",
]
