"""Controllers module for kubeversions.

This module provides the controllers that fetch and classify inventory data
from the metrics backend.
"""

from __future__ import annotations

# Base classes
from kubeversions.controllers.base import BaseController

# Inventory domain
from kubeversions.controllers.inventory import (
    InventoryController,
    InventoryError,
)

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "InventoryController",
    "InventoryError",
]
