"""Utility modules for kubeversions."""

from kubeversions.utils.logging_setup import configure_logging
from kubeversions.utils.report_generator import InventoryReport

__all__ = ["InventoryReport", "configure_logging"]
