"""Runtime settings models."""

from kubeversions.models.state.app_settings import ConfigError, InventorySettings

__all__ = ["ConfigError", "InventorySettings"]
