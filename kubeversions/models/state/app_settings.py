"""Inventory run settings models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from kubeversions.constants.defaults import (
    NAMESPACE_DEFAULT,
    PROM_API_DEFAULT,
    TIMEOUT_SECONDS_DEFAULT,
)


class InventorySettings(BaseModel):
    """Immutable settings for a single inventory run."""

    model_config = ConfigDict(frozen=True)

    # Backend
    prom_api: str = PROM_API_DEFAULT
    namespace: str = NAMESPACE_DEFAULT
    clusters: tuple[str, ...] = ()
    timeout_seconds: int = TIMEOUT_SECONDS_DEFAULT

    # Report selection; neither flag set means both tables
    show_pods: bool = False
    show_deploys: bool = False

    # Reserved: chart versions of config maps are not classified yet
    include_config_maps: bool = False

    debug: bool = False

    @field_validator("prom_api")
    @classmethod
    def _prom_api_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("prometheus API address must not be empty")
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def _timeout_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return value

    @classmethod
    def from_options(cls, **options: Any) -> InventorySettings:
        """Build settings from CLI options, raising ConfigError when invalid."""
        try:
            return cls(**options)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    @property
    def show_all(self) -> bool:
        return not self.show_pods and not self.show_deploys

    @property
    def wants_pods(self) -> bool:
        return self.show_all or self.show_pods

    @property
    def wants_deploys(self) -> bool:
        return self.show_all or self.show_deploys


class ConfigError(Exception):
    """Raised when inventory settings are invalid."""
