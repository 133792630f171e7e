"""Inventory domain: query, classify and group workloads per cluster."""

from kubeversions.controllers.inventory.controller import InventoryController
from kubeversions.controllers.inventory.exceptions import (
    InventoryError,
    MetricsClientError,
    MetricsConnectionError,
    MetricsQueryError,
    MetricsTimeoutError,
    UnexpectedResultTypeError,
)
from kubeversions.controllers.inventory.fetchers import (
    MetricsFetcher,
    build_inventory_query,
)
from kubeversions.controllers.inventory.parsers import ClusterFilter, EntityParser

__all__ = [
    "ClusterFilter",
    "EntityParser",
    "InventoryController",
    "InventoryError",
    "MetricsClientError",
    "MetricsConnectionError",
    "MetricsFetcher",
    "MetricsQueryError",
    "MetricsTimeoutError",
    "UnexpectedResultTypeError",
    "build_inventory_query",
]
