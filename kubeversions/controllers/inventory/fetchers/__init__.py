"""Fetchers for the inventory controller."""

from kubeversions.controllers.inventory.fetchers.metrics_fetcher import (
    MetricsFetcher,
    normalize_base_url,
)
from kubeversions.controllers.inventory.fetchers.query_builder import (
    build_inventory_query,
)

__all__ = ["MetricsFetcher", "build_inventory_query", "normalize_base_url"]
