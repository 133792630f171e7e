"""Inventory controller for pod image and chart version discovery.

This module orchestrates one inventory run: it builds the query, fetches the
instant vector through MetricsFetcher, filters samples by cluster, classifies
them with EntityParser and groups the result per cluster.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kubeversions.constants.values import LABEL_CLUSTER_NAME
from kubeversions.controllers.base import BaseController
from kubeversions.controllers.inventory.fetchers import (
    MetricsFetcher,
    build_inventory_query,
)
from kubeversions.controllers.inventory.parsers import ClusterFilter, EntityParser
from kubeversions.models.core.cluster_result import ClusterResultSet
from kubeversions.models.state.app_settings import InventorySettings

logger = logging.getLogger(__name__)


class InventoryController(BaseController):
    """Runs the query-filter-classify-aggregate-sort pipeline for one namespace."""

    def __init__(
        self,
        settings: InventorySettings,
        *,
        fetcher: MetricsFetcher | None = None,
        parser: EntityParser | None = None,
        cluster_filter: ClusterFilter | None = None,
    ) -> None:
        """Initialize inventory controller.

        Args:
            settings: Settings for this run
            fetcher: Metrics fetcher, built from settings when omitted
            parser: Entity parser, a default instance when omitted
            cluster_filter: Cluster filter, built from settings when omitted

        Raises:
            MetricsClientError: If the backend address is unusable.
            ConfigError: If a cluster pattern is not a valid regex.
        """
        self.settings = settings
        if cluster_filter is None:
            cluster_filter = ClusterFilter.from_settings(settings)
        if fetcher is None:
            fetcher = MetricsFetcher(settings.prom_api, timeout=settings.timeout_seconds)
        self.cluster_filter = cluster_filter
        self.parser = parser or EntityParser()
        self.fetcher = fetcher

    def close(self) -> None:
        self.fetcher.close()

    def check_connection(self) -> bool:
        return self.fetcher.check_connection()

    def fetch_all(self) -> ClusterResultSet:
        """Fetch the inventory for the configured namespace."""
        logger.debug("Using prometheus server: %s", self.fetcher.base_url)
        logger.debug("Searching in namespace: %s", self.settings.namespace)
        if not self.cluster_filter.is_empty():
            logger.debug("Filtering by clusters: %s", self.cluster_filter.patterns)
        return self.get_info(self.settings.namespace)

    def get_info(self, namespace: str) -> ClusterResultSet:
        """Query the backend for one namespace and build the sorted result set."""
        query = build_inventory_query(namespace)
        logger.debug("Using prom query: %s", query)
        samples = self.fetcher.fetch(query, timeout=self.settings.timeout_seconds)
        return self.aggregate(samples)

    def aggregate(self, samples: Iterable[dict[str, str]]) -> ClusterResultSet:
        """Group classified samples by cluster and sort each cluster's entries.

        Args:
            samples: Label sets as returned by MetricsFetcher.fetch

        Returns:
            ClusterResultSet with entries in display order.
        """
        result = ClusterResultSet()
        for labels in samples:
            cluster_name = labels.get(LABEL_CLUSTER_NAME, "")
            if not self.cluster_filter.has(cluster_name):
                logger.debug(
                    "Skipping result for %s as it does not match filter", cluster_name
                )
                continue

            entity = self.parser.parse(labels)
            if entity is None:
                continue
            result.add(cluster_name, entity)

        result.sort_entries()
        return result
