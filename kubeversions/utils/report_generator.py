"""Report generator - renders an inventory result set as rich tables."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.table import Table

from kubeversions.constants.values import (
    DEPLOYS_COLUMNS,
    DEPLOYS_TITLE,
    EMPTY_RESULT_MESSAGE,
    PODS_COLUMNS,
    PODS_TITLE,
)
from kubeversions.models.core.cluster_result import ClusterResultSet
from kubeversions.models.core.entity_info import EntityInfo

logger = logging.getLogger(__name__)


class InventoryReport:
    """Render pod and workload tables grouped by cluster."""

    def __init__(self, data: ClusterResultSet, console: Console | None = None) -> None:
        self.data = data
        self.console = console or Console()

    def render(self, show_pods: bool = True, show_deploys: bool = True) -> None:
        """Print the selected tables; a table with no rows is skipped.

        When nothing is printed, stdout stays empty and the fact is logged.
        """
        printed = False
        if show_pods and self.data.has_pods():
            self.console.print(f"{PODS_TITLE}\n")
            self.console.print(self.build_pods_table())
            self.console.print()
            printed = True

        if show_deploys and self.data.has_deploys():
            self.console.print(f"{DEPLOYS_TITLE}\n")
            self.console.print(self.build_deploys_table())
            printed = True

        if not printed:
            logger.info(EMPTY_RESULT_MESSAGE)

    def build_pods_table(self) -> Table:
        return self._build_table(
            PODS_COLUMNS,
            self.data.pods(),
            lambda e: [e.name, e.container_name, e.container_image],
        )

    def build_deploys_table(self) -> Table:
        return self._build_table(
            DEPLOYS_COLUMNS,
            self.data.deploys(),
            lambda e: [e.type.value, e.name, e.chart_name],
        )

    @staticmethod
    def _build_table(
        columns: tuple[str, ...],
        rows: list[tuple[str, EntityInfo]],
        cells: Callable[[EntityInfo], list[str]],
    ) -> Table:
        table = Table(show_header=True, header_style="bold")
        for column in columns:
            table.add_column(column, overflow="fold")

        previous_cluster: str | None = None
        for cluster_name, entity in rows:
            # Cluster name only on the first row of each cluster
            shown_cluster = cluster_name if cluster_name != previous_cluster else ""
            previous_cluster = cluster_name
            table.add_row(shown_cluster, *cells(entity))
        return table
