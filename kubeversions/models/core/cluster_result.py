"""Per-cluster result set produced by the inventory query."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from kubeversions.models.core.entity_info import EntityInfo


class ClusterEntry(BaseModel):
    """Entities discovered for a single cluster, in display order once sorted."""

    cluster_name: str
    entries: list[EntityInfo] = Field(default_factory=list)

    def sort_entries(self) -> None:
        """Order entries by type label, then by name."""
        self.entries.sort(key=lambda entity: entity.sort_key())


class ClusterResultSet(dict[str, ClusterEntry]):
    """Mapping of cluster name to its ClusterEntry.

    Built once per query by the inventory controller and sorted once at the
    end; presentation code only reads from it.
    """

    def entry_for(self, cluster_name: str) -> ClusterEntry:
        """Get the entry for a cluster, creating an empty one on first use."""
        entry = self.get(cluster_name)
        if entry is None:
            entry = ClusterEntry(cluster_name=cluster_name)
            self[cluster_name] = entry
        return entry

    def add(self, cluster_name: str, entity: EntityInfo) -> None:
        self.entry_for(cluster_name).entries.append(entity)

    def sort_entries(self) -> None:
        """Sort every cluster's entity list into display order."""
        for entry in self.values():
            entry.sort_entries()

    def sorted_cluster_names(self) -> list[str]:
        """Return cluster names in ascending order."""
        return sorted(self)

    def has_pods(self) -> bool:
        """Return True if the result set has any pods to display."""
        return any(entity.is_pod for entity in self._all_entities())

    def has_deploys(self) -> bool:
        """Return True if the result set has any deployables to display."""
        return any(not entity.is_pod for entity in self._all_entities())

    def pods(self) -> list[tuple[str, EntityInfo]]:
        """Pod rows as (cluster name, entity) pairs in display order."""
        return [
            (cluster_name, entity)
            for cluster_name, entity in self._ordered_entities()
            if entity.is_pod
        ]

    def deploys(self) -> list[tuple[str, EntityInfo]]:
        """Workload rows as (cluster name, entity) pairs in display order."""
        return [
            (cluster_name, entity)
            for cluster_name, entity in self._ordered_entities()
            if not entity.is_pod
        ]

    def _all_entities(self) -> Iterator[EntityInfo]:
        for entry in self.values():
            yield from entry.entries

    def _ordered_entities(self) -> Iterator[tuple[str, EntityInfo]]:
        for cluster_name in self.sorted_cluster_names():
            for entity in self[cluster_name].entries:
                yield cluster_name, entity
