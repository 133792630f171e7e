"""Core inventory models."""

from kubeversions.models.core.cluster_result import ClusterEntry, ClusterResultSet
from kubeversions.models.core.entity_info import ContainerInfo, EntityInfo

__all__ = ["ClusterEntry", "ClusterResultSet", "ContainerInfo", "EntityInfo"]
