"""Parsers for the inventory controller."""

from kubeversions.controllers.inventory.parsers.cluster_filter import ClusterFilter
from kubeversions.controllers.inventory.parsers.entity_parser import (
    EntityParser,
    extract_chart_name,
    strip_registry_prefix,
)

__all__ = [
    "ClusterFilter",
    "EntityParser",
    "extract_chart_name",
    "strip_registry_prefix",
]
