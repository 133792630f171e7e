"""All enum definitions for kubeversions.

This module consolidates the closed sets of values the inventory pipeline
dispatches on.
"""

from enum import Enum

# =============================================================================
# Entity Enums
# =============================================================================

class EntityType(Enum):
    """Kind of Kubernetes object an inventory row describes.

    Values are the display labels; they also define the sort order of
    entities within a cluster.
    """

    POD = "Pod"
    DEPLOYMENT = "Deployment"
    DAEMONSET = "DaemonSet"
    STATEFULSET = "StatefulSet"


class MetricName(Enum):
    """kube-state-metrics series selected by the inventory query."""

    POD_CONTAINER_INFO = "kube_pod_container_info"
    DEPLOYMENT_LABELS = "kube_deployment_labels"
    DAEMONSET_LABELS = "kube_daemonset_labels"
    STATEFULSET_LABELS = "kube_statefulset_labels"


# =============================================================================
# Prometheus API Enums
# =============================================================================

class ResultType(Enum):
    """Result types returned by the Prometheus query API."""

    VECTOR = "vector"
    MATRIX = "matrix"
    SCALAR = "scalar"
    STRING = "string"


__all__ = [
    "EntityType",
    "MetricName",
    "ResultType",
]
