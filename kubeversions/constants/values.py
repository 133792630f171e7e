"""Scalar constants for kubeversions.

Label keys, API paths and query templates shared by fetchers and parsers.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kubeversions"

# ============================================================================
# Prometheus HTTP API
# ============================================================================

QUERY_API_PATH: Final = "/api/v1/query"
READY_API_PATH: Final = "/-/ready"
QUERY_READ_CHUNK_SIZE: Final = 64 * 1024
DEFAULT_URL_SCHEME: Final = "http://"

INVENTORY_QUERY_TEMPLATE: Final = (
    '{{namespace="{namespace}", '
    "__name__=~'kube_pod_container_info|kube_(deployment|daemonset|statefulset)_labels'}}"
)

# ============================================================================
# Series labels
# ============================================================================

LABEL_METRIC_NAME: Final = "__name__"
LABEL_CLUSTER_NAME: Final = "cluster_name"
LABEL_NAMESPACE: Final = "namespace"
LABEL_POD: Final = "pod"
LABEL_CONTAINER: Final = "container"
LABEL_IMAGE: Final = "image"
LABEL_DEPLOYMENT: Final = "deployment"
LABEL_DAEMONSET: Final = "daemonset"
LABEL_STATEFULSET: Final = "statefulset"

# Legacy key first, then the helm.sh/chart label as exported by kube-state-metrics.
CHART_LABEL_KEYS: Final = ("label_chart", "label_helm_sh_chart")

DOCKER_HUB_PREFIX: Final = "docker.io/"

# ============================================================================
# Report
# ============================================================================

PODS_TITLE: Final = "PODS"
DEPLOYS_TITLE: Final = "DEPLOYS"
PODS_COLUMNS: Final = ("Cluster", "Pod", "Container", "Image")
DEPLOYS_COLUMNS: Final = ("Cluster", "Type", "Name", "Chart")
EMPTY_RESULT_MESSAGE: Final = "No workloads found"

__all__ = [
    "APP_NAME",
    "CHART_LABEL_KEYS",
    "DEFAULT_URL_SCHEME",
    "DEPLOYS_COLUMNS",
    "DEPLOYS_TITLE",
    "DOCKER_HUB_PREFIX",
    "EMPTY_RESULT_MESSAGE",
    "INVENTORY_QUERY_TEMPLATE",
    "LABEL_CLUSTER_NAME",
    "LABEL_CONTAINER",
    "LABEL_DAEMONSET",
    "LABEL_DEPLOYMENT",
    "LABEL_IMAGE",
    "LABEL_METRIC_NAME",
    "LABEL_NAMESPACE",
    "LABEL_POD",
    "LABEL_STATEFULSET",
    "PODS_COLUMNS",
    "PODS_TITLE",
    "QUERY_API_PATH",
    "QUERY_READ_CHUNK_SIZE",
    "READY_API_PATH",
]
