"""Constants module for kubeversions.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Label keys, API paths and report labels
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
"""

from kubeversions.constants.defaults import (
    NAMESPACE_DEFAULT,
    PROM_API_DEFAULT,
    TIMEOUT_SECONDS_DEFAULT,
)
from kubeversions.constants.enums import EntityType, MetricName, ResultType
from kubeversions.constants.timeouts import READY_CHECK_TIMEOUT
from kubeversions.constants.values import (
    APP_NAME,
    CHART_LABEL_KEYS,
    DOCKER_HUB_PREFIX,
    LABEL_CLUSTER_NAME,
    LABEL_METRIC_NAME,
)

__all__ = [
    # Application
    "APP_NAME",
    # Labels
    "CHART_LABEL_KEYS",
    "DOCKER_HUB_PREFIX",
    "LABEL_CLUSTER_NAME",
    "LABEL_METRIC_NAME",
    # Defaults
    "NAMESPACE_DEFAULT",
    "PROM_API_DEFAULT",
    # Timeouts
    "READY_CHECK_TIMEOUT",
    "TIMEOUT_SECONDS_DEFAULT",
    # Enums
    "EntityType",
    "MetricName",
    "ResultType",
]
