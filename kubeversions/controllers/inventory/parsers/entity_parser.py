"""Entity parser for inventory controller - classifies metric label sets."""

from __future__ import annotations

import logging

from kubeversions.constants.enums import EntityType, MetricName
from kubeversions.constants.values import (
    CHART_LABEL_KEYS,
    DOCKER_HUB_PREFIX,
    LABEL_CONTAINER,
    LABEL_DAEMONSET,
    LABEL_DEPLOYMENT,
    LABEL_IMAGE,
    LABEL_METRIC_NAME,
    LABEL_POD,
    LABEL_STATEFULSET,
)
from kubeversions.models.core.entity_info import ContainerInfo, EntityInfo

logger = logging.getLogger(__name__)


def extract_chart_name(labels: dict[str, str]) -> str:
    """Return the chart label value, legacy key first; empty if neither is set."""
    for key in CHART_LABEL_KEYS:
        if key in labels:
            return labels[key]
    return ""


def strip_registry_prefix(image: str) -> str:
    """Drop a leading Docker Hub registry from an image reference."""
    return image.removeprefix(DOCKER_HUB_PREFIX)


class EntityParser:
    """Parses kube-state-metrics label sets into EntityInfo objects."""

    # Workload metric -> (entity type, label holding the object name)
    _WORKLOAD_KINDS: dict[MetricName, tuple[EntityType, str]] = {
        MetricName.DEPLOYMENT_LABELS: (EntityType.DEPLOYMENT, LABEL_DEPLOYMENT),
        MetricName.DAEMONSET_LABELS: (EntityType.DAEMONSET, LABEL_DAEMONSET),
        MetricName.STATEFULSET_LABELS: (EntityType.STATEFULSET, LABEL_STATEFULSET),
    }

    def parse(self, labels: dict[str, str]) -> EntityInfo | None:
        """Classify one sample by its metric name.

        Args:
            labels: Label set of one series, including ``__name__``

        Returns:
            EntityInfo, or None when the metric is not part of the inventory.
        """
        metric_name = labels.get(LABEL_METRIC_NAME, "")
        try:
            metric = MetricName(metric_name)
        except ValueError:
            logger.warning("Ignoring unexpected metric name: %s", metric_name)
            return None

        if metric is MetricName.POD_CONTAINER_INFO:
            return self.parse_pod(labels)
        entity_type, name_label = self._WORKLOAD_KINDS[metric]
        return self.parse_workload(labels, entity_type, name_label)

    def parse_pod(self, labels: dict[str, str]) -> EntityInfo:
        return EntityInfo(
            name=labels.get(LABEL_POD, ""),
            type=EntityType.POD,
            container_info=ContainerInfo(
                container_name=labels.get(LABEL_CONTAINER, ""),
                container_image=strip_registry_prefix(labels.get(LABEL_IMAGE, "")),
            ),
        )

    def parse_workload(
        self, labels: dict[str, str], entity_type: EntityType, name_label: str
    ) -> EntityInfo:
        return EntityInfo(
            name=labels.get(name_label, ""),
            type=entity_type,
            chart_name=extract_chart_name(labels),
        )
