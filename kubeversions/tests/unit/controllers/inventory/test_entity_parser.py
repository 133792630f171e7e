"""Tests for entity parser."""

from __future__ import annotations

import logging

import pytest

from kubeversions.constants.enums import EntityType
from kubeversions.controllers.inventory.parsers.entity_parser import (
    EntityParser,
    extract_chart_name,
    strip_registry_prefix,
)


class TestExtractChartName:
    """Tests for extract_chart_name helper."""

    def test_legacy_label(self) -> None:
        assert extract_chart_name({"label_chart": "web-1.0"}) == "web-1.0"

    def test_helm_label(self) -> None:
        assert extract_chart_name({"label_helm_sh_chart": "web-2.0"}) == "web-2.0"

    def test_prefers_legacy_label(self) -> None:
        labels = {"label_helm_sh_chart": "web-2.0", "label_chart": "web-1.0"}
        assert extract_chart_name(labels) == "web-1.0"

    def test_present_empty_legacy_label_wins(self) -> None:
        labels = {"label_chart": "", "label_helm_sh_chart": "web-2.0"}
        assert extract_chart_name(labels) == ""

    def test_missing_labels(self) -> None:
        assert extract_chart_name({"deployment": "web"}) == ""


class TestStripRegistryPrefix:
    """Tests for strip_registry_prefix helper."""

    def test_strips_docker_hub(self) -> None:
        assert strip_registry_prefix("docker.io/nginx:1.2") == "nginx:1.2"

    def test_keeps_other_registries(self) -> None:
        assert strip_registry_prefix("quay.io/prometheus/node:1") == "quay.io/prometheus/node:1"

    def test_only_leading_prefix(self) -> None:
        assert strip_registry_prefix("ghcr.io/docker.io/tool:1") == "ghcr.io/docker.io/tool:1"


class TestEntityParser:
    """Tests for EntityParser class."""

    @pytest.fixture
    def parser(self) -> EntityParser:
        """Create EntityParser instance."""
        return EntityParser()

    def test_parse_pod(self, parser: EntityParser, pod_sample: dict[str, str]) -> None:
        entity = parser.parse(pod_sample)

        assert entity is not None
        assert entity.type is EntityType.POD
        assert entity.name == "p1"
        assert entity.container_name == "c1"
        assert entity.container_image == "nginx:1.2"
        assert entity.chart_name == ""

    def test_parse_deployment(
        self, parser: EntityParser, deployment_sample: dict[str, str]
    ) -> None:
        entity = parser.parse(deployment_sample)

        assert entity is not None
        assert entity.type is EntityType.DEPLOYMENT
        assert entity.name == "web"
        assert entity.chart_name == "web-1.0"
        assert entity.container_name == ""
        assert entity.container_image == ""

    def test_parse_daemonset_uses_daemonset_label(self, parser: EntityParser) -> None:
        entity = parser.parse(
            {
                "__name__": "kube_daemonset_labels",
                "daemonset": "node-exporter",
                "label_helm_sh_chart": "node-exporter-4.1.0",
            }
        )

        assert entity is not None
        assert entity.type is EntityType.DAEMONSET
        assert entity.name == "node-exporter"
        assert entity.chart_name == "node-exporter-4.1.0"

    def test_parse_statefulset_uses_statefulset_label(self, parser: EntityParser) -> None:
        entity = parser.parse(
            {"__name__": "kube_statefulset_labels", "statefulset": "redis"}
        )

        assert entity is not None
        assert entity.type is EntityType.STATEFULSET
        assert entity.name == "redis"
        assert entity.chart_name == ""

    def test_unknown_metric_skipped_with_warning(
        self, parser: EntityParser, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            entity = parser.parse({"__name__": "kube_pod_info", "pod": "p1"})

        assert entity is None
        assert "Ignoring unexpected metric name: kube_pod_info" in caplog.text

    def test_missing_metric_name_skipped(self, parser: EntityParser) -> None:
        assert parser.parse({"pod": "p1"}) is None

    def test_missing_name_label_gives_empty_name(self, parser: EntityParser) -> None:
        entity = parser.parse({"__name__": "kube_deployment_labels"})

        assert entity is not None
        assert entity.name == ""
