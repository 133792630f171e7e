"""Tests for inventory report generator."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from kubeversions.constants.enums import EntityType
from kubeversions.models.core.cluster_result import ClusterResultSet
from kubeversions.models.core.entity_info import ContainerInfo, EntityInfo
from kubeversions.utils.report_generator import InventoryReport


def _console() -> Console:
    return Console(file=io.StringIO(), width=160, color_system=None)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def _pod(name: str, image: str) -> EntityInfo:
    return EntityInfo(
        name=name,
        type=EntityType.POD,
        container_info=ContainerInfo(container_name="main", container_image=image),
    )


class TestInventoryReport:
    """Tests for InventoryReport class."""

    @pytest.fixture
    def data(self) -> ClusterResultSet:
        data = ClusterResultSet()
        data.add("cluster-alpha", _pod("api-7d9f", "nginx:1.25"))
        data.add("cluster-alpha", _pod("worker-5c2a", "busybox:1.36"))
        data.add(
            "cluster-alpha",
            EntityInfo(name="api", type=EntityType.DEPLOYMENT, chart_name="api-3.2.1"),
        )
        data.add("cluster-beta", _pod("cache-0", "redis:7"))
        data.sort_entries()
        return data

    def test_render_both_tables(self, data: ClusterResultSet) -> None:
        console = _console()

        InventoryReport(data, console=console).render()

        output = _output(console)
        assert "PODS" in output
        assert "DEPLOYS" in output
        assert "nginx:1.25" in output
        assert "redis:7" in output
        assert "api-3.2.1" in output
        assert "Deployment" in output
        assert output.index("PODS") < output.index("DEPLOYS")

    def test_render_pods_only(self, data: ClusterResultSet) -> None:
        console = _console()

        InventoryReport(data, console=console).render(show_pods=True, show_deploys=False)

        output = _output(console)
        assert "PODS" in output
        assert "DEPLOYS" not in output

    def test_render_deploys_only(self, data: ClusterResultSet) -> None:
        console = _console()

        InventoryReport(data, console=console).render(show_pods=False, show_deploys=True)

        output = _output(console)
        assert "PODS" not in output
        assert "DEPLOYS" in output

    def test_render_skips_table_without_rows(self) -> None:
        data = ClusterResultSet()
        data.add("cluster-alpha", _pod("api-7d9f", "nginx:1.25"))
        console = _console()

        InventoryReport(data, console=console).render()

        output = _output(console)
        assert "PODS" in output
        assert "DEPLOYS" not in output

    def test_render_empty_result_logs_instead_of_printing(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        console = _console()

        with caplog.at_level(logging.INFO):
            InventoryReport(ClusterResultSet(), console=console).render()

        assert _output(console) == ""
        assert "No workloads found" in caplog.text

    def test_cluster_name_only_on_first_row(self, data: ClusterResultSet) -> None:
        console = _console()
        console.print(InventoryReport(data, console=console).build_pods_table())

        output = _output(console)
        assert output.count("cluster-alpha") == 1
        assert output.count("cluster-beta") == 1

    def test_pods_table_columns(self, data: ClusterResultSet) -> None:
        table = InventoryReport(data).build_pods_table()

        assert [column.header for column in table.columns] == [
            "Cluster",
            "Pod",
            "Container",
            "Image",
        ]
        assert table.row_count == 3

    def test_deploys_table_columns(self, data: ClusterResultSet) -> None:
        table = InventoryReport(data).build_deploys_table()

        assert [column.header for column in table.columns] == [
            "Cluster",
            "Type",
            "Name",
            "Chart",
        ]
        assert table.row_count == 1
