"""Shared fixtures for kubeversions tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def pod_sample() -> dict[str, str]:
    """kube_pod_container_info sample for a Docker Hub image."""
    return {
        "__name__": "kube_pod_container_info",
        "cluster_name": "prod",
        "namespace": "default",
        "pod": "p1",
        "container": "c1",
        "image": "docker.io/nginx:1.2",
    }


@pytest.fixture
def deployment_sample() -> dict[str, str]:
    """kube_deployment_labels sample carrying a chart label."""
    return {
        "__name__": "kube_deployment_labels",
        "cluster_name": "prod",
        "namespace": "default",
        "deployment": "web",
        "label_chart": "web-1.0",
    }
