"""PromQL query construction for the workload inventory."""

from __future__ import annotations

from kubeversions.constants.values import INVENTORY_QUERY_TEMPLATE


def build_inventory_query(namespace: str) -> str:
    """Build the instant query selecting pod container info and workload labels.

    The namespace is inserted verbatim.
    """
    return INVENTORY_QUERY_TEMPLATE.format(namespace=namespace)
