"""Inventory entity models built from kube-state-metrics samples."""

from pydantic import BaseModel, Field

from kubeversions.constants.enums import EntityType


class ContainerInfo(BaseModel):
    """Container name and image for a pod row."""

    container_name: str = ""
    container_image: str = ""


class EntityInfo(BaseModel):
    """One pod container or workload discovered in a cluster.

    ``container_info`` is only populated for pods and ``chart_name`` only for
    workloads.
    """

    name: str
    type: EntityType
    chart_name: str = ""
    container_info: ContainerInfo = Field(default_factory=ContainerInfo)

    @property
    def is_pod(self) -> bool:
        """Return True when this entity is a pod container."""
        return self.type is EntityType.POD

    @property
    def container_name(self) -> str:
        return self.container_info.container_name

    @property
    def container_image(self) -> str:
        return self.container_info.container_image

    def sort_key(self) -> tuple[str, str]:
        """Display order key: type label first, then entity name."""
        return self.type.value, self.name
