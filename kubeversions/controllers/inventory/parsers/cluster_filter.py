"""Cluster name filter applied to inventory samples."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from kubeversions.models.state.app_settings import ConfigError

if TYPE_CHECKING:
    from kubeversions.models.state.app_settings import InventorySettings


class ClusterFilter:
    """Set of cluster name patterns; a name is kept if any pattern matches.

    Patterns are searched, not anchored, so ``prod`` keeps ``eu-prod-1``.
    An empty filter keeps every cluster.
    """

    def __init__(
        self,
        patterns: Iterable[str] = (),
        *,
        include_config_maps: bool = False,
    ) -> None:
        self._patterns: dict[str, re.Pattern[str]] = {}
        # Reserved for config map chart versions; not used by the classifier.
        self.include_config_maps = include_config_maps
        self.add_all(patterns)

    @classmethod
    def from_settings(cls, settings: InventorySettings) -> ClusterFilter:
        return cls(settings.clusters, include_config_maps=settings.include_config_maps)

    def add(self, pattern: str) -> None:
        """Compile and store a cluster pattern.

        Raises:
            ConfigError: If the pattern is not a valid regular expression.
        """
        try:
            self._patterns[pattern] = re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid cluster pattern {pattern!r}: {exc}") from exc

    def add_all(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            self.add(pattern)

    @property
    def patterns(self) -> list[str]:
        return list(self._patterns)

    def is_empty(self) -> bool:
        return not self._patterns

    def has(self, name: str) -> bool:
        """Return True if there are no patterns, or at least one matches name."""
        if self.is_empty():
            return True
        return any(pattern.search(name) for pattern in self._patterns.values())

    def __len__(self) -> int:
        return len(self._patterns)
