"""Base controller for kubeversions data sources.

Controllers own their fetchers and parsers for the length of one run and
release network resources when closed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any


class BaseController(ABC):
    """Base controller class.

    Subclasses implement the abstract methods to provide specific data
    fetching functionality. Controllers are context managers so the
    underlying HTTP session is always released.
    """

    @abstractmethod
    def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    def fetch_all(self) -> Any:
        """Fetch all data from the source.

        Returns:
            The controller's result object
        """
        ...

    def close(self) -> None:
        """Release resources held by the controller."""

    def __enter__(self) -> BaseController:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
