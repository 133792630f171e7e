"""Metrics fetcher for inventory controller - runs instant queries against Prometheus."""

from __future__ import annotations

import json
import logging
import time
from typing import Any
from urllib.parse import urlparse

import requests
import urllib3

from kubeversions.constants.defaults import TIMEOUT_SECONDS_DEFAULT
from kubeversions.constants.enums import ResultType
from kubeversions.constants.timeouts import READY_CHECK_TIMEOUT
from kubeversions.constants.values import (
    DEFAULT_URL_SCHEME,
    QUERY_API_PATH,
    QUERY_READ_CHUNK_SIZE,
    READY_API_PATH,
)
from kubeversions.controllers.inventory.exceptions import (
    MetricsClientError,
    MetricsConnectionError,
    MetricsQueryError,
    MetricsTimeoutError,
    UnexpectedResultTypeError,
)

logger = logging.getLogger(__name__)

_SUPPORTED_SCHEMES = ("http", "https")


def normalize_base_url(url: str) -> str:
    """Return an absolute Prometheus base URL without a trailing slash.

    ``localhost:9090`` becomes ``http://localhost:9090``.

    Raises:
        MetricsClientError: If the URL has no host or an unsupported scheme.
    """
    url = url.strip()
    if not url:
        raise MetricsClientError("Prometheus API address is empty")
    if "://" not in url:
        url = DEFAULT_URL_SCHEME + url

    parsed = urlparse(url)
    if parsed.scheme not in _SUPPORTED_SCHEMES or not parsed.netloc:
        raise MetricsClientError(f"Could not create prometheus client for {url!r}")
    return url.rstrip("/")


class MetricsFetcher:
    """Fetches instant-vector samples from the Prometheus HTTP API."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = TIMEOUT_SECONDS_DEFAULT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize metrics fetcher.

        Args:
            base_url: Prometheus address, with or without scheme
            timeout: Default query timeout in seconds
            session: Optional requests session to reuse
        """
        if timeout <= 0:
            raise MetricsClientError(f"Query timeout must be positive, got {timeout}")
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def check_connection(self) -> bool:
        """Probe the Prometheus readiness endpoint.

        Returns:
            True if the server answered the probe with a success status.
        """
        try:
            response = self.session.get(
                self.base_url + READY_API_PATH, timeout=READY_CHECK_TIMEOUT
            )
        except requests.exceptions.RequestException as exc:
            logger.debug("Readiness probe against %s failed: %s", self.base_url, exc)
            return False
        return response.ok

    def fetch(self, query: str, timeout: float | None = None) -> list[dict[str, str]]:
        """Run an instant query and return the label set of every sample.

        The timeout is one deadline for the whole call. It is sent to Prometheus
        as the evaluation timeout, and the body is read one socket read at a
        time so a backend that trickles its answer is cut off once it passes.

        Args:
            query: PromQL expression
            timeout: Timeout in seconds, defaults to the fetcher timeout

        Returns:
            One label name to value mapping per result row.

        Raises:
            MetricsConnectionError: Backend unreachable.
            MetricsTimeoutError: Query did not finish in time.
            MetricsQueryError: Backend rejected the query or sent a bad payload.
            UnexpectedResultTypeError: Result is not an instant vector.
        """
        effective_timeout = self.timeout if timeout is None else timeout
        deadline = time.monotonic() + effective_timeout
        params = {
            "query": query,
            "time": f"{time.time():.3f}",
            "timeout": f"{effective_timeout:g}",
        }

        try:
            response = self.session.get(
                self.base_url + QUERY_API_PATH,
                params=params,
                timeout=effective_timeout,
                stream=True,
            )
            try:
                body = self._read_body(response, deadline, effective_timeout)
            finally:
                response.close()
        except requests.exceptions.Timeout as exc:
            raise MetricsTimeoutError(
                f"Prometheus query timed out after {effective_timeout}s"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise MetricsConnectionError(
                f"Error querying Prometheus at {self.base_url}: {exc}"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise MetricsQueryError(f"Error querying Prometheus: {exc}") from exc

        data = self._decode_response(response, body)

        warnings = data.get("warnings") or []
        if warnings:
            logger.warning("Prometheus query warnings: %s", warnings)

        result = data.get("data")
        if not isinstance(result, dict):
            raise MetricsQueryError("Malformed response from Prometheus: 'data' is not an object")
        result_type = result.get("resultType")
        if result_type != ResultType.VECTOR.value:
            raise UnexpectedResultTypeError(result_type, query)

        rows = result.get("result") or []
        if not isinstance(rows, list):
            raise MetricsQueryError("Malformed response from Prometheus: 'result' is not a list")
        logger.debug("%d metrics received", len(rows))
        return [self.metric_labels(row) for row in rows]

    @staticmethod
    def metric_labels(row: Any) -> dict[str, str]:
        """Convert one vector row's metric object into a plain label mapping.

        Raises:
            MetricsQueryError: If the row or its metric is not an object.
        """
        metric = row.get("metric") if isinstance(row, dict) else None
        if not isinstance(metric, dict):
            raise MetricsQueryError(
                f"Malformed response from Prometheus: bad vector row {row!r}"
            )
        return {str(name): str(value) for name, value in metric.items()}

    @staticmethod
    def _read_body(
        response: requests.Response, deadline: float, timeout: float
    ) -> bytes:
        """Read the body one socket read at a time, stopping at the deadline."""
        chunks: list[bytes] = []
        try:
            while True:
                chunk = response.raw.read1(QUERY_READ_CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise MetricsTimeoutError(
                        f"Prometheus query timed out after {timeout}s"
                    )
        except urllib3.exceptions.ReadTimeoutError as exc:
            raise MetricsTimeoutError(f"Prometheus query timed out after {timeout}s") from exc
        except urllib3.exceptions.HTTPError as exc:
            raise MetricsConnectionError(f"Error reading Prometheus response: {exc}") from exc
        return b"".join(chunks)

    @staticmethod
    def _decode_response(response: requests.Response, body: bytes) -> dict[str, Any]:
        """Decode the API envelope, raising MetricsQueryError on any failure."""
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise MetricsQueryError(
                f"Non-JSON response from Prometheus (HTTP {response.status_code})"
            ) from exc

        if not isinstance(data, dict):
            raise MetricsQueryError(
                f"Malformed response from Prometheus (HTTP {response.status_code})"
            )

        status = data.get("status")
        if status == "error":
            error_type = data.get("errorType")
            raise MetricsQueryError(
                f"Prometheus query failed ({error_type}): {data.get('error', 'unknown error')}",
                error_type=error_type,
            )
        if not response.ok:
            raise MetricsQueryError(
                f"Prometheus query failed with HTTP {response.status_code}"
            )
        if status != "success":
            raise MetricsQueryError(f"Unexpected response status from Prometheus: {status}")
        return data
