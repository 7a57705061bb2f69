"""
HTTP client for the air traffic analytics backend.

Wraps the backend's JSON endpoints (status, live flights, streaming
and batch aggregates, insights, streaming control) behind a
requests session with retry logic. Every response is checked against
its documented shape before it reaches the dashboard.
"""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd
import pandera as pa
import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from mobility_dashboard.api.models import Insights, LiveFlight, SystemStatus
from mobility_dashboard.config import DashboardConfig
from mobility_dashboard.exceptions import InvalidPayloadError, MobilityAPIError
from mobility_dashboard.schemas import AggregationSchema
from mobility_dashboard.types import AggregationRecord

logger = logging.getLogger(__name__)

__all__ = ["MobilityApiClient"]


def _safe_json(response: Optional[requests.Response]) -> Optional[Any]:
    """Best-effort decode of an error body for logging."""
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _extract_data(endpoint: str, body: Any) -> List[Dict[str, Any]]:
    """Unwrap the ``{"data": [...]}`` envelope used by collection endpoints."""
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise InvalidPayloadError(endpoint, f"{endpoint} did not return a data list")
    return body["data"]


class MobilityApiClient:
    """Client for the analytics backend consumed by the dashboard."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Backend root URL. Falls back to DashboardConfig.api.base_url.
            timeout: Per-request timeout in seconds.
            retries: Number of retry attempts for failed GET requests.
            backoff_factor: Backoff factor for retries.
            session: Preconfigured session (used as-is, no retry adapter mounted).
        """
        config = DashboardConfig.api
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.timeout_seconds

        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=retries if retries is not None else config.retries,
                backoff_factor=(
                    backoff_factor if backoff_factor is not None else config.backoff_factor
                ),
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self.session = session

    # -------------------------------
    # Transport
    # -------------------------------
    def _send(
        self, method: str, path: str, params: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)

        try:
            response = self.session.request(
                method, url, params=params, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.HTTPError as error:
            failed = error.response
            status_code = failed.status_code if failed is not None else -1
            payload = _safe_json(failed)
            logger.error("HTTPError %s on %s: %s | Response: %s", status_code, path, error, payload)
            raise MobilityAPIError(status_code, str(error), payload) from error
        except requests.RequestException as error:
            logger.error("Network error on %s: %s", path, error)
            raise MobilityAPIError(-1, f"Network error: {error}") from error

        return response

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self._send("GET", path, params)
        try:
            return response.json()
        except ValueError as error:
            logger.error("Invalid JSON response from %s: %s", path, error)
            raise MobilityAPIError(
                response.status_code, f"Invalid JSON response: {error}"
            ) from error

    def _get_aggregations(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[AggregationRecord]:
        records = _extract_data(path, self._get_json(path, params))
        if not records:
            return []

        try:
            AggregationSchema.validate(pd.DataFrame.from_records(records))
        except (pa.errors.SchemaError, TypeError, ValueError) as error:
            logger.error("Aggregation payload from %s failed validation: %s", path, error)
            raise InvalidPayloadError(path, str(error)) from error

        logger.info("Fetched %d aggregation records from %s", len(records), path)
        return records

    # -------------------------------
    # Endpoints
    # -------------------------------
    def get_status(self) -> SystemStatus:
        """Fetch backend health and the streaming flag."""
        body = self._get_json("/api/status")
        try:
            return SystemStatus.model_validate(body)
        except ValidationError as error:
            raise InvalidPayloadError("/api/status", str(error)) from error

    def get_realtime(self) -> List[LiveFlight]:
        """Fetch flights currently observed by the backend."""
        items = _extract_data("/api/realtime", self._get_json("/api/realtime"))
        try:
            return [LiveFlight.model_validate(item) for item in items]
        except ValidationError as error:
            raise InvalidPayloadError("/api/realtime", str(error)) from error

    def get_streaming(self) -> List[AggregationRecord]:
        """Fetch current aggregates produced by the streaming job."""
        return self._get_aggregations("/api/streaming")

    def get_batch_regions(self, limit: int = 10) -> List[AggregationRecord]:
        """
        Fetch historical region aggregates produced by the batch job.

        Args:
            limit: Maximum number of records the backend should return.
        """
        return self._get_aggregations("/api/batch/regions", {"limit": limit})

    def get_insights(self) -> Insights:
        """Fetch processing statistics reported by the backend."""
        body = self._get_json("/api/insights")
        try:
            return Insights.model_validate(body)
        except ValidationError as error:
            raise InvalidPayloadError("/api/insights", str(error)) from error

    def start_streaming(self) -> None:
        logger.info("Requesting streaming start")
        self._send("POST", "/api/streaming/start")

    def stop_streaming(self) -> None:
        logger.info("Requesting streaming stop")
        self._send("POST", "/api/streaming/stop")

    def export_csv_url(self) -> str:
        """URL of the batch CSV export, opened by the browser directly."""
        return f"{self.base_url}/api/export/batch/csv"
