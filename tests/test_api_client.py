"""Tests for the analytics backend client."""

import pytest
import requests

from mobility_dashboard.api.client import MobilityApiClient
from mobility_dashboard.api.models import Insights, LiveFlight, SystemStatus
from mobility_dashboard.exceptions import InvalidPayloadError, MobilityAPIError

from fakes import FakeResponse, FakeSession

BASE_URL = "http://backend.test"


def _client(routes) -> MobilityApiClient:
    return MobilityApiClient(base_url=BASE_URL, session=FakeSession(routes, BASE_URL))


class TestAggregationEndpoints:
    """Tests for streaming and batch aggregate fetching."""

    def test_streaming_returns_records(self) -> None:
        """Test that the data envelope is unwrapped."""
        records = [
            {"source_region": "EU", "target_region": "AS", "flight_count": 60},
            {"source_region": "EU", "target_region": None, "flight_count": 4},
        ]
        client = _client({("GET", "/api/streaming"): FakeResponse(body={"data": records})})

        assert client.get_streaming() == records

    def test_batch_sends_limit(self) -> None:
        """Test that the result-size limit is passed as a query parameter."""
        session = FakeSession(
            {("GET", "/api/batch/regions"): FakeResponse(body={"data": []})}, BASE_URL
        )
        client = MobilityApiClient(base_url=BASE_URL, session=session)

        assert client.get_batch_regions(1000) == []
        assert session.calls == [("GET", "/api/batch/regions", {"limit": 1000})]

    def test_missing_data_key(self) -> None:
        """Test that a body without a data list is rejected."""
        client = _client({("GET", "/api/streaming"): FakeResponse(body={"rows": []})})

        with pytest.raises(InvalidPayloadError) as exc_info:
            client.get_streaming()

        assert exc_info.value.endpoint == "/api/streaming"

    def test_negative_count_rejected(self) -> None:
        """Test that schema validation rejects negative flight counts."""
        records = [{"source_region": "EU", "target_region": "AS", "flight_count": -1}]
        client = _client({("GET", "/api/streaming"): FakeResponse(body={"data": records})})

        with pytest.raises(InvalidPayloadError):
            client.get_streaming()

    def test_empty_source_rejected(self) -> None:
        """Test that schema validation rejects an empty source region."""
        records = [{"source_region": "", "target_region": "AS", "flight_count": 1}]
        client = _client({("GET", "/api/streaming"): FakeResponse(body={"data": records})})

        with pytest.raises(InvalidPayloadError):
            client.get_streaming()


class TestObjectEndpoints:
    """Tests for status, realtime and insights parsing."""

    def test_status(self) -> None:
        body = {"status": "ok", "streaming_active": True, "timestamp": "2024-07-15T10:00:00Z"}
        client = _client({("GET", "/api/status"): FakeResponse(body=body)})

        result = client.get_status()

        assert isinstance(result, SystemStatus)
        assert result.streaming_active is True

    def test_status_missing_fields(self) -> None:
        client = _client({("GET", "/api/status"): FakeResponse(body={"status": "ok"})})

        with pytest.raises(InvalidPayloadError):
            client.get_status()

    def test_realtime(self) -> None:
        body = {
            "data": [
                {"callsign": "LOT123", "source_region": "EU", "timestamp": "2024-07-15T10:00:00Z"}
            ]
        }
        client = _client({("GET", "/api/realtime"): FakeResponse(body=body)})

        result = client.get_realtime()

        assert result == [
            LiveFlight(callsign="LOT123", source_region="EU", timestamp="2024-07-15T10:00:00Z")
        ]

    def test_insights_keeps_extra_fields(self) -> None:
        """Test that unknown insight fields survive for the raw panel."""
        body = {"timestamp": "2024-07-15T10:00:00Z", "data_sources": ["opensky"], "lag_ms": 12}
        client = _client({("GET", "/api/insights"): FakeResponse(body=body)})

        result = client.get_insights()

        assert isinstance(result, Insights)
        assert result.model_dump()["lag_ms"] == 12


class TestErrors:
    """Tests for transport error handling."""

    def test_http_error(self) -> None:
        """Test that HTTP errors carry status code and body."""
        client = _client(
            {("GET", "/api/status"): FakeResponse(status_code=503, body={"detail": "down"})}
        )

        with pytest.raises(MobilityAPIError) as exc_info:
            client.get_status()

        assert exc_info.value.status_code == 503
        assert exc_info.value.payload == {"detail": "down"}

    def test_network_error(self) -> None:
        """Test that connection failures use status code -1."""
        client = _client({("GET", "/api/status"): requests.ConnectionError("refused")})

        with pytest.raises(MobilityAPIError) as exc_info:
            client.get_status()

        assert exc_info.value.status_code == -1

    def test_invalid_json(self) -> None:
        client = _client({("GET", "/api/status"): FakeResponse(invalid_json=True)})

        with pytest.raises(MobilityAPIError, match="Invalid JSON"):
            client.get_status()


class TestStreamingControl:
    """Tests for start/stop and export URL."""

    def test_start_and_stop_post(self) -> None:
        session = FakeSession(
            {
                ("POST", "/api/streaming/start"): FakeResponse(),
                ("POST", "/api/streaming/stop"): FakeResponse(),
            },
            BASE_URL,
        )
        client = MobilityApiClient(base_url=BASE_URL, session=session)

        client.start_streaming()
        client.stop_streaming()

        assert [call[:2] for call in session.calls] == [
            ("POST", "/api/streaming/start"),
            ("POST", "/api/streaming/stop"),
        ]

    def test_export_url_strips_trailing_slash(self) -> None:
        client = MobilityApiClient(base_url=BASE_URL + "/", session=FakeSession({}, BASE_URL))

        assert client.export_csv_url() == "http://backend.test/api/export/batch/csv"
