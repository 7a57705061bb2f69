"""Tests for aggregation service module."""

from typing import Any, Dict, List

from mobility_dashboard.services.aggregation_service import (
    AGGREGATION_COLUMNS,
    UNKNOWN_REGION,
    normalize_target,
    records_to_frame,
    route_key,
    total_flights,
)


class TestNormalizeTarget:
    """Tests for normalize_target function."""

    def test_keeps_label(self) -> None:
        """Test that a present destination is unchanged."""
        assert normalize_target("AS") == "AS"

    def test_none_becomes_unknown(self) -> None:
        """Test that a null destination maps to the sentinel."""
        assert normalize_target(None) == UNKNOWN_REGION

    def test_empty_string_becomes_unknown(self) -> None:
        """Test that an empty destination maps to the sentinel."""
        assert normalize_target("") == UNKNOWN_REGION

    def test_nan_becomes_unknown(self) -> None:
        """Test that a NaN destination (from a DataFrame) maps to the sentinel."""
        assert normalize_target(float("nan")) == UNKNOWN_REGION


class TestRouteKey:
    """Tests for route_key function."""

    def test_missing_target_key(self) -> None:
        """Test that a record without target_region is keyed to Unknown."""
        assert route_key({"source_region": "EU", "flight_count": 1}) == ("EU", "Unknown")


class TestRecordsToFrame:
    """Tests for records_to_frame function."""

    def test_empty_keeps_columns(self) -> None:
        """Test that empty input yields an empty frame with expected columns."""
        result = records_to_frame([])

        assert result.empty
        assert list(result.columns) == AGGREGATION_COLUMNS

    def test_preserves_input_order(self, mixed_records: List[Dict[str, Any]]) -> None:
        """Test that rows follow input order."""
        result = records_to_frame(mixed_records)

        assert result["source_region"].tolist() == ["NA", "EU", "AS"]

    def test_normalizes_targets(self, mixed_records: List[Dict[str, Any]]) -> None:
        """Test that missing targets are replaced."""
        result = records_to_frame(mixed_records)

        assert result["target_region"].tolist() == ["EU", "Unknown", "EU"]

    def test_drops_provenance_columns(self, mixed_records: List[Dict[str, Any]]) -> None:
        """Test that time_window and year do not reach the frame."""
        result = records_to_frame(mixed_records)

        assert "time_window" not in result.columns


class TestTotalFlights:
    """Tests for total_flights function."""

    def test_sums_counts(self, current_records: List[Dict[str, Any]]) -> None:
        assert total_flights(current_records) == 100

    def test_empty_is_zero(self) -> None:
        assert total_flights([]) == 0
