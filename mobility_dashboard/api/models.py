"""
Pydantic models for the non-tabular analytics backend responses.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FilesAvailable(BaseModel):
    batch_regions: bool = False
    batch_countries: bool = False
    streaming_data: bool = False
    insights: bool = False


class SystemStatus(BaseModel):
    status: str
    backend: Optional[str] = None
    streaming_active: bool = False
    timestamp: str
    refresh_interval: Optional[int] = None
    files_available: Optional[FilesAvailable] = None


class LiveFlight(BaseModel):
    callsign: str
    source_region: str
    timestamp: str
    icao24: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Insights(BaseModel):
    # The insights panel shows whatever the backend reports
    model_config = ConfigDict(extra="allow")

    timestamp: str
    data_sources: List[str] = Field(default_factory=list)
    streaming_batches: Optional[int] = None
    latest_flight_count: Optional[int] = None
    historical_records: Optional[int] = None
    region_pairs_analyzed: Optional[int] = None
    total_flights_processed: Optional[int] = None
