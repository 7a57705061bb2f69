"""
Aggregation data schemas using Pandera.

Defines the contract for aggregation records delivered by the
analytics backend. Validation happens once, when a response is
parsed by the API client, not inside the analytical services.
"""

from typing import Optional

import pandera as pa
from pandera.typing import Series


class AggregationSchema(pa.DataFrameModel):
    """
    Flight counts between an origin and a destination region.

    Records are not unique per region pair; the services decide how
    duplicates are combined. Extra columns pass through unchanged.
    """

    source_region: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Origin region label",
    )
    # Absent or null targets are shown as "Unknown"
    target_region: Optional[Series[str]] = pa.Field(
        nullable=True,
        description="Destination region label",
    )
    flight_count: Series[int] = pa.Field(
        ge=0,
        description="Flights attributed to this pair within the time window",
    )
    time_window: Optional[Series[str]] = pa.Field(
        nullable=True,
        description="Streaming window the count belongs to (provenance only)",
    )
    year: Optional[Series[str]] = pa.Field(
        nullable=True,
        description="Historical year the count belongs to (provenance only)",
    )

    class Config:
        strict = False
        coerce = True
        name = "AggregationSchema"
        description = "Region-to-region flight aggregates from the analytics backend"
