"""
Region matrix service for the mobility heatmap.

Turns region-pair aggregation records into a dense origin by
destination matrix together with the maximum cell value used to
normalise colour intensity.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

import pandas as pd

from mobility_dashboard.services.aggregation_service import records_to_frame
from mobility_dashboard.types import AggregationRecord

logger = logging.getLogger(__name__)

__all__ = [
    "RegionMatrix",
    "build_region_matrix",
]


@dataclass(frozen=True)
class RegionMatrix:
    """
    Immutable origin x destination flight count matrix.

    Attributes:
        regions: Every source and target label, de-duplicated and sorted.
            Defines both row and column order.
        counts: Assigned cell values keyed by (source, target).
        max_count: Largest assigned cell, 0 when there is no data.
    """

    regions: Tuple[str, ...]
    counts: Mapping[Tuple[str, str], int]
    max_count: int

    def cell(self, source: str, target: str) -> int:
        """Flight count for a pair, 0 when no record was assigned to it."""
        return self.counts.get((source, target), 0)

    def intensity(self, source: str, target: str) -> float:
        """Cell value scaled to [0, 1] by max_count."""
        if self.max_count <= 0:
            return 0.0
        return self.cell(source, target) / self.max_count

    def is_empty(self) -> bool:
        return not self.regions

    def to_frame(self) -> pd.DataFrame:
        """
        Dense matrix for chart rendering.

        Returns:
            DataFrame indexed by origin region with one column per
            destination region, both in ``regions`` order.
        """
        return pd.DataFrame(
            [[self.cell(source, target) for target in self.regions] for source in self.regions],
            index=pd.Index(self.regions, name="origin"),
            columns=pd.Index(self.regions, name="destination"),
            dtype="int64",
        )


def build_region_matrix(records: Iterable[AggregationRecord]) -> RegionMatrix:
    """
    Build the heatmap matrix from aggregation records.

    Args:
        records: Aggregation records in backend order.

    Returns:
        RegionMatrix with sorted regions, per-pair counts and max_count.
        Empty input gives no regions and max_count of 0.
    """
    frame = records_to_frame(records)

    if frame.empty:
        return RegionMatrix(regions=(), counts=MappingProxyType({}), max_count=0)

    regions = tuple(sorted(set(frame["source_region"]) | set(frame["target_region"])))

    # Last write wins: a later record for the same pair replaces the earlier
    # count. The migration radar sums duplicates instead; keep them different.
    latest = frame.drop_duplicates(
        subset=["source_region", "target_region"], keep="last"
    )
    counts = {
        (source, target): int(count)
        for source, target, count in latest.itertuples(index=False, name=None)
    }

    logger.debug(
        "Built region matrix: %d regions, %d assigned cells", len(regions), len(counts)
    )

    return RegionMatrix(
        regions=regions,
        counts=MappingProxyType(counts),
        # Taken over surviving cells only; overwritten counts are not shown
        max_count=max(counts.values()),
    )
