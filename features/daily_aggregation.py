"""
Daily Aggregation — collapses raw GPS samples into one point per calendar day.

The date is taken from each sample's own timestamp (no timezone
normalisation); the daily position is the mean of that day's samples and the
timestamp is fixed to 12:00 UTC.
"""

import math
from datetime import datetime, time, timezone

from climate_types import DailyPoint
from data_fetch.route_ingest import IngestionError
from route_clustering import centroid

MIDDAY_UTC = time(12, 0, 0, tzinfo=timezone.utc)


def aggregate_by_day(samples) -> list[DailyPoint]:
    """
    Args:
        samples: iterable of PositionSample

    Returns:
        One DailyPoint per distinct date, in first-seen date order. Callers
        that need chronological order must sort.

    Raises:
        IngestionError if any sample has a non-finite coordinate.
    """
    daily_groups: dict = {}
    for sample in samples:
        if not (math.isfinite(sample.latitude) and math.isfinite(sample.longitude)):
            raise IngestionError(f"Non-finite coordinate in sample at {sample.timestamp}")
        daily_groups.setdefault(sample.timestamp.date(), []).append(sample)

    points = []
    for day, group in daily_groups.items():
        avg_lat, avg_lon = centroid(group)
        points.append(DailyPoint(
            timestamp=datetime.combine(day, MIDDAY_UTC),
            latitude=avg_lat,
            longitude=avg_lon,
        ))
    return points
