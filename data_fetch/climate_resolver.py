"""
ClimateResolver — attaches one daily ClimateRecord to every route point.

Steps:
    1. Group points with seeded single-link clustering (0.1° by default)
    2. One NASA POWER request per group: centroid position, min..max date
    3. Look up each member's own date in the response
    4. On request failure, give every member of that group a synthetic record

Requests are strictly sequential, with a pause before each one after the
first to respect the provider rate limit.
"""

import logging
import time
from typing import Callable, Optional

import numpy as np

from climate_client import ClimateClient, ClimateClientError
from climate_types import ClimateRecord, DailyPoint
from config.constants import (
    DEFAULT_HUMIDITY,
    DEFAULT_MAX_TEMP_OFFSET,
    DEFAULT_SOLAR_RADIATION,
    SOURCE_PROVIDER,
    SOURCE_SYNTHETIC,
)
from config.settings import ProviderSettings
from route_clustering import centroid, cluster

logger = logging.getLogger(__name__)


def uv_index_from_irradiance(uva: float, uvb: float) -> float:
    """Approximate UV index from UVA + UVB irradiance, clamped to 0-11."""
    return float(np.clip((uva + uvb) / 25, 0, 11))


def synthetic_record(point: DailyPoint, rng: np.random.Generator) -> ClimateRecord:
    """
    Random stand-in record used when the provider is unavailable.

    Placeholders for continuity only, not physical estimates.
    """
    return ClimateRecord(
        date=point.date,
        latitude=point.latitude,
        longitude=point.longitude,
        temperature=20 + rng.uniform(0, 25),
        max_temperature=25 + rng.uniform(0, 30),
        solar_radiation=100 + rng.uniform(0, 400),
        humidity=30 + rng.uniform(0, 50),
        uv_index=1 + rng.uniform(0, 10),
        source=SOURCE_SYNTHETIC,
    )


def record_from_parameters(point: DailyPoint, parameter: dict) -> Optional[ClimateRecord]:
    """
    Build the record for one point from a POWER parameter mapping.

    Returns None when T2M is missing for the point's date. Missing secondary
    values get point-local defaults.
    """
    key = point.date_key

    def value(name):
        return (parameter.get(name) or {}).get(key)

    temperature = value("T2M")
    if temperature is None:
        return None

    max_temperature = value("T2M_MAX")
    solar_radiation = value("ALLSKY_SFC_SW_DWN")
    humidity = value("RH2M")

    return ClimateRecord(
        date=point.date,
        latitude=point.latitude,
        longitude=point.longitude,
        temperature=temperature,
        max_temperature=max_temperature if max_temperature is not None else temperature + DEFAULT_MAX_TEMP_OFFSET,
        solar_radiation=solar_radiation if solar_radiation is not None else DEFAULT_SOLAR_RADIATION,
        humidity=humidity if humidity is not None else DEFAULT_HUMIDITY,
        uv_index=uv_index_from_irradiance(value("ALLSKY_SFC_UVA") or 0, value("ALLSKY_SFC_UVB") or 0),
        source=SOURCE_PROVIDER,
    )


class ClimateResolver:
    """Resolve climate records for a set of daily route points."""

    def __init__(
        self,
        client: Optional[ClimateClient] = None,
        settings: Optional[ProviderSettings] = None,
        rng: Optional[np.random.Generator] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or ProviderSettings.load()
        self.client = client or ClimateClient.from_settings(self.settings)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sleep = sleep
        self.errors: dict[int, str] = {}
        self.requests_made = 0
        self.dropped_points = 0

    # ─── public entry ────────────────────────────────────────────────
    def resolve(self, daily_points) -> list[ClimateRecord]:
        """
        Returns at most one record per input point, grouped by cluster rather
        than in input order. Provider failures never raise; see `errors`.
        """
        self.errors = {}
        self.requests_made = 0
        self.dropped_points = 0

        groups = cluster(daily_points, self.settings.cluster_threshold)
        records: list[ClimateRecord] = []

        for idx, group in enumerate(groups):
            if idx > 0:
                self.sleep(self.settings.request_delay)
            records.extend(self._resolve_group(idx, group))

        logger.info(
            f"Resolved {len(records)} climate records from {len(groups)} request(s); "
            f"{len(self.errors)} group(s) synthetic, {self.dropped_points} point(s) without T2M"
        )
        return records

    # ─── one provider request ────────────────────────────────────────
    def _resolve_group(self, idx: int, group: list[DailyPoint]) -> list[ClimateRecord]:
        lat, lon = centroid(group)
        date_keys = [int(p.date_key) for p in group]
        start, end = str(min(date_keys)), str(max(date_keys))

        logger.debug(f"Group {idx}: {len(group)} point(s) at ({lat:.4f}, {lon:.4f}) {start}-{end}")
        self.requests_made += 1
        try:
            parameter = self.client.fetch_daily_point(lat, lon, start, end)
        except ClimateClientError as e:
            self.errors[idx] = str(e)
            logger.warning(
                f"Climate fetch failed for group {idx} ({lat:.4f}, {lon:.4f}) {start}-{end}, "
                f"using synthetic data for {len(group)} point(s): {e}"
            )
            return [synthetic_record(p, self.rng) for p in group]

        records = []
        for point in group:
            record = record_from_parameters(point, parameter)
            if record is None:
                self.dropped_points += 1
                logger.info(f"No T2M for {point.date} at ({point.latitude:.4f}, {point.longitude:.4f}); point dropped")
                continue
            records.append(record)
        return records

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
