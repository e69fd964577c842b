"""
Route Ingest — parses GPS route files into PositionSamples.

Accepted inputs:
    1. CSV with a header row
    2. JSON array of objects
Column / key aliases (case-insensitive):
    timestamp | time | date,  latitude | lat,  longitude | lng | lon

Rows with a missing or unparseable timestamp, non-numeric coordinates, or
coordinates outside [-90, 90] / [-180, 180] are dropped.
"""

import json
import logging
import math
from pathlib import Path

import pandas as pd

from climate_types import PositionSample

logger = logging.getLogger(__name__)

COLUMN_ALIASES = {
    "timestamp": ("timestamp", "time", "date"),
    "latitude": ("latitude", "lat"),
    "longitude": ("longitude", "lng", "lon"),
}


class IngestionError(Exception):
    pass


def _resolve_columns(columns) -> dict:
    """Map canonical field name -> present alias columns, in alias order."""
    lowered = {}
    for col in columns:
        lowered.setdefault(str(col).strip().lower(), col)

    resolved = {
        field: [lowered[a] for a in aliases if a in lowered]
        for field, aliases in COLUMN_ALIASES.items()
    }
    missing = [f for f, cols in resolved.items() if not cols]
    if missing:
        raise IngestionError(f"No column found for {', '.join(missing)} (got: {list(columns)})")
    return resolved


def _coalesce(df: pd.DataFrame, columns: list) -> pd.Series:
    """Per row, the first non-null value among the alias columns."""
    series = df[columns[0]]
    for col in columns[1:]:
        series = series.combine_first(df[col])
    return series


def _parse_timestamp(value):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    text = str(value).strip()
    if not text:
        return None
    ts = pd.to_datetime(text, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def samples_from_frame(df: pd.DataFrame) -> list[PositionSample]:
    """Validate a raw route table and convert the good rows to PositionSamples."""
    if df.empty:
        raise IngestionError("No valid GPS data found in the file.")

    cols = _resolve_columns(df.columns)
    lat = pd.to_numeric(_coalesce(df, cols["latitude"]), errors="coerce")
    lon = pd.to_numeric(_coalesce(df, cols["longitude"]), errors="coerce")

    samples = []
    for raw_ts, la, lo in zip(_coalesce(df, cols["timestamp"]), lat, lon):
        if not (math.isfinite(la) and math.isfinite(lo)):
            continue
        if not (-90 <= la <= 90 and -180 <= lo <= 180):
            continue
        ts = _parse_timestamp(raw_ts)
        if ts is None:
            continue
        samples.append(PositionSample(timestamp=ts, latitude=float(la), longitude=float(lo)))

    dropped = len(df) - len(samples)
    if dropped:
        logger.info(f"Dropped {dropped} of {len(df)} route rows as invalid")
    if not samples:
        raise IngestionError("No valid GPS data found in the file.")
    return samples


def parse_route_csv(source) -> list[PositionSample]:
    """Parse a CSV path or file-like object."""
    try:
        df = pd.read_csv(source, skip_blank_lines=True, dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise IngestionError(f"Failed to parse GPS data: {e}") from e
    return samples_from_frame(df)


def parse_route_json(source) -> list[PositionSample]:
    """Parse a JSON path, file-like object, or already-decoded list."""
    if isinstance(source, (str, Path)):
        try:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to parse GPS data: {e}") from e
    elif hasattr(source, "read"):
        try:
            data = json.load(source)
        except json.JSONDecodeError as e:
            raise IngestionError(f"Failed to parse GPS data: {e}") from e
    else:
        data = source

    if not isinstance(data, list):
        raise IngestionError("Invalid JSON format - expected array of GPS points")
    records = [item for item in data if isinstance(item, dict)]
    return samples_from_frame(pd.DataFrame.from_records(records))


def load_route(path) -> list[PositionSample]:
    """Load a route file, choosing the parser from the extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return parse_route_csv(path)
    elif suffix == ".json":
        return parse_route_json(path)
    raise IngestionError("Unsupported file format. Please use CSV or JSON.")
