"""Tests for features.daily_aggregation."""

from datetime import date, datetime, timezone

import pytest

from climate_types import PositionSample
from data_fetch.route_ingest import IngestionError
from features.daily_aggregation import aggregate_by_day
from conftest import sample


def test_one_point_per_date_at_mean_position():
    samples = [
        sample("2024-06-01T08:00:00", 10.0, 20.0),
        sample("2024-06-01T12:30:00", 10.01, 20.01),
        sample("2024-06-02T09:00:00", 11.0, 21.0),
        sample("2024-06-01T18:45:00", 10.02, 20.02),
    ]
    points = {p.date: p for p in aggregate_by_day(samples)}

    assert set(points) == {date(2024, 6, 1), date(2024, 6, 2)}
    assert points[date(2024, 6, 1)].latitude == pytest.approx(10.01)
    assert points[date(2024, 6, 1)].longitude == pytest.approx(20.01)
    assert points[date(2024, 6, 2)].latitude == pytest.approx(11.0)


def test_timestamp_fixed_to_midday_utc():
    (point,) = aggregate_by_day([sample("2024-06-01T23:59:00", 1.0, 2.0)])
    assert point.timestamp == datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert point.date_key == "20240601"


def test_date_taken_from_sample_clock_without_normalisation():
    # 23:30 at +05:00 is still 1 June on the sample's own clock
    (point,) = aggregate_by_day([sample("2024-06-01T23:30:00+05:00", 1.0, 2.0)])
    assert point.date == date(2024, 6, 1)


def test_empty_input_gives_no_points():
    assert aggregate_by_day([]) == []


def test_non_finite_coordinates_rejected():
    bad = PositionSample(datetime(2024, 6, 1, 9), float("nan"), 20.0)
    with pytest.raises(IngestionError):
        aggregate_by_day([sample("2024-06-01T08:00:00", 10.0, 20.0), bad])
