"""Tests for analysis.results_export and analysis.route_summary."""

from dataclasses import replace

import pandas as pd
import pytest

from analysis.results_export import EXPORT_COLUMNS, export_csv, results_to_frame
from analysis.route_summary import summarize_route
from climate_types import ClimateRecord
from models.surface_stress_model import derive_all
from conftest import noon


def _records():
    base = ClimateRecord(
        date=noon(2024, 6, 1).date(), latitude=10.123456789, longitude=-20.5,
        temperature=15.0, max_temperature=21.0, solar_radiation=0.0,
        humidity=55.0, uv_index=3.0,
    )
    return [
        base,
        replace(base, date=noon(2024, 6, 2).date(), temperature=35.0, uv_index=8.0, source="synthetic"),
    ]


def test_frame_is_fixed_point_text(wood):
    df = results_to_frame(derive_all(_records(), wood))

    assert list(df.columns) == EXPORT_COLUMNS
    assert len(df) == 2
    row = df.iloc[0]
    assert row["Date"] == "2024-06-01"
    assert row["Latitude"] == "10.123457"
    assert row["Longitude"] == "-20.500000"
    assert row["Surface Temperature (°C)"] == "15.00"
    assert row["Cumulative UV"] == "7.20"
    assert row["NASA Humidity (%)"] == "55.00"
    assert row["Data Source"] == "provider"
    assert df.iloc[1]["Data Source"] == "synthetic"


def test_export_csv_roundtrips_columns(tmp_path, wood):
    path = tmp_path / "results.csv"
    export_csv(derive_all(_records(), wood), path)
    df = pd.read_csv(path, dtype=str)
    assert list(df.columns) == EXPORT_COLUMNS
    assert df["Cracking Risk"].tolist() == ["Low", "Low"]


def test_empty_export_keeps_header():
    assert list(results_to_frame([]).columns) == EXPORT_COLUMNS


def test_summary_statistics(wood):
    results = derive_all(_records(), wood)
    summary = summarize_route(results)

    assert summary["points"] == 2
    assert summary["max_surface_temperature"] == pytest.approx(35.0)
    assert summary["mean_emc_peak"] == pytest.approx((results[0].emc_peak + results[1].emc_peak) / 2)
    assert summary["total_cumulative_uv"] == pytest.approx(7.2 + 19.2)
    assert summary["max_aging_rate"] == pytest.approx(results[1].risk_assessment.aging_rate)
    assert summary["cracking_risk_counts"] == {"Low": 2, "Medium": 0, "High": 0}
    assert sum(summary["moisture_stress_counts"].values()) == 2
    assert summary["synthetic_records"] == 1


def test_summary_of_empty_route():
    summary = summarize_route([])
    assert summary["points"] == 0
    assert summary["max_surface_temperature"] is None
    assert summary["cracking_risk_counts"] == {"Low": 0, "Medium": 0, "High": 0}
