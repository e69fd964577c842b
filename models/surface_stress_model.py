"""
Surface Stress Model — turns daily climate records into material stress.

Delegates to: surface_physics.py
"""

from climate_types import AnalysisResult, ClimateRecord
from surface_physics import (
    assess_risks,
    cumulative_uv,
    equilibrium_moisture_content,
    surface_temperature,
)


def compute_surface_stress(record: ClimateRecord, properties) -> AnalysisResult:
    """
    Args:
        record: one resolved ClimateRecord
        properties: SurfaceProperties (albedo, emissivity)

    Returns:
        AnalysisResult carrying the record as raw_climate_data.
    """
    t_surf = surface_temperature(
        record.temperature,
        record.solar_radiation,
        properties.albedo,
        properties.emissivity,
    )
    emc_avg, emc_peak = equilibrium_moisture_content(record.temperature, record.humidity)
    uv_dose = cumulative_uv(record.uv_index)

    return AnalysisResult(
        date=record.date,
        latitude=record.latitude,
        longitude=record.longitude,
        surface_temperature=t_surf,
        emc_average=emc_avg,
        emc_peak=emc_peak,
        cumulative_uv=uv_dose,
        risk_assessment=assess_risks(t_surf, emc_avg, emc_peak, uv_dose),
        raw_climate_data=record,
    )


def derive_all(records, properties) -> list[AnalysisResult]:
    """One result per record, in input order."""
    return [compute_surface_stress(r, properties) for r in records]
