"""
Surface Physics — environmental stress on an exposed surface material.

Inputs:
    - Air temperature, solar radiation, relative humidity, UV index
    - Material albedo and emissivity

Compute:
    - Surface temperature (simplified radiative-heating proxy)
    - Equilibrium moisture content (Kay 1951 wood EMC approximation)
    - Cumulative daily UV dose
    - Three-tier risk classification and relative aging rate

All functions are pure; inputs are assumed already validated.
"""

import numpy as np

from climate_types import RiskAssessment
from config.constants import (
    CRACKING_THRESHOLDS_C,
    MOISTURE_VARIATION_THRESHOLDS,
    STEFAN_BOLTZMANN,
)


def surface_temperature(air_temp, solar_radiation, albedo, emissivity):
    """
    Surface temperature proxy:
        absorbed = S * (1 - albedo)
        effect   = absorbed / (emissivity * sigma * 20)
        T_surf   = T_air + 0.1 * effect

    Not a heat-balance solve; the constants 20 and 0.1 are scaling factors.
    """
    absorbed = solar_radiation * (1 - albedo)
    radiation_effect = absorbed / (emissivity * STEFAN_BOLTZMANN * 20)
    return air_temp + radiation_effect * 0.1


def equilibrium_moisture_content(temperature, humidity):
    """
    Kay (1951) approximation for wood EMC, with a linear temperature
    correction for the daily peak.

    Humidity is capped at 95 %.

    Returns:
        (average, peak), both floored at 0.
    """
    rh = min(humidity, 95)
    average = (330 + 0.452 * rh + 0.00415 * rh * rh) / (100 + 1.27 * rh + 0.0135 * rh * rh)

    temp_factor = 1 + (temperature - 20) * 0.02
    peak = average * temp_factor

    return max(0.0, average), max(0.0, peak)


def cumulative_uv(uv_index, hours=24):
    """Daily UV dose proxy: index * exposure hours * 0.1."""
    return uv_index * hours * 0.1


def cracking_risk(surface_temp) -> str:
    """Thresholds are inclusive: 40.0 °C is Medium, 60.0 °C is High."""
    if surface_temp >= CRACKING_THRESHOLDS_C["High"]:
        return "High"
    elif surface_temp >= CRACKING_THRESHOLDS_C["Medium"]:
        return "Medium"
    return "Low"


def moisture_stress(emc_average, emc_peak) -> str:
    variation = abs(emc_peak - emc_average)
    if variation > MOISTURE_VARIATION_THRESHOLDS["High"]:
        return "High"
    elif variation > MOISTURE_VARIATION_THRESHOLDS["Medium"]:
        return "Medium"
    return "Low"


def aging_rate(surface_temp, cumulative_uv_dose) -> float:
    """Relative aging multiplier, never below 1."""
    rate = 1 + cumulative_uv_dose / 100 + (surface_temp - 20) * 0.05
    return float(np.maximum(1.0, rate))


def assess_risks(surface_temp, emc_average, emc_peak, cumulative_uv_dose) -> RiskAssessment:
    return RiskAssessment(
        cracking_risk=cracking_risk(surface_temp),
        aging_rate=aging_rate(surface_temp, cumulative_uv_dose),
        moisture_stress=moisture_stress(emc_average, emc_peak),
    )


if __name__ == "__main__":
    # Wood on a warm, humid day
    t_surf = surface_temperature(25.0, 300.0, 0.25, 0.90)
    avg, peak = equilibrium_moisture_content(25.0, 60.0)
    uv = cumulative_uv(6.0)
    print(f"Surface temp : {t_surf:.2f} °C")
    print(f"EMC avg/peak : {avg:.3f} / {peak:.3f}")
    print(f"Cumulative UV: {uv:.1f}")
    print(f"Risk         : {assess_risks(t_surf, avg, peak, uv)}")
