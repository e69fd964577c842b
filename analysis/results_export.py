"""
Results Export — flattens AnalysisResults into a fixed-point table for CSV
download.
"""

import pandas as pd

EXPORT_COLUMNS = [
    "Date",
    "Latitude",
    "Longitude",
    "Surface Temperature (°C)",
    "EMC Average (%)",
    "EMC Peak (%)",
    "Cumulative UV",
    "Aging Rate",
    "Cracking Risk",
    "Moisture Stress",
    "NASA Air Temp (°C)",
    "NASA Max Temp (°C)",
    "NASA Humidity (%)",
    "NASA Solar Radiation (W/m²)",
    "NASA UV Index",
    "Data Source",
]


def _row(result) -> dict:
    raw = result.raw_climate_data
    risk = result.risk_assessment
    return {
        "Date": result.date.isoformat(),
        "Latitude": f"{result.latitude:.6f}",
        "Longitude": f"{result.longitude:.6f}",
        "Surface Temperature (°C)": f"{result.surface_temperature:.2f}",
        "EMC Average (%)": f"{result.emc_average:.2f}",
        "EMC Peak (%)": f"{result.emc_peak:.2f}",
        "Cumulative UV": f"{result.cumulative_uv:.2f}",
        "Aging Rate": f"{risk.aging_rate:.2f}",
        "Cracking Risk": risk.cracking_risk,
        "Moisture Stress": risk.moisture_stress,
        "NASA Air Temp (°C)": f"{raw.temperature:.2f}",
        "NASA Max Temp (°C)": f"{raw.max_temperature:.2f}",
        "NASA Humidity (%)": f"{raw.humidity:.2f}",
        "NASA Solar Radiation (W/m²)": f"{raw.solar_radiation:.2f}",
        "NASA UV Index": f"{raw.uv_index:.2f}",
        "Data Source": raw.source,
    }


def results_to_frame(results) -> pd.DataFrame:
    return pd.DataFrame([_row(r) for r in results], columns=EXPORT_COLUMNS)


def export_csv(results, path) -> None:
    results_to_frame(results).to_csv(path, index=False, encoding="utf-8")
