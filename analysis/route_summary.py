"""
Route Summary — headline statistics over a route's analysis results.
"""

from collections import Counter

import numpy as np

from config.constants import RISK_TIERS, SOURCE_SYNTHETIC


def summarize_route(results) -> dict:
    """
    Returns dict with:
        points, max_surface_temperature, mean_emc_peak, total_cumulative_uv,
        max_aging_rate, cracking_risk_counts, moisture_stress_counts,
        synthetic_records
    """
    results = list(results)
    cracking = Counter(r.risk_assessment.cracking_risk for r in results)
    moisture = Counter(r.risk_assessment.moisture_stress for r in results)

    summary = {
        "points": len(results),
        "max_surface_temperature": None,
        "mean_emc_peak": None,
        "total_cumulative_uv": None,
        "max_aging_rate": None,
        "cracking_risk_counts": {tier: cracking.get(tier, 0) for tier in RISK_TIERS},
        "moisture_stress_counts": {tier: moisture.get(tier, 0) for tier in RISK_TIERS},
        "synthetic_records": sum(1 for r in results if r.raw_climate_data.source == SOURCE_SYNTHETIC),
    }
    if not results:
        return summary

    summary["max_surface_temperature"] = float(np.max([r.surface_temperature for r in results]))
    summary["mean_emc_peak"] = float(np.mean([r.emc_peak for r in results]))
    summary["total_cumulative_uv"] = float(np.sum([r.cumulative_uv for r in results]))
    summary["max_aging_rate"] = float(np.max([r.risk_assessment.aging_rate for r in results]))
    return summary
