"""
Route and climate data models.

Immutable records handed from one pipeline stage to the next:
    PositionSample -> DailyPoint -> ClimateRecord -> AnalysisResult
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class PositionSample:
    """One timestamped GPS fix."""

    timestamp: datetime
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DailyPoint:
    """Mean position of all samples on one calendar date, stamped at 12:00Z."""

    timestamp: datetime
    latitude: float
    longitude: float

    @property
    def date(self) -> date:
        return self.timestamp.date()

    @property
    def date_key(self) -> str:
        """Provider date key (YYYYMMDD)."""
        return self.timestamp.strftime("%Y%m%d")


@dataclass(frozen=True)
class ClimateRecord:
    """Daily climate observation attributed to one DailyPoint."""

    date: date
    latitude: float
    longitude: float
    temperature: float  # T2M (°C)
    max_temperature: float  # T2M_MAX (°C)
    solar_radiation: float  # ALLSKY_SFC_SW_DWN
    humidity: float  # RH2M (%)
    uv_index: float
    source: str = "provider"  # "provider" or "synthetic"


@dataclass(frozen=True)
class RiskAssessment:
    cracking_risk: str  # Low / Medium / High
    aging_rate: float  # relative multiplier, >= 1
    moisture_stress: str  # Low / Medium / High


@dataclass(frozen=True)
class AnalysisResult:
    """Surface stress derived from one ClimateRecord."""

    date: date
    latitude: float
    longitude: float
    surface_temperature: float  # °C
    emc_average: float  # %
    emc_peak: float  # %
    cumulative_uv: float
    risk_assessment: RiskAssessment
    raw_climate_data: ClimateRecord
