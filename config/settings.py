"""
Validated configuration for a route analysis run.

Invalid values are rejected here, before they reach the physics engine.
"""

import logging
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.constants import (
    CLUSTER_THRESHOLD_DEG,
    MATERIAL_PRESETS,
    NASA_POWER_COMMUNITY,
    NASA_POWER_URL,
    REQUEST_DELAY_S,
)

logger = logging.getLogger(__name__)

IMPLEMENTED_AGGREGATION_LEVELS = ("daily",)


class ConfigurationError(ValueError):
    pass


class SurfaceProperties(BaseModel):
    """Optical properties of the exposed material."""

    model_config = ConfigDict(frozen=True)

    material_type: str = Field(default="wood", description="Free-form material label")
    albedo: float = Field(default=0.25, ge=0.0, le=1.0, description="Reflected fraction of solar radiation")
    # Zero is excluded: the surface-temperature model divides by emissivity
    emissivity: float = Field(default=0.90, gt=0.0, le=1.0, description="Radiative efficiency")

    @classmethod
    def from_material(cls, material_type: str) -> "SurfaceProperties":
        preset = MATERIAL_PRESETS.get(material_type.lower())
        if preset is None:
            known = ", ".join(MATERIAL_PRESETS)
            raise ConfigurationError(f"Unknown material '{material_type}' (known: {known})")
        return cls(
            material_type=material_type.lower(),
            albedo=preset["albedo"],
            emissivity=preset["emissivity"],
        )

    @classmethod
    def build(cls, **values) -> "SurfaceProperties":
        """Construct from raw values, raising ConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid surface properties: {e}") from e


class AnalysisConfig(BaseModel):
    """User-facing analysis options."""

    model_config = ConfigDict(frozen=True)

    start_date: date = Field(default_factory=date.today)
    end_date: date = Field(default_factory=date.today)
    surface_properties: SurfaceProperties = Field(default_factory=SurfaceProperties)
    aggregation_level: Literal["daily", "weekly", "monthly"] = "daily"

    @field_validator("aggregation_level")
    @classmethod
    def _only_implemented_levels(cls, value: str) -> str:
        if value not in IMPLEMENTED_AGGREGATION_LEVELS:
            raise ValueError(f"aggregation level '{value}' is not implemented; only 'daily' is supported")
        return value

    @model_validator(mode="after")
    def _ordered_dates(self) -> "AnalysisConfig":
        if self.start_date > self.end_date:
            raise ValueError(f"start_date {self.start_date} is after end_date {self.end_date}")
        return self

    @classmethod
    def build(cls, **values) -> "AnalysisConfig":
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid analysis configuration: {e}") from e

    def with_surface(self, surface_properties: SurfaceProperties) -> "AnalysisConfig":
        return self.model_copy(update={"surface_properties": surface_properties})


class ProviderSettings(BaseSettings):
    """Climate provider connection settings (env prefix CLIMATELOAD_)."""

    base_url: str = Field(default=NASA_POWER_URL, description="NASA POWER daily point endpoint")
    community: str = Field(default=NASA_POWER_COMMUNITY, description="POWER user community code")
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    request_delay: float = Field(
        default=REQUEST_DELAY_S, ge=REQUEST_DELAY_S, description="Pause between cluster requests in seconds"
    )
    cluster_threshold: float = Field(
        default=CLUSTER_THRESHOLD_DEG, gt=0, description="Clustering radius in degrees"
    )

    model_config = SettingsConfigDict(
        env_prefix="CLIMATELOAD_",
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def load(cls) -> "ProviderSettings":
        try:
            return cls()
        except ValidationError as e:
            logger.error(f"Invalid provider settings: {e}")
            raise ConfigurationError(f"Invalid provider settings: {e}") from e
