"""
Climate Client — NASA POWER daily point API.

Response validation, timeout control, and fill-value cleanup.
Returns the per-parameter, per-date mapping:
    {"T2M": {"20240601": 25.1, ...}, "RH2M": {...}, ...}
"""

import logging
from typing import Any, Dict, Optional

import httpx

from config.constants import (
    NASA_POWER_COMMUNITY,
    NASA_POWER_FILL_VALUE,
    NASA_POWER_PARAMETERS,
    NASA_POWER_URL,
)

logger = logging.getLogger(__name__)


class ClimateClientError(Exception):
    pass


class ClimateClient:
    def __init__(
        self,
        base_url: str = NASA_POWER_URL,
        community: str = NASA_POWER_COMMUNITY,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.community = community
        self.timeout = timeout
        self.client = httpx.Client(timeout=self.timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.BaseTransport] = None) -> "ClimateClient":
        return cls(
            base_url=settings.base_url,
            community=settings.community,
            timeout=settings.timeout,
            transport=transport,
        )

    def _validate_response(self, response: httpx.Response) -> Dict[str, Any]:
        if response.status_code != 200:
            raise ClimateClientError(
                f"NASA POWER API error: {response.status_code} {response.reason_phrase}"
            )
        try:
            data = response.json()
        except ValueError as e:
            raise ClimateClientError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise ClimateClientError("Invalid response format from NASA POWER API")
        properties = data.get("properties")
        parameter = properties.get("parameter") if isinstance(properties, dict) else None
        if not isinstance(parameter, dict):
            raise ClimateClientError("Invalid response format from NASA POWER API: missing properties.parameter")
        return parameter

    @staticmethod
    def _strip_fill_values(parameter: Dict[str, Any]) -> Dict[str, Dict[str, float]]:
        """Drop POWER fill values so they read as absent dates."""
        cleaned = {}
        for name, series in parameter.items():
            if not isinstance(series, dict):
                continue
            cleaned[name] = {
                day: value
                for day, value in series.items()
                if isinstance(value, (int, float)) and value > NASA_POWER_FILL_VALUE
            }
        return cleaned

    def fetch_daily_point(
        self, latitude: float, longitude: float, start_date: str, end_date: str
    ) -> Dict[str, Dict[str, float]]:
        """
        Fetch daily values for one coordinate over [start_date, end_date].

        Args:
            latitude, longitude: query point (rounded to 4 dp on the wire)
            start_date, end_date: YYYYMMDD, inclusive

        Raises:
            ClimateClientError on transport failure, non-200 status,
            malformed body or missing properties.parameter.
        """
        params = {
            "parameters": ",".join(NASA_POWER_PARAMETERS),
            "community": self.community,
            "longitude": f"{longitude:.4f}",
            "latitude": f"{latitude:.4f}",
            "start": start_date,
            "end": end_date,
            "format": "JSON",
        }
        logger.debug(
            f"GET {self.base_url} lat={params['latitude']} lon={params['longitude']} {start_date}-{end_date}"
        )
        try:
            response = self.client.get(self.base_url, params=params)
            parameter = self._validate_response(response)
        except httpx.HTTPError as e:
            raise ClimateClientError(f"Failed to fetch NASA POWER data: {e}") from e
        return self._strip_fill_values(parameter)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
