"""Shared fixtures: a fake NASA POWER endpoint and deterministic resolvers."""

from datetime import datetime, timezone

import httpx
import numpy as np
import pytest

from climate_client import ClimateClient
from climate_types import DailyPoint, PositionSample
from config.settings import ProviderSettings, SurfaceProperties
from data_fetch.climate_resolver import ClimateResolver


def power_payload(parameter: dict) -> dict:
    return {"type": "Feature", "properties": {"parameter": parameter}}


class FakePower:
    """Callable handler for httpx.MockTransport that records each request."""

    def __init__(self, responses):
        # responses: list of (status, json-body) returned in order; the last repeats
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        idx = min(len(self.requests) - 1, len(self.responses) - 1)
        status, body = self.responses[idx]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)


class RecordingSleep:
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def settings():
    return ProviderSettings(base_url="https://power.test/api/temporal/daily/point")


@pytest.fixture
def make_resolver(settings):
    """Build a resolver whose provider answers with the given responses."""
    created = []

    def _make(responses, seed=42):
        fake = FakePower(responses)
        client = ClimateClient.from_settings(settings, transport=httpx.MockTransport(fake))
        sleep = RecordingSleep()
        resolver = ClimateResolver(
            client=client,
            settings=settings,
            rng=np.random.default_rng(seed),
            sleep=sleep,
        )
        created.append(resolver)
        return resolver, fake, sleep

    yield _make
    for r in created:
        r.close()


@pytest.fixture
def wood():
    return SurfaceProperties.from_material("wood")


def noon(year, month, day):
    return datetime(year, month, day, 12, tzinfo=timezone.utc)


def daily_point(lat, lon, year=2024, month=6, day=1):
    return DailyPoint(timestamp=noon(year, month, day), latitude=lat, longitude=lon)


def sample(iso, lat, lon):
    return PositionSample(timestamp=datetime.fromisoformat(iso), latitude=lat, longitude=lon)
