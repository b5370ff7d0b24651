import json
from collections.abc import Callable

import httpx
import pytest

BERLIN = {"name": "Berlin", "latitude": 52.52437, "longitude": 13.41053}


class FakeOpenMeteo:
    """
    Stand-in for the two Open-Meteo hosts, served through httpx.MockTransport.
    """

    def __init__(
        self,
        geocoding: dict | None = None,
        forecast: dict | None = None,
        geocoding_status: int = 200,
    ) -> None:
        self.geocoding = {"results": [BERLIN]} if geocoding is None else geocoding
        self.forecast = forecast or {}
        self.geocoding_status = geocoding_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "geocoding-api.open-meteo.com":
            return httpx.Response(self.geocoding_status, content=json.dumps(self.geocoding))
        if request.url.host == "api.open-meteo.com":
            return httpx.Response(200, json=self.forecast)
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_open_meteo() -> Callable[..., FakeOpenMeteo]:
    return FakeOpenMeteo


@pytest.fixture
def offline_weather(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USE_LIVE_WEATHER", "false")
