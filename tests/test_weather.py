from datetime import date

import httpx
import pytest

from core.errors import LocationNotFoundError
from core.models import CurrentWeather, DailyForecast
from core.weather import (
    describe_weather_code,
    geocode,
    get_current_weather,
    get_current_weather_live,
    get_daily_forecast,
    get_daily_forecast_live,
    use_live_weather,
)

CURRENT_PAYLOAD = {
    "current": {
        "temperature_2m": 18.4,
        "apparent_temperature": 17.1,
        "relative_humidity_2m": 62,
        "wind_speed_10m": 11.5,
        "wind_gusts_10m": 24.8,
        "weather_code": 2,
    }
}

HOURLY_PAYLOAD = {
    "current": {"precipitation": 0.2, "weathercode": 61},
    "hourly": {
        "temperature_2m": [10.0, 14.5, None, 8.0],
        "precipitation_probability": [0, 30, 80, None],
    },
}


def test_describe_weather_code():
    assert describe_weather_code(0) == "Clear sky"
    assert describe_weather_code(63) == "Moderate rain"
    assert describe_weather_code(99) == "Thunderstorm with heavy hail"
    assert describe_weather_code(1234) == "Unknown"
    assert describe_weather_code(None) == "Unknown"


@pytest.mark.asyncio
async def test_geocode_sends_single_result_query(fake_open_meteo):
    api = fake_open_meteo()
    async with api.client() as client:
        place = await geocode("Berlin", client)

    assert place.name == "Berlin"
    assert place.latitude == pytest.approx(52.52437)
    params = api.requests[0].url.params
    assert params["name"] == "Berlin"
    assert params["count"] == "1"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"results": []}])
async def test_geocode_unknown_location(fake_open_meteo, payload):
    api = fake_open_meteo(geocoding=payload)
    async with api.client() as client:
        with pytest.raises(LocationNotFoundError, match="Location 'Atlantis' not found"):
            await geocode("Atlantis", client)


@pytest.mark.asyncio
async def test_current_weather_returns_declared_fields(fake_open_meteo):
    api = fake_open_meteo(forecast=CURRENT_PAYLOAD)
    async with api.client() as client:
        weather = await get_current_weather_live("Berlin, Germany", client)

    assert weather == CurrentWeather(
        temperature=18.4,
        feels_like=17.1,
        humidity=62,
        wind_speed=11.5,
        wind_gust=24.8,
        conditions="Partly cloudy",
        location="Berlin",
    )

    geocoding_request, forecast_request = api.requests
    assert geocoding_request.url.host == "geocoding-api.open-meteo.com"
    assert forecast_request.url.host == "api.open-meteo.com"
    assert forecast_request.url.params["latitude"] == "52.52437"
    assert "wind_gusts_10m" in forecast_request.url.params["current"]


@pytest.mark.asyncio
async def test_current_weather_stops_after_failed_geocoding(fake_open_meteo):
    api = fake_open_meteo(geocoding={"results": []})
    async with api.client() as client:
        with pytest.raises(LocationNotFoundError):
            await get_current_weather_live("Nowhere", client)

    assert len(api.requests) == 1


@pytest.mark.asyncio
async def test_http_errors_propagate(fake_open_meteo):
    api = fake_open_meteo(geocoding_status=500)
    async with api.client() as client:
        with pytest.raises(httpx.HTTPStatusError):
            await get_current_weather_live("Berlin", client)


@pytest.mark.asyncio
async def test_malformed_forecast_propagates(fake_open_meteo):
    api = fake_open_meteo(forecast={"unexpected": True})
    async with api.client() as client:
        with pytest.raises(KeyError):
            await get_current_weather_live("Berlin", client)


@pytest.mark.asyncio
async def test_daily_forecast_summarizes_hourly_series(fake_open_meteo):
    api = fake_open_meteo(forecast=HOURLY_PAYLOAD)
    async with api.client() as client:
        forecast = await get_daily_forecast_live("Berlin", client)

    assert forecast == DailyForecast(
        date=date.today().isoformat(),
        max_temp=14.5,
        min_temp=8.0,
        precipitation_chance=80,
        condition="Slight rain",
        location="Berlin",
    )
    params = api.requests[1].url.params
    assert params["timezone"] == "auto"
    assert params["forecast_days"] == "1"
    assert params["hourly"] == "precipitation_probability,temperature_2m"


@pytest.mark.asyncio
async def test_daily_forecast_without_precipitation_series(fake_open_meteo):
    payload = {
        "current": {"weathercode": 0},
        "hourly": {"temperature_2m": [21.0, 25.0]},
    }
    api = fake_open_meteo(forecast=payload)
    async with api.client() as client:
        forecast = await get_daily_forecast_live("Berlin", client)

    assert forecast.precipitation_chance == 0
    assert forecast.condition == "Clear sky"


@pytest.mark.asyncio
async def test_offline_provider_is_deterministic(offline_weather):
    first = await get_current_weather("  lisbon ")
    second = await get_current_weather("Lisbon")

    assert first == second
    assert first.location == "Lisbon"
    assert first.wind_gust > first.wind_speed


@pytest.mark.asyncio
async def test_offline_daily_forecast_range(offline_weather):
    forecast = await get_daily_forecast("Oslo")

    assert forecast.location == "Oslo"
    assert forecast.min_temp < forecast.max_temp
    assert 0 <= forecast.precipitation_chance <= 100
    assert forecast.date == date.today().isoformat()


@pytest.mark.parametrize(("value", "expected"), [("false", False), ("true", True), ("", True)])
def test_live_weather_flag_reads_process_environment(monkeypatch, value, expected):
    def no_dotenv(*args, **kwargs):
        raise AssertionError(".env must not be re-read per call")

    monkeypatch.setattr("core.config.load_dotenv", no_dotenv)
    monkeypatch.setenv("USE_LIVE_WEATHER", value)

    assert use_live_weather() is expected
