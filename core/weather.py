# =============================================================================
# core/weather.py  -  Open-Meteo client and offline provider
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Looks up a free-text location with the Open-Meteo geocoding API, then
#   asks the Open-Meteo forecast API for either current conditions (used by
#   the get_weather tool) or today's hourly range (used by the workflow).
#
#   Both lookups are two sequential HTTP calls.  Nothing is cached, retried
#   or run in parallel; HTTP and parsing errors propagate to the caller.
#
# DATA SOURCE TOGGLE:
#   USE_LIVE_WEATHER=false swaps in deterministic mock data so the agent and
#   workflow can be exercised offline.  Live data is the default.
#
#   Both providers return the same dataclasses (core/models.py), so callers
#   never need to know which one answered.
# =============================================================================

import os
import random
from datetime import date
from typing import Optional

import httpx

from core.config import env_flag
from core.errors import LocationNotFoundError
from core.models import CurrentWeather, DailyForecast, Location

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
HTTP_TIMEOUT_SECONDS = 10.0

_CURRENT_FIELDS = (
    "temperature_2m,apparent_temperature,relative_humidity_2m,"
    "wind_speed_10m,wind_gusts_10m,weather_code"
)


# =============================================================================
# WMO Weather Code Mapping
# =============================================================================
# Open-Meteo reports conditions as WMO weather interpretation codes.
# =============================================================================
WMO_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: Optional[int]) -> str:
    """Map a WMO weather code to a label ("Unknown" for anything else)."""
    if code is None:
        return "Unknown"
    return WMO_CONDITIONS.get(int(code), "Unknown")


def use_live_weather() -> bool:
    return env_flag(os.environ.get("USE_LIVE_WEATHER"), default=True)


# =============================================================================
# PUBLIC API (dispatchers)
# =============================================================================
async def get_current_weather(
    location: str, client: Optional[httpx.AsyncClient] = None
) -> CurrentWeather:
    """Current conditions for ``location`` from the live or mock provider."""
    if use_live_weather():
        return await get_current_weather_live(location, client)
    return get_current_weather_mock(location)


async def get_daily_forecast(
    city: str, client: Optional[httpx.AsyncClient] = None
) -> DailyForecast:
    """Today's forecast range for ``city`` from the live or mock provider."""
    if use_live_weather():
        return await get_daily_forecast_live(city, client)
    return get_daily_forecast_mock(city)


# =============================================================================
# LIVE PROVIDER: Open-Meteo API
# =============================================================================
async def geocode(location: str, client: httpx.AsyncClient) -> Location:
    """Resolve a location query to its first geocoding match.

    Raises:
        LocationNotFoundError: the API returned no results.
        httpx.HTTPStatusError: the API answered with an error status.
    """
    response = await client.get(
        GEOCODING_URL, params={"name": location, "count": 1}
    )
    response.raise_for_status()
    results = response.json().get("results") or []
    if not results:
        raise LocationNotFoundError(location)

    match = results[0]
    return Location(
        name=match["name"],
        latitude=match["latitude"],
        longitude=match["longitude"],
    )


async def get_current_weather_live(
    location: str, client: Optional[httpx.AsyncClient] = None
) -> CurrentWeather:
    """Geocode ``location`` and fetch its current conditions.

    When no client is given, one is opened for the two calls and closed
    afterwards.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as own_client:
            return await get_current_weather_live(location, own_client)

    place = await geocode(location, client)
    response = await client.get(
        FORECAST_URL,
        params={
            "latitude": place.latitude,
            "longitude": place.longitude,
            "current": _CURRENT_FIELDS,
        },
    )
    response.raise_for_status()
    current = response.json()["current"]

    return CurrentWeather(
        temperature=current["temperature_2m"],
        feels_like=current["apparent_temperature"],
        humidity=current["relative_humidity_2m"],
        wind_speed=current["wind_speed_10m"],
        wind_gust=current["wind_gusts_10m"],
        conditions=describe_weather_code(current["weather_code"]),
        location=place.name,
    )


async def get_daily_forecast_live(
    city: str, client: Optional[httpx.AsyncClient] = None
) -> DailyForecast:
    """Geocode ``city`` and summarize today's hourly forecast.

    Only today's 24 hours are requested (forecast_days=1, local timezone).
    The temperature range is the min/max over those hours and the
    precipitation chance is the highest hourly probability.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as own_client:
            return await get_daily_forecast_live(city, own_client)

    place = await geocode(city, client)
    response = await client.get(
        FORECAST_URL,
        params={
            "latitude": place.latitude,
            "longitude": place.longitude,
            "current": "precipitation,weathercode",
            "timezone": "auto",
            "forecast_days": 1,
            "hourly": "precipitation_probability,temperature_2m",
        },
    )
    response.raise_for_status()
    data = response.json()

    # Hours without data come back as null
    temperatures = [t for t in data["hourly"]["temperature_2m"] if t is not None]
    probabilities = [
        p for p in data["hourly"].get("precipitation_probability", []) if p is not None
    ]

    return DailyForecast(
        date=date.today().isoformat(),
        max_temp=max(temperatures),
        min_temp=min(temperatures),
        precipitation_chance=max(probabilities, default=0),
        condition=describe_weather_code(data["current"]["weathercode"]),
        location=place.name,
    )


# =============================================================================
# MOCK PROVIDER: Deterministic fake data
# =============================================================================
# Seeded from the lowercased location so the same query always gets the
# same answer.  The location name is echoed back title-cased in place of a
# geocoding match.
# =============================================================================
def _mock_rng(location: str) -> random.Random:
    return random.Random(location.strip().lower())


def get_current_weather_mock(location: str) -> CurrentWeather:
    """Generate plausible current conditions for ``location``."""
    rng = _mock_rng(location)
    temperature = round(rng.uniform(-5, 32), 1)
    wind_speed = round(rng.uniform(0, 35), 1)

    return CurrentWeather(
        temperature=temperature,
        feels_like=round(temperature - rng.uniform(0, 4), 1),
        humidity=rng.randint(25, 95),
        wind_speed=wind_speed,
        wind_gust=round(wind_speed + rng.uniform(2, 20), 1),
        conditions=describe_weather_code(rng.choice(list(WMO_CONDITIONS))),
        location=location.strip().title(),
    )


def get_daily_forecast_mock(city: str) -> DailyForecast:
    """Generate a plausible forecast range for ``city``."""
    rng = _mock_rng(city)
    min_temp = round(rng.uniform(-5, 22), 1)

    return DailyForecast(
        date=date.today().isoformat(),
        max_temp=round(min_temp + rng.uniform(3, 12), 1),
        min_temp=min_temp,
        precipitation_chance=rng.choice([0, 5, 10, 20, 35, 50, 70, 90]),
        condition=describe_weather_code(rng.choice(list(WMO_CONDITIONS))),
        location=city.strip().title(),
    )
