# =============================================================================
# core/models.py  -  Data Models
# =============================================================================
#
# The shapes that flow between the Open-Meteo API, the get_weather tool and
# the weather workflow.  None of them are persisted: each one is built for a
# single tool call or workflow step and handed back as JSON.
#
# Units are whatever Open-Meteo returns by default: Celsius, km/h, percent.
# =============================================================================

from dataclasses import dataclass


# -----------------------------------------------------------------------------
# Location - a resolved geocoding match
# -----------------------------------------------------------------------------
@dataclass
class Location:
    """The first geocoding match for a free-text location query."""

    name: str                          # Resolved place name, e.g. "Berlin"
    latitude: float
    longitude: float


# -----------------------------------------------------------------------------
# CurrentWeather - what the get_weather tool returns
# -----------------------------------------------------------------------------
@dataclass
class CurrentWeather:
    """Current conditions at a location."""

    temperature: float                 # Air temperature at 2m (°C)
    feels_like: float                  # Apparent temperature (°C)
    humidity: float                    # Relative humidity at 2m (%)
    wind_speed: float                  # Wind speed at 10m (km/h)
    wind_gust: float                   # Wind gusts at 10m (km/h)
    conditions: str                    # Human label for the WMO weather code
    location: str                      # Resolved place name


# -----------------------------------------------------------------------------
# DailyForecast - output of the workflow's first step
# -----------------------------------------------------------------------------
# Summarizes today's hourly forecast into the handful of numbers the
# activity planner needs.
# -----------------------------------------------------------------------------
@dataclass
class DailyForecast:
    """Today's forecast range for a city."""

    date: str                          # ISO format: "2025-07-15"
    max_temp: float                    # Highest hourly temperature (°C)
    min_temp: float                    # Lowest hourly temperature (°C)
    precipitation_chance: float        # Highest hourly precipitation probability (%)
    condition: str                     # Label for the current WMO weather code
    location: str                      # Resolved place name
