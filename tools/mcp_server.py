# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes get_weather as an MCP tool.  The weather agent starts this module
#   as a subprocess (python -m tools.mcp_server) and talks to it over stdio.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs current conditions for a place
#   2. It calls "get_weather" over MCP
#   3. FastMCP routes the call to the decorated coroutine below
#   4. The coroutine geocodes the place, fetches conditions (core/weather.py)
#      and returns a plain dict
#
# ERRORS:
#   An unknown location comes back as {"error", "hint"} so the model can ask
#   the user for a better place name.  Everything else (network errors, bad
#   responses) propagates and FastMCP reports it as a tool error.
# =============================================================================

from dataclasses import asdict

from fastmcp import FastMCP

from core.config import load_settings
from core.errors import LocationNotFoundError
from core.log import configure_logging, log_request, log_response, log_status
from core.weather import get_current_weather

mcp = FastMCP("weather-agent")


@mcp.tool()
async def get_weather(location: str) -> dict:
    """Get current weather for a location.

    Args:
        location: City name, e.g. "Berlin" or "New York".  Use the most
                  relevant part of multi-part names and English spelling.

    Returns:
        A dict with fields:
          - temperature: Air temperature (°C)
          - feels_like: Apparent temperature (°C)
          - humidity: Relative humidity (%)
          - wind_speed / wind_gust: Wind at 10m (km/h)
          - conditions: Human-readable weather description
          - location: The resolved place name

        Returns an error message if the location cannot be found.
    """
    log_request("get_weather", location=location)

    try:
        weather = await get_current_weather(location)
    except LocationNotFoundError as exc:
        log_status(str(exc))
        return log_response("get_weather", {
            "error": str(exc),
            "hint": "Ask the user for a different or more specific city name.",
        })

    log_status(f"Resolved to {weather.location}")
    return log_response("get_weather", asdict(weather))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    configure_logging(load_settings().log_level, tag="MCP")
    mcp.run()
