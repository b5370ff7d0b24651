# =============================================================================
# core/errors.py  -  Exception types
# =============================================================================
# Errors are raised where they happen and propagate to the caller.  There is
# no retry or recovery layer in this project; the framework reports whatever
# reaches it.
# =============================================================================


class WeatherError(Exception):
    """Base class for errors raised by this project."""


class LocationNotFoundError(WeatherError, LookupError):
    """The geocoding endpoint returned no match for a location query."""

    def __init__(self, location: str):
        super().__init__(f"Location '{location}' not found")
        self.location = location


class ForecastNotFoundError(WeatherError):
    """The activity planning step ran without a forecast in session state."""

    def __init__(self):
        super().__init__("Forecast data not found")


class MissingCredentialError(WeatherError):
    """A required credential is missing from the environment."""


class ActivityPlanNotFoundError(WeatherError):
    """The workflow finished without the planner writing any activities."""

    def __init__(self):
        super().__init__("Activity plan not produced")
