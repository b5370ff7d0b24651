# =============================================================================
# agents/weather_workflow/schemas.py  -  Declared step inputs and outputs
# =============================================================================
#
#   WorkflowInput ──▶ [fetch_forecast] ──▶ Forecast ──▶ [plan_activities] ──▶ ActivityPlan
#
# WorkflowOutput is what run_weather_workflow() hands back: the forecast
# fields plus the generated recommendation.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class WorkflowInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    city: str = Field(min_length=1, description="The city to get the weather for")


class Forecast(BaseModel):
    date: str
    max_temp: float
    min_temp: float
    precipitation_chance: float
    condition: str
    location: str


class ActivityPlan(BaseModel):
    activities: str = Field(min_length=1)


class WorkflowOutput(Forecast):
    activities: str
