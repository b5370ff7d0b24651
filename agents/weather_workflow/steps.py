# =============================================================================
# agents/weather_workflow/steps.py  -  The two workflow steps
# =============================================================================
#
# STEP 1: fetch_forecast  (custom BaseAgent, no LLM)
#   Reads the city from the user message, fetches today's forecast from
#   Open-Meteo and commits it to session state under "forecast".
#
# STEP 2: plan_activities  (LlmAgent)
#   Builds its instruction from state["forecast"] and writes the model's
#   answer to state under "activities".
#
# Steps talk only through session state.  The Runner commits each event's
# state_delta before the SequentialAgent resumes, so step 2 always sees the
# forecast step 1 produced.
# =============================================================================

import json
from dataclasses import asdict
from typing import AsyncGenerator, ClassVar, Optional

from google.adk.agents import BaseAgent, LlmAgent
from google.adk.agents.invocation_context import InvocationContext
from google.adk.agents.readonly_context import ReadonlyContext
from google.adk.events import Event, EventActions
from google.adk.models.lite_llm import LiteLlm
from google.genai import types
from pydantic import BaseModel

from core.config import Settings, load_settings
from core.errors import ForecastNotFoundError
from core.log import log_request, log_response, log_status
from core.weather import get_daily_forecast

from .prompt import build_planner_prompt
from .schemas import Forecast, WorkflowInput

FORECAST_KEY = "forecast"
ACTIVITIES_KEY = "activities"


def parse_workflow_input(content: Optional[types.Content]) -> WorkflowInput:
    """Read the workflow input from a user message.

    Accepts either a bare city name or a JSON object such as
    ``{"city": "Berlin"}``.  Raises pydantic.ValidationError when no city
    can be read, malformed JSON included.
    """
    text = ""
    if content and content.parts:
        text = "".join(part.text for part in content.parts if part.text).strip()

    if text.startswith("{"):
        return WorkflowInput.model_validate_json(text)
    return WorkflowInput(city=text)


# =============================================================================
# STEP 1: fetch_forecast
# =============================================================================
class ForecastStep(BaseAgent):
    """Fetches weather forecast for a given city."""

    input_schema: ClassVar[type[BaseModel]] = WorkflowInput
    output_schema: ClassVar[type[BaseModel]] = Forecast

    async def _run_async_impl(
        self, ctx: InvocationContext
    ) -> AsyncGenerator[Event, None]:
        request = parse_workflow_input(ctx.user_content)
        log_request(self.name, city=request.city)

        daily = await get_daily_forecast(request.city)
        forecast = Forecast(**asdict(daily)).model_dump()
        log_status(f"{forecast['location']}: {forecast['condition']}, "
                   f"{forecast['min_temp']} to {forecast['max_temp']}")

        yield Event(
            invocation_id=ctx.invocation_id,
            author=self.name,
            branch=ctx.branch,
            content=types.Content(
                role="model",
                parts=[types.Part(text=json.dumps(forecast))],
            ),
            actions=EventActions(state_delta={FORECAST_KEY: forecast}),
        )
        log_response(self.name, forecast)


# =============================================================================
# STEP 2: plan_activities
# =============================================================================
def planner_instruction(context: ReadonlyContext) -> str:
    """Instruction provider for the planner; needs step one's forecast."""
    forecast = context.state.get(FORECAST_KEY)
    if not forecast:
        raise ForecastNotFoundError()
    return build_planner_prompt(forecast)


def create_activity_planner(settings: Optional[Settings] = None) -> LlmAgent:
    settings = settings or load_settings()

    return LlmAgent(
        name="plan_activities",
        model=LiteLlm(model=settings.model),
        description="Suggests activities based on weather conditions.",
        instruction=planner_instruction,
        input_schema=Forecast,
        include_contents="none",
        output_key=ACTIVITIES_KEY,
    )

