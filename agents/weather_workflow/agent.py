# =============================================================================
# agents/weather_workflow/agent.py  -  The weather workflow
# =============================================================================
#
#   user message ("Berlin" or {"city": "Berlin"})
#        │
#        ▼
#   fetch_forecast   ──▶ state["forecast"]
#        │
#        ▼
#   plan_activities  ──▶ state["activities"]
#
# A SequentialAgent runs the steps in order with no branching or retry; an
# exception in either step ends the run.
# =============================================================================

from typing import Optional

from google.adk.agents import BaseAgent, SequentialAgent

from core.config import Settings

from .steps import ForecastStep, create_activity_planner

WORKFLOW_NAME = "weather_workflow"


def create_weather_workflow(
    settings: Optional[Settings] = None,
    planner: Optional[BaseAgent] = None,
) -> SequentialAgent:
    """Build the two-step workflow.

    ``planner`` replaces the LLM step, e.g. with a canned agent in tests.
    """
    return SequentialAgent(
        name=WORKFLOW_NAME,
        description="Fetches the forecast for a city and suggests activities.",
        sub_agents=[
            ForecastStep(
                name="fetch_forecast",
                description="Fetches weather forecast for a given city.",
            ),
            planner or create_activity_planner(settings),
        ],
    )


root_agent = create_weather_workflow()
