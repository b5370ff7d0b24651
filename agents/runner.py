# =============================================================================
# agents/runner.py  -  Running the agent and the workflow outside the server
# =============================================================================
#
# ADK CONCEPTS USED:
#   - Runner: drives an agent for one user message and yields Events
#   - SessionService: stores the conversation (see agents/sessions.py)
#   - Content/Part: ADK's message format
#   - Event.actions.state_delta: how workflow steps hand data forward
# =============================================================================

import logging
from typing import Optional

from google.adk.agents import BaseAgent
from google.adk.runners import Runner
from google.adk.sessions import BaseSessionService, InMemorySessionService, Session
from google.genai import types

from core.errors import ActivityPlanNotFoundError
from core.log import log_status

from .weather_workflow.agent import create_weather_workflow
from .weather_workflow.schemas import ActivityPlan, Forecast, WorkflowOutput
from .weather_workflow.steps import ACTIVITIES_KEY, FORECAST_KEY

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "local_user"


def user_message(text: str) -> types.Content:
    return types.Content(role="user", parts=[types.Part(text=text)])


async def ask(runner: Runner, session: Session, text: str) -> str:
    """Send one message through ``runner`` and return the final text reply.

    Tool calls made along the way are logged.  Returns an empty string when
    the agent produced no text.
    """
    final_response = ""

    async for event in runner.run_async(
        user_id=session.user_id,
        session_id=session.id,
        new_message=user_message(text),
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if part.function_call:
                log_status(f"Calling tool: {part.function_call.name}")
            if part.text:
                final_response = part.text

    return final_response


async def run_weather_workflow(
    city: str,
    workflow: Optional[BaseAgent] = None,
    session_service: Optional[BaseSessionService] = None,
    user_id: str = DEFAULT_USER_ID,
) -> WorkflowOutput:
    """Execute the weather workflow for ``city`` and collect its output.

    Errors from either step propagate unchanged.  A run that ends without
    any planner text raises ActivityPlanNotFoundError.
    """
    workflow = workflow or create_weather_workflow()
    session_service = session_service or InMemorySessionService()

    runner = Runner(
        agent=workflow,
        app_name=workflow.name,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=workflow.name, user_id=user_id
    )

    async for event in runner.run_async(
        user_id=user_id,
        session_id=session.id,
        new_message=user_message(city),
    ):
        logger.debug("workflow event from %s", event.author)

    session = await session_service.get_session(
        app_name=workflow.name, user_id=user_id, session_id=session.id
    )
    forecast = Forecast.model_validate(session.state.get(FORECAST_KEY))
    activities = session.state.get(ACTIVITIES_KEY)
    if not activities:
        raise ActivityPlanNotFoundError()
    plan = ActivityPlan(activities=activities)
    return WorkflowOutput(**forecast.model_dump(), activities=plan.activities)
