# =============================================================================
# agents/weather_agent/agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the conversational weather agent: an ADK Agent that reasons
#   with a Groq-hosted model (through LiteLlm) and fetches data with
#   the get_weather MCP tool.
#
#   ┌──────────────────────────────────────────────────────────────┐
#   │                      Google ADK Agent                       │
#   │  System prompt ──▶ LLM (LiteLlm/Groq) ──▶ MCPToolset         │
#   └──────────────────────────────────────────────────────────────┘
#                                                    │ stdio
#                                                    ▼
#                                        tools/mcp_server.py (FastMCP)
#                                                    │
#                                                    ▼
#                                        core/weather.py (Open-Meteo)
#
# MEMORY:
#   Conversation history lives in the session service the Runner (or ADK's
#   FastAPI app) is built with; see agents/sessions.py.  The agent itself is
#   stateless configuration.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset, StdioConnectionParams
from mcp import StdioServerParameters

from core.config import Settings, load_settings

from .prompt import get_weather_agent_prompt

AGENT_NAME = "weather_agent"
TOOL_SERVER_MODULE = "tools.mcp_server"

PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)


def create_weather_toolset() -> MCPToolset:
    """Connect to the FastMCP tool server over stdio.

    The server runs under the same interpreter as this process, from the
    project root so that ``core`` and ``tools`` are importable.  The parent
    environment is passed through so the subprocess sees USE_LIVE_WEATHER
    and LOG_LEVEL.
    """
    return MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=["-m", TOOL_SERVER_MODULE],
                cwd=PROJECT_ROOT,
                env=dict(os.environ),
            ),
        ),
        tool_filter=["get_weather"],
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the weather agent.

    Args:
        settings: Resolved settings; loaded from the environment if omitted.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or load_settings()

    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=settings.model),
        description="Answers weather questions and suggests activities for a city.",
        instruction=get_weather_agent_prompt(),
        tools=[create_weather_toolset()],
    )


root_agent = create_agent()
