import re

import pytest
from google.adk.agents import Agent
from google.adk.sessions import DatabaseSessionService, InMemorySessionService
from google.adk.tools.mcp_tool import MCPToolset

from agents import sessions
from agents.weather_agent.agent import AGENT_NAME, create_agent
from agents.weather_agent.prompt import get_weather_agent_prompt
from core.config import load_settings


def test_agent_configuration():
    settings = load_settings({"WEATHER_AGENT_MODEL": "openrouter/openai/gpt-4o"})
    agent = create_agent(settings)

    assert isinstance(agent, Agent)
    assert agent.name == AGENT_NAME == "weather_agent"
    assert agent.model.model == "openrouter/openai/gpt-4o"
    assert len(agent.tools) == 1
    assert isinstance(agent.tools[0], MCPToolset)


def test_prompt_has_no_state_placeholders():
    prompt = get_weather_agent_prompt()

    assert "get_weather" in prompt
    assert not re.search(r"\{[^{}]*\}", prompt)


def test_in_memory_sessions():
    assert isinstance(sessions.build_session_service(":memory:"), InMemorySessionService)
    assert isinstance(sessions.build_session_service(""), InMemorySessionService)
    assert sessions.session_service_uri(load_settings({})) is None


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///weather.db", "sqlite+aiosqlite:///weather.db"),
        ("postgresql://db/weather", "postgresql+asyncpg://db/weather"),
        ("mysql://db/weather", "mysql+aiomysql://db/weather"),
        ("sqlite+aiosqlite:///weather.db", "sqlite+aiosqlite:///weather.db"),
    ],
)
def test_async_db_url(url, expected):
    assert sessions.async_db_url(url) == expected


def test_server_gets_async_session_uri():
    settings = load_settings({"SESSION_DB_URL": "sqlite:///weather.db"})

    assert sessions.session_service_uri(settings) == "sqlite+aiosqlite:///weather.db"


@pytest.mark.asyncio
async def test_sqlite_file_sessions(tmp_path):
    service = sessions.build_session_service(f"sqlite:///{tmp_path}/weather.db")
    assert isinstance(service, DatabaseSessionService)

    created = await service.create_session(
        app_name=AGENT_NAME, user_id="tester", state={"city": "Berlin"}
    )
    loaded = await service.get_session(
        app_name=AGENT_NAME, user_id="tester", session_id=created.id
    )

    assert loaded.id == created.id
    assert loaded.state["city"] == "Berlin"
    assert (tmp_path / "weather.db").exists()
