# =============================================================================
# main.py  -  Terminal entry point
# =============================================================================
#
# HOW TO RUN:
#   python main.py                   chat with the weather agent
#   python main.py workflow Berlin   run the weather workflow once
#
# WHAT HAPPENS (chat):
#   1. Settings are loaded from the environment / .env
#   2. The weather agent is created (agents/weather_agent/agent.py)
#   3. A Runner and a session are set up on the configured session backend
#   4. Each line you type is sent to the agent; tool calls are logged and
#      the final reply is printed
#
# WHAT HAPPENS (workflow):
#   fetch_forecast runs for the city, then plan_activities turns the
#   forecast into suggestions.  Both results are printed.
# =============================================================================

import argparse
import asyncio
import sys

from google.adk.runners import Runner

from agents.runner import DEFAULT_USER_ID, ask, run_weather_workflow
from agents.sessions import build_session_service
from agents.weather_agent.agent import AGENT_NAME, create_agent
from core.config import Settings, load_settings, require_api_key
from core.errors import MissingCredentialError
from core.log import configure_logging


async def chat(settings: Settings) -> None:
    """Interactive chat loop with the weather agent."""
    print("=" * 70)
    print("  WEATHER AGENT")
    print("  Powered by Google ADK + Groq + Open-Meteo")
    print("=" * 70)

    agent = create_agent(settings)
    session_service = build_session_service(settings.session_db_url)
    runner = Runner(
        agent=agent,
        app_name=AGENT_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=AGENT_NAME,
        user_id=DEFAULT_USER_ID,
    )

    print("\nAsk about the weather anywhere (type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        reply = await ask(runner, session, user_input)
        print("-" * 70)
        if reply:
            print(f"\n🤖 Agent:\n\n{reply}")
        else:
            print("\n⚠️  No response generated.")


async def workflow(city: str) -> None:
    """Run the weather workflow once and print its output."""
    result = await run_weather_workflow(city)

    print("=" * 70)
    print(f"  {result.location}  ({result.date})")
    print("=" * 70)
    print(f"  Condition:     {result.condition}")
    print(f"  Temperature:   {result.min_temp}°C to {result.max_temp}°C")
    print(f"  Precipitation: {result.precipitation_chance}%")
    print("-" * 70)
    print(result.activities)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weather agent starter")
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("chat", help="chat with the weather agent (default)")
    run = subcommands.add_parser("workflow", help="run the weather workflow for a city")
    run.add_argument("city", nargs="+", help="city name, e.g. Berlin")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        require_api_key(settings)
    except MissingCredentialError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if args.command == "workflow":
        asyncio.run(workflow(" ".join(args.city)))
    else:
        asyncio.run(chat(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
