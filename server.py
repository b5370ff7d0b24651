# =============================================================================
# server.py  -  HTTP entry point
# =============================================================================
#
# HOW TO RUN:
#   python server.py
#
# ADK builds the whole HTTP surface from the agents/ directory:
#   - POST /run, /run_sse           chat with weather_agent or execute
#                                   weather_workflow ("Berlin" or
#                                   '{"city": "Berlin"}' as the message)
#   - /apps/<app>/users/<user>/sessions/...   session management
#   - /dev-ui                       interactive explorer
#
# Sessions are stored according to SESSION_DB_URL (see agents/sessions.py).
# =============================================================================

import os
import sys

import uvicorn
from fastapi import FastAPI
from google.adk.cli.fast_api import get_fast_api_app

from agents.sessions import session_service_uri
from core.config import Settings, load_settings, require_api_key
from core.errors import MissingCredentialError
from core.log import configure_logging

AGENTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "agents")


def create_app(settings: Settings) -> FastAPI:
    return get_fast_api_app(
        agents_dir=AGENTS_DIR,
        session_service_uri=session_service_uri(settings),
        web=True,
    )


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        require_api_key(settings)
    except MissingCredentialError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
