# =============================================================================
# agents/sessions.py  -  Session (memory) backend selection
# =============================================================================
#
# Conversation memory is whatever ADK session service SESSION_DB_URL names:
#
#   ":memory:"                      InMemorySessionService (lost on exit)
#   "sqlite:///weather.db"          DatabaseSessionService on a local file
#   "postgresql://user@host/db"     DatabaseSessionService on a remote server
#
# DatabaseSessionService runs on SQLAlchemy's async engine, so plain URLs
# are rewritten to their async driver (sqlite -> sqlite+aiosqlite, ...).
# URLs that already name a driver are used unchanged.
# =============================================================================

from typing import Optional

from google.adk.sessions import (
    BaseSessionService,
    DatabaseSessionService,
    InMemorySessionService,
)

from core.config import IN_MEMORY_STORAGE, Settings

ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "postgresql": "postgresql+asyncpg",
    "postgres": "postgresql+asyncpg",
    "mysql": "mysql+aiomysql",
}


def async_db_url(db_url: str) -> str:
    """Point a database URL at the async driver for its dialect."""
    scheme, sep, rest = db_url.partition("://")
    if not sep or "+" in scheme:
        return db_url
    return f"{ASYNC_DRIVERS.get(scheme.lower(), scheme)}://{rest}"


def build_session_service(db_url: str = IN_MEMORY_STORAGE) -> BaseSessionService:
    if db_url in ("", IN_MEMORY_STORAGE):
        return InMemorySessionService()
    return DatabaseSessionService(db_url=async_db_url(db_url))


def session_service_uri(settings: Settings) -> Optional[str]:
    """The URI to hand ADK's FastAPI app; None keeps sessions in memory."""
    if settings.uses_in_memory_storage:
        return None
    return async_db_url(settings.session_db_url)
