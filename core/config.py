# =============================================================================
# core/config.py  -  Environment configuration
# =============================================================================
#
# All settings come from environment variables.  A .env file in the working
# directory is loaded first (python-dotenv), so local development only needs:
#
#   GROQ_API_KEY=gsk_...
#
# VARIABLES:
#   GROQ_API_KEY         required for the default groq/ model
#   OPENROUTER_API_KEY   required instead when WEATHER_AGENT_MODEL is openrouter/...
#   USE_LIVE_WEATHER     "false" switches to the offline weather provider
#   SESSION_DB_URL       ":memory:", "sqlite:///weather.db", "postgresql://..."
#   WEATHER_AGENT_MODEL  LiteLlm model string
#   LOG_LEVEL            logging level name
#   HOST / PORT          bind address for server.py
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.errors import MissingCredentialError

IN_MEMORY_STORAGE = ":memory:"
DEFAULT_MODEL = "groq/llama-3.3-70b-versatile"

# LiteLlm provider prefix -> the variable LiteLlm reads the key from
API_KEY_ENVS = {
    "groq": "GROQ_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}

_TRUTHY = {"1", "true", "yes", "on"}


def api_key_env(model: str) -> str:
    """The credential variable for a LiteLlm model string."""
    provider = model.split("/", 1)[0].lower()
    return API_KEY_ENVS.get(provider, f"{provider.upper()}_API_KEY")


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    api_key: Optional[str]
    model: str = DEFAULT_MODEL
    use_live_weather: bool = True
    session_db_url: str = IN_MEMORY_STORAGE
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def uses_in_memory_storage(self) -> bool:
        return self.session_db_url in ("", IN_MEMORY_STORAGE)

    @property
    def api_key_env(self) -> str:
        return api_key_env(self.model)


def env_flag(value: Optional[str], default: bool) -> bool:
    """Parse an on/off environment value; blank or unset means ``default``."""
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to os.environ after .env).

    Passing an explicit mapping skips the .env file, which keeps tests
    independent of the developer's local setup.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    model = environ.get("WEATHER_AGENT_MODEL", DEFAULT_MODEL)
    return Settings(
        api_key=environ.get(api_key_env(model)) or None,
        model=model,
        use_live_weather=env_flag(environ.get("USE_LIVE_WEATHER"), default=True),
        session_db_url=environ.get("SESSION_DB_URL", IN_MEMORY_STORAGE),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        host=environ.get("HOST", "127.0.0.1"),
        port=int(environ.get("PORT", "8000")),
    )


def require_api_key(settings: Settings) -> str:
    """Return the inference API key or raise MissingCredentialError."""
    if not settings.api_key:
        raise MissingCredentialError(
            f"{settings.api_key_env} is not set. Add it to your environment or .env file."
        )
    return settings.api_key
