# =============================================================================
# core/log.py  -  Logging setup and colour-coded call tracing
# =============================================================================
#
# Logs go to STDERR.  The MCP tool server talks to the agent over
# stdin/stdout, so anything written to stdout would corrupt the protocol
# stream.
#
# Colours (ANSI escape codes):
#   CYAN    incoming requests (tool or step name + parameters)
#   YELLOW  intermediate status messages
#   GREEN   responses (compact JSON)
# =============================================================================

import json
import logging
import sys

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("weather")


def configure_logging(level: str = "INFO", tag: str = "weather") -> None:
    """Configure root logging for the current process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=f"%(asctime)s [{tag}] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(name: str, **params) -> None:
    """Log an incoming call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(name: str, result: dict) -> dict:
    """Log a result as compact JSON in GREEN, then return it."""
    logger.info(
        f"{_GREEN}  ← {name} response: "
        f"{json.dumps(result, separators=(',', ':'), default=str)}{_RESET}"
    )
    return result
