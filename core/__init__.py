# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free code for the weather agent starter: data models, the
# Open-Meteo client, configuration and logging helpers.
#
# Nothing in this package imports Google ADK or FastMCP.  The agent and tool
# layers depend on core/, never the other way round.
# =============================================================================
