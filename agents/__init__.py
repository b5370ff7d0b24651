# =============================================================================
# agents/__init__.py
# =============================================================================
# The Google ADK "agents directory".
#
# Every sub-package here is one ADK app and exposes a module-level
# ``root_agent`` through its ``agent`` module:
#
#   weather_agent/     conversational weather assistant (LlmAgent + MCP tool)
#   weather_workflow/  fetch_forecast -> plan_activities (SequentialAgent)
#
# server.py points ADK's FastAPI app at this directory, which generates the
# chat/run endpoints and the dev UI from these apps.  main.py drives the
# same agents from the terminal through agents/runner.py.
# =============================================================================
