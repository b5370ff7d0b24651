# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers.
#
# tools/ sits between the agent framework and core/.  Each tool:
#   1. Calls a function from core/
#   2. Converts dataclasses to dicts for JSON
#   3. Logs the call to stderr
#
# Tools contain no business logic and know nothing about Google ADK.  The
# docstring of each tool is what the model reads to decide when to call it.
# =============================================================================
