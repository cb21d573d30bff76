# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK demo agent: the MCP HOST side.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer does not talk to Alfresco.  It:
#     1. Starts tools/mcp_server.py as a stdio subprocess
#     2. Lets the LLM discover and call the `search` / `readContent` tools
#     3. Turns the tool results into answers for the user
#
#   It exists to exercise the server end to end; the server itself has no
#   dependency on anything in here.
# =============================================================================
