# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL Alfresco-facing logic for the MCP server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports the MCP SDK, Google ADK, or any
#   orchestration framework.  The only third-party import is httpx, used by
#   the REST client.  Configuration, errors, models and the client can be
#   exercised from a bare Python REPL.
# =============================================================================
