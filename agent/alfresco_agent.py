# =============================================================================
# agent/alfresco_agent.py  —  Google ADK Agent wired to the Alfresco MCP server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a Google ADK agent that talks to Alfresco ONLY through our MCP
#   server.  This is the host side of the protocol: ADK spawns
#   `python -m tools.mcp_server` as a subprocess, discovers the `search` and
#   `readContent` tools over stdio, and lets the LLM call them.
#
#   ┌──────────────────────┐   stdio / MCP   ┌──────────────────────┐   REST
#   │  ADK Agent (LiteLlm) │ ──────────────▶ │  tools/mcp_server.py │ ───────▶ Alfresco
#   └──────────────────────┘                 └──────────────────────┘
#
# ENVIRONMENT:
#   The MCP stdio client does not inherit the parent environment; it only
#   passes a small safe set (HOME, PATH, ...).  server_environment() adds the
#   ALFRESCO_* settings on top so the subprocess can load its configuration.
#
# MODEL:
#   LiteLlm model string from ALFRESCO_AGENT_MODEL, default
#   "openrouter/openai/gpt-4o".  LiteLlm reads the provider key (e.g.
#   OPENROUTER_API_KEY) from the environment itself.
# =============================================================================

import os
from typing import Mapping

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters
from mcp.client.stdio import get_default_environment

from agent.prompt import get_repository_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

FORWARDED_ENV_VARS = (
    "ALFRESCO_HOST",
    "ALFRESCO_USERNAME",
    "ALFRESCO_PASSWORD",
    "ALFRESCO_LOG_LEVEL",
)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_environment(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Environment for the MCP server subprocess.

    The MCP client's default safe environment plus every ALFRESCO_* setting
    that is present in `environ` (defaults to os.environ).
    """
    if environ is None:
        environ = os.environ

    env = get_default_environment()
    for name in FORWARDED_ENV_VARS:
        if environ.get(name):
            env[name] = environ[name]
    return env


def server_parameters(environ: Mapping[str, str] | None = None) -> StdioServerParameters:
    """How ADK starts the MCP server: `uv run python -m tools.mcp_server`.

    uv runs the subprocess inside the project's virtualenv, so the server
    sees the same dependencies as the agent.
    """
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        env=server_environment(environ),
        cwd=PROJECT_ROOT,
    )


def create_agent() -> Agent:
    """Create the Alfresco repository assistant agent."""
    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="alfresco_repository_assistant",
        model=LiteLlm(model=os.environ.get("ALFRESCO_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_repository_assistant_prompt(),
        tools=[mcp_tools],
    )
