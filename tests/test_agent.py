"""Tests for the demo agent's prompt and MCP subprocess parameters."""

from datetime import date

from agent.alfresco_agent import PROJECT_ROOT, server_environment, server_parameters
from agent.prompt import get_repository_assistant_prompt


def test_prompt_mentions_both_tools_and_uri_scheme():
    prompt = get_repository_assistant_prompt()

    assert "search(query, maxItems)" in prompt
    assert "readContent(fileUri)" in prompt
    assert "alfresco://<node-id>" in prompt


def test_prompt_injects_today():
    assert date.today().isoformat() in get_repository_assistant_prompt()


def test_server_environment_forwards_alfresco_settings():
    env = server_environment({
        "ALFRESCO_HOST": "http://alfresco.test",
        "ALFRESCO_USERNAME": "admin",
        "ALFRESCO_PASSWORD": "secret",
        "UNRELATED_SECRET": "do-not-leak",
    })

    assert env["ALFRESCO_HOST"] == "http://alfresco.test"
    assert env["ALFRESCO_USERNAME"] == "admin"
    assert env["ALFRESCO_PASSWORD"] == "secret"
    assert "ALFRESCO_LOG_LEVEL" not in env
    assert "UNRELATED_SECRET" not in env


def test_server_parameters_run_the_mcp_module():
    params = server_parameters({"ALFRESCO_HOST": "http://alfresco.test"})

    assert params.args[-2:] == ["-m", "tools.mcp_server"]
    assert params.cwd == PROJECT_ROOT
    assert params.env["ALFRESCO_HOST"] == "http://alfresco.test"
