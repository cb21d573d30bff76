"""Tests for the configuration loader and the startup exit paths."""

import pytest

import tools.mcp_server as mcp_server
from core.config import AlfrescoConfig, load_config
from core.errors import ConfigError
from tests.payloads import HOST, PASSWORD, USERNAME

VALID_ENV = {
    "ALFRESCO_HOST": HOST,
    "ALFRESCO_USERNAME": USERNAME,
    "ALFRESCO_PASSWORD": PASSWORD,
}


def test_load_config_returns_frozen_record():
    config = load_config(VALID_ENV)

    assert config == AlfrescoConfig(host=HOST, username=USERNAME, password=PASSWORD)
    with pytest.raises(AttributeError):
        config.host = "http://elsewhere"


def test_password_is_not_in_repr():
    assert PASSWORD not in repr(load_config(VALID_ENV))


def test_host_is_kept_verbatim():
    env = dict(VALID_ENV, ALFRESCO_HOST="https://ecm.example.com:8443")
    assert load_config(env).host == "https://ecm.example.com:8443"


@pytest.mark.parametrize("missing", ["ALFRESCO_HOST", "ALFRESCO_USERNAME", "ALFRESCO_PASSWORD"])
def test_missing_variable_is_named(missing):
    env = {k: v for k, v in VALID_ENV.items() if k != missing}

    with pytest.raises(ConfigError) as excinfo:
        load_config(env)

    assert excinfo.value.variable == missing
    assert str(excinfo.value) == f"Missing required environment variable: {missing}"


def test_empty_variable_counts_as_missing():
    with pytest.raises(ConfigError) as excinfo:
        load_config(dict(VALID_ENV, ALFRESCO_USERNAME=""))
    assert excinfo.value.variable == "ALFRESCO_USERNAME"


def test_first_missing_variable_wins():
    with pytest.raises(ConfigError) as excinfo:
        load_config({})
    assert excinfo.value.variable == "ALFRESCO_HOST"


@pytest.mark.parametrize("host", ["not-a-url", "localhost:8080", "/alfresco", "http://"])
def test_invalid_host_is_rejected(host):
    with pytest.raises(ConfigError) as excinfo:
        load_config(dict(VALID_ENV, ALFRESCO_HOST=host))

    assert excinfo.value.variable == "ALFRESCO_HOST"
    assert excinfo.value.message == "Invalid Alfresco host URL"


def test_presence_is_checked_before_url_validity():
    env = {"ALFRESCO_HOST": "not-a-url", "ALFRESCO_USERNAME": USERNAME}

    with pytest.raises(ConfigError) as excinfo:
        load_config(env)

    assert excinfo.value.variable == "ALFRESCO_PASSWORD"


# -----------------------------------------------------------------------------
# Bootstrap exit paths
# -----------------------------------------------------------------------------
class _ClientMustNotBeBuilt:
    def __init__(self, *args, **kwargs):
        raise AssertionError("AlfrescoClient constructed despite invalid configuration")

    @classmethod
    def from_config(cls, config):
        return cls()


@pytest.fixture
def isolated_main(monkeypatch):
    """main() without .env loading and without a real client."""
    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: False)
    monkeypatch.setattr(mcp_server, "AlfrescoClient", _ClientMustNotBeBuilt)
    return mcp_server.main


@pytest.mark.parametrize("missing", ["ALFRESCO_HOST", "ALFRESCO_USERNAME", "ALFRESCO_PASSWORD"])
def test_main_exits_nonzero_on_missing_variable(isolated_main, alfresco_env, alfresco_api, monkeypatch, capsys, missing):
    monkeypatch.delenv(missing)

    with pytest.raises(SystemExit) as excinfo:
        isolated_main()

    assert excinfo.value.code == 1
    assert f"Missing required environment variable: {missing}" in capsys.readouterr().err
    assert not alfresco_api.calls


def test_main_exits_nonzero_on_invalid_host(isolated_main, alfresco_env, alfresco_api, monkeypatch, capsys):
    monkeypatch.setenv("ALFRESCO_HOST", "not-a-url")

    with pytest.raises(SystemExit) as excinfo:
        isolated_main()

    assert excinfo.value.code == 1
    assert "Invalid Alfresco host URL" in capsys.readouterr().err
    assert not alfresco_api.calls


def test_main_exits_nonzero_when_server_fails_to_start(alfresco_env, monkeypatch):
    async def broken_serve(client):
        raise RuntimeError("stdio unavailable")

    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: False)
    monkeypatch.setattr(mcp_server, "serve", broken_serve)

    with pytest.raises(SystemExit) as excinfo:
        mcp_server.main()

    assert excinfo.value.code == 1
