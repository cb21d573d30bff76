# =============================================================================
# core/config.py  —  Configuration Loader
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the three settings the server cannot run without from the process
#   environment and returns them as an immutable AlfrescoConfig record:
#
#     ALFRESCO_HOST      → base URL of the Alfresco instance
#     ALFRESCO_USERNAME  → account used for HTTP Basic auth
#     ALFRESCO_PASSWORD  → password for that account
#
#   There are no defaults.  A missing variable or a host that is not an
#   absolute URL raises ConfigError; the bootstrap (tools/mcp_server.py)
#   turns that into a diagnostic on stderr and exit status 1.
#
# .env FILES:
#   The bootstrap calls load_dotenv() before load_config(), so a local .env
#   file can provide these values during development.  This module only ever
#   looks at the mapping it is given.
# =============================================================================

from dataclasses import dataclass, field
import os
from typing import Mapping
from urllib.parse import urlparse

from core.errors import ConfigError

REQUIRED_ENV_VARS = ("ALFRESCO_HOST", "ALFRESCO_USERNAME", "ALFRESCO_PASSWORD")


@dataclass(frozen=True)
class AlfrescoConfig:
    """Connection settings, loaded once at startup and never mutated."""

    host: str                          # e.g. "http://localhost:8080" (no path suffix)
    username: str
    password: str = field(repr=False)  # Keep secrets out of logs and tracebacks


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


def load_config(environ: Mapping[str, str] | None = None) -> AlfrescoConfig:
    """Load and validate the Alfresco connection settings.

    Variables are checked in order (host, username, password), so the error
    always names the first one that is missing.

    Args:
        environ: Mapping to read from.  Defaults to os.environ.

    Returns:
        A frozen AlfrescoConfig.

    Raises:
        ConfigError: A variable is missing/empty, or the host is not an
            absolute URL.
    """
    if environ is None:
        environ = os.environ

    for name in REQUIRED_ENV_VARS:
        if not environ.get(name):
            raise ConfigError(name, f"Missing required environment variable: {name}")

    host = environ["ALFRESCO_HOST"]
    if not _is_absolute_url(host):
        raise ConfigError("ALFRESCO_HOST", "Invalid Alfresco host URL")

    return AlfrescoConfig(
        host=host,
        username=environ["ALFRESCO_USERNAME"],
        password=environ["ALFRESCO_PASSWORD"],
    )
