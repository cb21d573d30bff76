# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure the server raises on purpose is one of these classes, so
# callers can branch on the KIND of failure instead of parsing messages:
#
#   ConfigError           → missing / invalid environment variable (startup)
#   UpstreamError         → Alfresco answered with a non-2xx status
#   UnsupportedToolError  → call-tool asked for a tool we don't have
#
# Network-level failures (no response at all) are NOT wrapped: httpx raises
# its own httpx.RequestError subclasses and the client re-raises them as-is.
# =============================================================================


class AlfrescoError(Exception):
    """Base class for errors raised by the Alfresco MCP server."""


class ConfigError(AlfrescoError):
    """A required setting is missing or malformed."""

    def __init__(self, variable: str, message: str):
        super().__init__(message)
        self.variable = variable
        self.message = message


class UpstreamError(AlfrescoError):
    """Alfresco returned a non-success HTTP status.

    Carries the status code and the response body text exactly as received.
    """

    def __init__(self, status: int, body: str):
        super().__init__(f"HTTP {status}: {body}")
        self.status = status
        self.body = body


class UnsupportedToolError(AlfrescoError):
    """call-tool named a tool that is not in the catalogue."""

    def __init__(self, name: str):
        super().__init__(f"Unsupported tool: {name}")
        self.name = name
