# =============================================================================
# core/alfresco_client.py  —  Alfresco REST Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the three Alfresco REST calls the MCP server needs:
#
#     get_node_metadata(id)    → GET  .../alfresco/versions/1/nodes/{id}
#     download_node_content(id)→ GET  .../alfresco/versions/1/nodes/{id}/content
#     search_nodes(query, ...) → POST .../search/versions/1/search
#
# HOW IT WORKS:
#   1. The constructor computes the Basic-auth header ONCE.  There is no
#      refresh or re-authentication path.
#   2. build_url() maps an API kind ("alfresco" / "search") to a fixed path
#      template and glues it onto the host.  No escaping is done.
#   3. _fetch_with_auth() adds the default headers, sends the request, and
#      raises UpstreamError on any non-2xx status.
#
# CONCURRENCY:
#   The client holds only read-only state (host + credential), so one
#   instance is shared by every in-flight MCP request.  Each call opens its
#   own httpx.AsyncClient: no connection pooling, and no timeout unless one
#   is passed to the constructor.
# =============================================================================

import base64
import logging
from typing import Any, Optional

import httpx

from core.config import AlfrescoConfig
from core.errors import UpstreamError
from core.models import DEFAULT_MAX_ITEMS, DEFAULT_SKIP_COUNT, SearchRequest

logger = logging.getLogger(__name__)

_BASE_PATHS = {
    "alfresco": "/alfresco/api/-default-/public/alfresco/versions/1{path}",
    "search": "/alfresco/api/-default-/public/search/versions/1/search",
}


def basic_auth_header(username: str, password: str) -> str:
    """Return the HTTP Basic Authorization header value."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class AlfrescoClient:
    """Authenticated access to one Alfresco instance."""

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        timeout: Optional[float] = None,
    ):
        self.host = host
        self.basic_auth_header = basic_auth_header(username, password)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: AlfrescoConfig) -> "AlfrescoClient":
        return cls(config.host, config.username, config.password)

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------
    def build_url(self, path: str = "", api: str = "alfresco") -> str:
        """Build a full URL for the given API kind.

        The "search" template takes no path; anything passed is ignored.
        """
        return f"{self.host}{_BASE_PATHS[api].format(path=path)}"

    async def _fetch_with_auth(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send an authenticated request and return the buffered response.

        Caller headers override the defaults on key collision.

        Raises:
            UpstreamError: The server answered with a non-2xx status.
            httpx.RequestError: No response was received; re-raised as-is.
        """
        merged = {
            "Authorization": self.basic_auth_header,
            "Accept": "application/json",
            **(headers or {}),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as http:
                response = await http.request(method, url, headers=merged, **kwargs)
        except httpx.RequestError as exc:
            logger.error("API Request Failed: %s %s: %r", method, url, exc)
            raise

        if not response.is_success:
            error = UpstreamError(response.status_code, response.text)
            logger.error("API Request Failed: %s %s: %s", method, url, error)
            raise error

        return response

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    async def get_node_metadata(self, node_id: str) -> dict[str, Any]:
        """Fetch a node's metadata envelope ({"entry": {...}})."""
        response = await self._fetch_with_auth("GET", self.build_url(f"/nodes/{node_id}"))
        return response.json()

    async def download_node_content(self, node_id: str) -> httpx.Response:
        """Fetch a node's content.

        Returns the raw response so the caller decides between .content
        (bytes) and .text.  The body is already fully read into memory.
        """
        return await self._fetch_with_auth("GET", self.build_url(f"/nodes/{node_id}/content"))

    async def search_nodes(
        self,
        query: str,
        max_items: Optional[int] = None,
        skip_count: Optional[int] = None,
    ) -> dict[str, Any]:
        """Run an AFTS full-text search restricted to cm:content nodes.

        A max_items or skip_count of None (or 0) falls back to 10 / 0.
        """
        request = SearchRequest(
            query=query,
            max_items=max_items or DEFAULT_MAX_ITEMS,
            skip_count=skip_count or DEFAULT_SKIP_COUNT,
        )
        response = await self._fetch_with_auth(
            "POST",
            self.build_url(api="search"),
            headers={"Content-Type": "application/json"},
            json=request.to_body(),
        )
        return response.json()
