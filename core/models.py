# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses describe the shape of everything that flows between the
# MCP layer and Alfresco.  All of them are request-scoped: built from one
# REST response, used to produce one MCP response, then thrown away.
# Nothing here is cached.
#
# NODE REFERENCES:
#   The MCP side addresses nodes as "alfresco://<node-id>".  The REST client
#   only ever sees the bare node id; node_id_from_uri() is the one place the
#   scheme prefix is removed.
# =============================================================================

from dataclasses import dataclass, field, asdict
import json
from typing import Any, Optional

ALFRESCO_SCHEME = "alfresco://"
DEFAULT_MIME_TYPE = "application/octet-stream"

DEFAULT_MAX_ITEMS = 10
DEFAULT_SKIP_COUNT = 0

# Search is restricted to content nodes (no folders), always.
CONTENT_TYPE_FILTER = " AND TYPE:'cm:content'"
SEARCH_LANGUAGE = "afts"


def node_id_from_uri(uri: str) -> str:
    """Strip the alfresco:// prefix from a node URI.

    Behaves like a plain string replace of the first occurrence, so a bare
    node id passes through unchanged.
    """
    return uri.replace(ALFRESCO_SCHEME, "", 1)


def node_uri(node_id: str) -> str:
    """Build the alfresco:// URI for a node id."""
    return f"{ALFRESCO_SCHEME}{node_id}"


# -----------------------------------------------------------------------------
# NodeMetadata — the subset of an Alfresco node entry we branch on
# -----------------------------------------------------------------------------
@dataclass
class NodeMetadata:
    """Alfresco's description of a single node."""

    id: str
    name: str
    is_folder: bool = False
    mime_type: Optional[str] = None    # entry.content.mimeType, files only

    @classmethod
    def from_entry(cls, payload: dict[str, Any]) -> "NodeMetadata":
        """Build from the REST envelope: {"entry": {...}}."""
        entry = payload.get("entry") or {}
        content = entry.get("content") or {}
        return cls(
            id=entry.get("id", ""),
            name=entry.get("name", ""),
            is_folder=bool(entry.get("isFolder", False)),
            mime_type=content.get("mimeType"),
        )

    @property
    def content_mime_type(self) -> str:
        return self.mime_type or DEFAULT_MIME_TYPE


# -----------------------------------------------------------------------------
# SearchRequest — parameters for one AFTS query
# -----------------------------------------------------------------------------
@dataclass
class SearchRequest:
    """A full-text search against the Alfresco search API."""

    query: str
    max_items: int = DEFAULT_MAX_ITEMS
    skip_count: int = DEFAULT_SKIP_COUNT

    def to_body(self) -> dict[str, Any]:
        """Render the JSON body for POST .../search/versions/1/search."""
        return {
            "query": {
                "query": f"{self.query}{CONTENT_TYPE_FILTER}",
                "language": SEARCH_LANGUAGE,
            },
            "paging": {
                "maxItems": self.max_items,
                "skipCount": self.skip_count,
            },
            "include": ["properties"],
        }


# -----------------------------------------------------------------------------
# SearchResultEntry — one hit, in the shape the agent sees
# -----------------------------------------------------------------------------
# Field names are camelCase on purpose: asdict() of this class IS the JSON
# the search tool returns.
# -----------------------------------------------------------------------------
@dataclass
class SearchResultEntry:
    uri: str
    mimeType: str
    name: str

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "SearchResultEntry":
        entry = item.get("entry") or {}
        content = entry.get("content") or {}
        return cls(
            uri=node_uri(entry.get("id", "")),
            mimeType=content.get("mimeType") or DEFAULT_MIME_TYPE,
            name=entry.get("name", ""),
        )


@dataclass
class SearchPage:
    """A page of search results plus the server-side total."""

    total_items: int
    entries: list[SearchResultEntry] = field(default_factory=list)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "SearchPage":
        results = payload.get("list") or {}
        pagination = results.get("pagination") or {}
        total = pagination.get("totalItems")
        return cls(
            total_items=total if total is not None else 0,
            entries=[SearchResultEntry.from_item(item) for item in results.get("entries") or []],
        )

    def summary(self) -> str:
        """Summary line followed by the pretty-printed entry list."""
        entries = [asdict(entry) for entry in self.entries]
        return f"Found {self.total_items} items:\n{json.dumps(entries, indent=2)}"
