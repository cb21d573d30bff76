# =============================================================================
# tools/catalogue.py  —  The Static Tool Catalogue
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the two tools the server exposes and nothing else.  The list is
#   fixed at import time; it is never computed from live Alfresco state.
#
#     search       → full-text search, returns alfresco:// URIs
#     readContent  → read a file's content as text, by alfresco:// URI
#
# The description strings are what the LLM reads to decide WHEN to call a
# tool, so they stay short and literal.
# =============================================================================

from enum import Enum

from mcp import types


class ToolName(str, Enum):
    """Every tool name the router knows how to dispatch."""

    SEARCH = "search"
    READ_CONTENT = "readContent"


SEARCH_TOOL = types.Tool(
    name=ToolName.SEARCH.value,
    description="Advanced Alfresco file search",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Full-text search query"},
            "maxItems": {"type": "number", "description": "Maximum search results"},
        },
        "required": ["query"],
    },
)

READ_CONTENT_TOOL = types.Tool(
    name=ToolName.READ_CONTENT.value,
    description="Read file content by Alfresco URI",
    inputSchema={
        "type": "object",
        "properties": {
            "fileUri": {"type": "string", "description": "Alfresco file URI"},
        },
        "required": ["fileUri"],
    },
)

TOOLS: tuple[types.Tool, ...] = (SEARCH_TOOL, READ_CONTENT_TOOL)
