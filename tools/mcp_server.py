# =============================================================================
# tools/mcp_server.py  —  MCP Server (router + process bootstrap)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes Alfresco to an MCP host over stdio.  It answers three message
#   kinds and hands the real work to core/alfresco_client.py:
#
#     list-tools     → the static catalogue in tools/catalogue.py
#     read-resource  → alfresco://<id>  →  metadata, then content as a blob
#     call-tool      → "search" | "readContent"  (anything else is an error)
#
# HOW IT WORKS (the flow):
#   1. main() loads .env, validates ALFRESCO_* and builds ONE AlfrescoClient
#   2. create_server() registers the three handlers on a low-level MCP Server
#   3. serve() attaches the server to stdin/stdout and runs until EOF
#   4. Each inbound message runs as its own asyncio task; the handlers share
#      only the client's read-only host and credential
#
# LOW-LEVEL SERVER:
#   read-resource reports the mimeType each node declares, per call, so the
#   handlers sit on mcp.server.Server directly.  The SDK base64-encodes the
#   returned bytes into the "blob" field.
#
# ERRORS:
#   Handlers never swallow errors.  A failing read-resource becomes a
#   JSON-RPC error; a failing call-tool becomes an isError=true result.
#   Both conversions belong to the MCP SDK.
#
# RUNNING THIS SERVER:
#     a) python -m tools.mcp_server
#     b) alfresco-mcp-server            (console script, see pyproject.toml)
#     c) spawned over stdio by agent/alfresco_agent.py
# =============================================================================

import asyncio
import json
import logging
import os
import sys
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from core.alfresco_client import AlfrescoClient
from core.config import load_config
from core.errors import ConfigError, UnsupportedToolError
from core.models import NodeMetadata, SearchPage, node_id_from_uri
from tools.catalogue import TOOLS, ToolName

SERVER_NAME = "alfresco-rest-server"
SERVER_VERSION = "0.2.0"

logger = logging.getLogger(__name__)

# =============================================================================
# Logging Setup
# =============================================================================
# Everything goes to STDERR: STDOUT carries the MCP JSON-RPC stream and any
# stray byte there breaks the host's parser.
#
# ANSI colours, same convention as the rest of the project:
#   CYAN   → incoming requests (tool / resource + params)
#   YELLOW → intermediate status
#   GREEN  → response summaries
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr.  Level defaults to $ALFRESCO_LOG_LEVEL or INFO."""
    level = (level or os.environ.get("ALFRESCO_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(name: str, params: dict) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(name: str, summary: dict) -> None:
    logger.info(f"{_GREEN}  ← {name} response: {json.dumps(summary, separators=(',', ':'))}{_RESET}")


# =============================================================================
# READ RESOURCE: alfresco://<node-id>
# =============================================================================
# Folders are NOT listed.  A folder URI answers with a placeholder text blob
# "Folder: <id>" and the content endpoint is never called.
# =============================================================================
async def read_node_resource(client: AlfrescoClient, uri: str) -> list[ReadResourceContents]:
    """Read one node as an MCP resource.

    Returns a single ReadResourceContents holding raw bytes; the MCP SDK
    turns bytes into a base64 "blob" tagged with mime_type.
    """
    _log_request("read_resource", {"uri": uri})
    node_id = node_id_from_uri(uri)

    try:
        metadata = NodeMetadata.from_entry(await client.get_node_metadata(node_id))

        if metadata.is_folder:
            _log_status(f"{node_id} is a folder, returning placeholder")
            _log_response("read_resource", {"uri": uri, "mimeType": "text/plain"})
            return [ReadResourceContents(content=f"Folder: {node_id}".encode("utf-8"), mime_type="text/plain")]

        response = await client.download_node_content(node_id)
        data = response.content
    except Exception:
        logger.exception("Read Resource Error: %s", uri)
        raise

    _log_response("read_resource", {"uri": uri, "mimeType": metadata.content_mime_type, "bytes": len(data)})
    return [ReadResourceContents(content=data, mime_type=metadata.content_mime_type)]


# =============================================================================
# CALL TOOL
# =============================================================================
async def _read_content(client: AlfrescoClient, arguments: dict[str, Any]) -> list[types.TextContent]:
    # Decoded as text, not base64.  Binary content does not survive this path;
    # read-resource is the byte-exact one.
    node_id = node_id_from_uri(arguments["fileUri"])
    response = await client.download_node_content(node_id)
    text = response.text
    _log_response(ToolName.READ_CONTENT.value, {"nodeId": node_id, "chars": len(text)})
    return [types.TextContent(type="text", text=text)]


async def _search(client: AlfrescoClient, arguments: dict[str, Any]) -> list[types.TextContent]:
    max_items = arguments.get("maxItems")
    if max_items is not None:
        max_items = int(max_items)

    result = await client.search_nodes(arguments["query"], max_items=max_items)
    page = SearchPage.from_response(result)
    _log_status(f"Got {len(page.entries)} of {page.total_items} matching items")
    _log_response(ToolName.SEARCH.value, {"totalItems": page.total_items, "entries": len(page.entries)})
    return [types.TextContent(type="text", text=page.summary())]


async def call_alfresco_tool(
    client: AlfrescoClient,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Dispatch a call-tool request by tool name.

    Raises:
        UnsupportedToolError: name is not in the catalogue.  Raised before
            any HTTP call.
    """
    arguments = arguments or {}
    _log_request(name, arguments)

    try:
        tool = ToolName(name)
    except ValueError:
        raise UnsupportedToolError(name) from None

    if tool is ToolName.READ_CONTENT:
        return await _read_content(client, arguments)
    return await _search(client, arguments)


# =============================================================================
# Server wiring
# =============================================================================
def create_server(client: AlfrescoClient) -> Server:
    """Build the MCP server with list-tools, read-resource and call-tool."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list(TOOLS)

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        return await read_node_resource(client, str(uri))

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await call_alfresco_tool(client, name, arguments)

    return server


async def serve(client: AlfrescoClient) -> None:
    """Attach the server to stdio and run until the host closes the stream."""
    logger.info("Initializing Alfresco REST Server...")
    server = create_server(client)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server ready.")
        await server.run(read_stream, write_stream, server.create_initialization_options())


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
    except ConfigError as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)

    client = AlfrescoClient.from_config(config)

    try:
        asyncio.run(serve(client))
    except Exception:
        logger.exception("Server initialization failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
