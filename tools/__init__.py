# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP layer of the Alfresco server.
#
# ARCHITECTURAL ROLE:
#   tools/ translates between the MCP protocol and core/:
#     1. catalogue.py declares the tool descriptors the host sees
#     2. mcp_server.py routes list-tools / read-resource / call-tool to the
#        Alfresco client and shapes the replies into MCP content blocks
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP (that's core/alfresco_client.py)
#   - They do NOT read configuration beyond the bootstrap in main()
#   - They do NOT know about Google ADK (that's agent/)
# =============================================================================
