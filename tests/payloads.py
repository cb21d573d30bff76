"""Canned Alfresco REST payloads and constants shared by the tests."""

HOST = "http://alfresco.test"
USERNAME = "admin"
PASSWORD = "secret"

NODES_PATH = "/alfresco/api/-default-/public/alfresco/versions/1/nodes"
SEARCH_PATH = "/alfresco/api/-default-/public/search/versions/1/search"


def file_entry(node_id: str, name: str, mime_type: str | None = "text/plain") -> dict:
    """A node entry as returned by GET /nodes/{id} and inside search results."""
    entry = {"id": node_id, "name": name, "isFolder": False, "isFile": True}
    if mime_type is not None:
        entry["content"] = {"mimeType": mime_type, "sizeInBytes": 42}
    return {"entry": entry}


def folder_entry(node_id: str, name: str) -> dict:
    return {"entry": {"id": node_id, "name": name, "isFolder": True, "isFile": False}}


def search_response(entries: list[dict], total_items: int) -> dict:
    return {
        "list": {
            "pagination": {
                "count": len(entries),
                "hasMoreItems": total_items > len(entries),
                "totalItems": total_items,
                "skipCount": 0,
                "maxItems": 10,
            },
            "entries": entries,
        }
    }
