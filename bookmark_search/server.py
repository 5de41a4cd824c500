"""MCP server for fuzzy bookmark search and duplicate detection."""
import json
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from bookmark_search.bookmarks_reader import read_chrome_bookmarks
from bookmark_search.config import get_config
from bookmark_search.duplicates import find_existing_bookmark
from bookmark_search.search import FuzzySearchEngine, SearchEngine


SERVER_NAME = "bookmark-search"

# Global state
_bookmarks_cache: Optional[list] = None
_search_engine: SearchEngine = FuzzySearchEngine()


def load_bookmarks() -> list:
    """Load bookmarks, using cache if available.

    Returns:
        List of bookmarks (empty if the bookmarks file can't be read)
    """
    global _bookmarks_cache

    if _bookmarks_cache is None:
        config = get_config()
        try:
            _bookmarks_cache = read_chrome_bookmarks(config.bookmarks_path, profile=config.chrome_profile)
        except FileNotFoundError as e:
            print(f"Warning: Could not find bookmarks file: {e}", file=sys.stderr)
            _bookmarks_cache = []
        except (OSError, ValueError) as e:
            print(f"Error loading bookmarks: {e}", file=sys.stderr)
            _bookmarks_cache = []

    return _bookmarks_cache


def reset_bookmarks_cache() -> None:
    """Forget loaded bookmarks so the next call re-reads the file."""
    global _bookmarks_cache
    _bookmarks_cache = None


async def search_bookmarks_tool(
    query: str,
    threshold: Optional[float] = None,
    limit: Optional[int] = None,
) -> list[TextContent]:
    """Tool handler for search_bookmarks.

    Args:
        query: Search query string (empty lists bookmarks in file order)
        threshold: Minimum score (defaults to config)
        limit: Maximum number of results (defaults to config)

    Returns:
        List of TextContent with ranked matches as JSON
    """
    search_config = get_config().search
    if threshold is None:
        threshold = search_config.threshold
    if limit is None:
        limit = search_config.result_limit

    bookmarks = load_bookmarks()

    if not bookmarks:
        return [TextContent(
            type="text",
            text="No bookmarks available. Please ensure the bookmarks file exists."
        )]

    matches = _search_engine.rank(query, bookmarks, threshold=threshold)[:max(limit, 0)]

    if not matches:
        return [TextContent(
            type="text",
            text=f"No bookmarks found matching query: {query}"
        )]

    return [TextContent(
        type="text",
        text=json.dumps([match.to_dict() for match in matches], indent=2)
    )]


async def check_duplicate_tool(url: str, search: Optional[str] = None) -> list[TextContent]:
    """Tool handler for check_duplicate.

    Args:
        url: URL about to be bookmarked
        search: Current search text, enables the fuzzy check when it equals url

    Returns:
        List of TextContent with the duplicate verdict as JSON
    """
    bookmarks = load_bookmarks()
    strong_threshold = get_config().search.strong_match_threshold

    match = find_existing_bookmark(bookmarks, url, search=search, strong_threshold=strong_threshold)

    if match is None:
        result = {"duplicate": False, "reason": None, "score": None, "bookmark": None}
    else:
        result = match.to_dict()

    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="search_bookmarks",
                description="Fuzzy search bookmarks by title, domain, URL and description. Tolerates typos and abbreviations. Returns bookmarks with their match score, best first.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Search query. An empty query lists bookmarks."
                        },
                        "threshold": {
                            "type": "number",
                            "description": "Minimum match score between 0 and 1 (default 0.45)"
                        },
                        "limit": {
                            "type": "integer",
                            "description": "Maximum number of results (default 10)"
                        }
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="check_duplicate",
                description="Check whether a URL is already bookmarked, by exact URL, by site, or by a strong fuzzy match.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "url": {
                            "type": "string",
                            "description": "URL about to be bookmarked"
                        },
                        "search": {
                            "type": "string",
                            "description": "Current search text; fuzzy matching only applies when it equals the URL"
                        }
                    },
                    "required": ["url"]
                }
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        arguments = arguments or {}
        if name == "search_bookmarks":
            if "query" not in arguments:
                return [TextContent(
                    type="text",
                    text="Error: 'query' parameter is required"
                )]
            return await search_bookmarks_tool(
                arguments["query"],
                threshold=arguments.get("threshold"),
                limit=arguments.get("limit"),
            )
        elif name == "check_duplicate":
            url = arguments.get("url", "")
            if not url:
                return [TextContent(
                    type="text",
                    text="Error: 'url' parameter is required"
                )]
            return await check_duplicate_tool(url, search=arguments.get("search"))
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)
