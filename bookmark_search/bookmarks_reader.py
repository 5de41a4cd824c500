"""Chrome bookmarks reader module."""
import json
import os
import sys
from pathlib import Path
from typing import List, Dict, Any, Optional

from bookmark_search.normalize import extract_comparable_hostname


CHROME_ROOTS = ["bookmark_bar", "other", "synced"]


def get_chrome_bookmarks_path(profile: str = "Default") -> Path:
    """Get the path to Chrome bookmarks file.

    Args:
        profile: Chrome profile name (default: "Default")

    Returns:
        Path to the Bookmarks file
    """
    home = Path.home()
    if os.name == "nt":  # Windows
        chrome_path = home / "AppData" / "Local" / "Google" / "Chrome" / "User Data" / profile / "Bookmarks"
    elif sys.platform == "darwin":  # macOS
        chrome_path = home / "Library" / "Application Support" / "Google" / "Chrome" / profile / "Bookmarks"
    elif os.name == "posix":  # Linux
        chrome_path = home / ".config" / "google-chrome" / profile / "Bookmarks"
        # Also check for chromium
        if not chrome_path.exists():
            chrome_path = home / ".config" / "chromium" / profile / "Bookmarks"
    else:
        raise OSError(f"Unsupported operating system: {os.name}")

    return chrome_path


def load_bookmarks_file(bookmarks_path: Path) -> Dict[str, Any]:
    """Load a Chrome bookmarks JSON file.

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if not bookmarks_path.exists():
        raise FileNotFoundError(f"Bookmarks file not found at {bookmarks_path}")

    with open(bookmarks_path, "r", encoding="utf-8") as f:
        return json.load(f)


def to_bookmark(node: Dict[str, Any], folder: str) -> Dict[str, Any]:
    """Convert a Chrome 'url' node into a searchable bookmark record."""
    url = node.get("url", "")
    return {
        "id": node.get("id", ""),
        "title": node.get("name", ""),
        "url": url,
        "domain": extract_comparable_hostname(url) if url else "",
        "description": None,
        "folder": folder,
    }


def extract_bookmarks(node: Dict[str, Any], bookmarks: List[Dict[str, Any]], path: str = "") -> None:
    """Recursively extract bookmarks from Chrome bookmarks structure.

    Args:
        node: Current node in the bookmarks tree
        bookmarks: List to accumulate bookmarks
        path: Current folder path
    """
    if node.get("type") == "url":
        bookmarks.append(to_bookmark(node, path))
    elif node.get("type") == "folder":
        folder_name = node.get("name", "")
        new_path = f"{path}/{folder_name}" if path else folder_name
        for child in node.get("children", []):
            extract_bookmarks(child, bookmarks, new_path)


def read_chrome_bookmarks(bookmarks_path: Optional[Path] = None, profile: str = "Default") -> List[Dict[str, Any]]:
    """Read all bookmarks from a Chrome bookmarks file.

    Args:
        bookmarks_path: Optional path to bookmarks file. If None, uses the
            Chrome location for the given profile.
        profile: Chrome profile name used when no path is given

    Returns:
        List of bookmarks in file order, each with 'id', 'title', 'url',
        'domain', 'description' and 'folder' keys. Folder paths use the
        root key as prefix (e.g., 'bookmark_bar/Subfolder').

    Raises:
        FileNotFoundError: If bookmarks file doesn't exist
        json.JSONDecodeError: If bookmarks file is malformed
    """
    if bookmarks_path is None:
        bookmarks_path = get_chrome_bookmarks_path(profile)

    bookmarks_data = load_bookmarks_file(bookmarks_path)

    all_bookmarks: List[Dict[str, Any]] = []
    roots = bookmarks_data.get("roots", {})

    for root_name in CHROME_ROOTS:
        if root_name in roots:
            # Use the root key rather than its display name as the path prefix
            for child in roots[root_name].get("children", []):
                extract_bookmarks(child, all_bookmarks, root_name)

    return all_bookmarks
