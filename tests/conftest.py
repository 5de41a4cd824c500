"""Shared fixtures for tests."""
import json
import pytest


SAMPLE_BOOKMARKS = {
    "checksum": "test",
    "roots": {
        "bookmark_bar": {
            "children": [
                {
                    "id": "1",
                    "name": "Python Docs",
                    "type": "url",
                    "url": "https://docs.python.org"
                },
                {
                    "id": "2",
                    "name": "Work",
                    "type": "folder",
                    "children": [
                        {
                            "id": "3",
                            "name": "Jira Board",
                            "type": "url",
                            "url": "https://jira.example.com/board"
                        },
                        {
                            "id": "4",
                            "name": "Confluence",
                            "type": "url",
                            "url": "https://confluence.example.com"
                        }
                    ]
                },
                {
                    "id": "5",
                    "name": "Tutorials",
                    "type": "folder",
                    "children": [
                        {
                            "id": "6",
                            "name": "SQLite Guide",
                            "type": "url",
                            "url": "https://sqlite.org/guide"
                        }
                    ]
                }
            ],
            "id": "0",
            "name": "Bookmarks Bar",
            "type": "folder"
        },
        "other": {
            "children": [
                {
                    "id": "7",
                    "name": "Stack Overflow",
                    "type": "url",
                    "url": "https://www.stackoverflow.com"
                }
            ],
            "id": "100",
            "name": "Other Bookmarks",
            "type": "folder"
        },
        "synced": {
            "children": [],
            "id": "200",
            "name": "Mobile Bookmarks",
            "type": "folder"
        }
    },
    "version": 1
}


@pytest.fixture
def sample_bookmarks_path(tmp_path):
    """Create a temporary bookmarks file with sample data."""
    bookmarks_file = tmp_path / "Bookmarks"
    bookmarks_file.write_text(json.dumps(SAMPLE_BOOKMARKS, indent=3))
    return bookmarks_file


@pytest.fixture
def sample_bookmarks():
    """Return sample bookmarks as a list (as read_chrome_bookmarks returns)."""
    return [
        {"id": "1", "title": "Python Docs", "url": "https://docs.python.org", "domain": "docs.python.org", "description": None, "folder": "bookmark_bar"},
        {"id": "3", "title": "Jira Board", "url": "https://jira.example.com/board", "domain": "jira.example.com", "description": None, "folder": "bookmark_bar/Work"},
        {"id": "4", "title": "Confluence", "url": "https://confluence.example.com", "domain": "confluence.example.com", "description": None, "folder": "bookmark_bar/Work"},
        {"id": "6", "title": "SQLite Guide", "url": "https://sqlite.org/guide", "domain": "sqlite.org", "description": None, "folder": "bookmark_bar/Tutorials"},
        {"id": "7", "title": "Stack Overflow", "url": "https://www.stackoverflow.com", "domain": "stackoverflow.com", "description": None, "folder": "other"},
    ]


@pytest.fixture
def hn_and_github():
    """Two bookmarks with nothing in common."""
    return [
        {"id": 1, "title": "Hacker News", "url": "https://news.ycombinator.com", "domain": "news.ycombinator.com"},
        {"id": 2, "title": "GitHub", "url": "https://github.com", "domain": "github.com"},
    ]
