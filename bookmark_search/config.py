"""Configuration for the bookmark search MCP server."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bookmark_search.search import FUZZY_THRESHOLD, STRONG_MATCH_THRESHOLD


@dataclass
class SearchConfig:
    """Configuration for bookmark ranking and duplicate detection."""
    threshold: float = FUZZY_THRESHOLD  # Minimum score to appear in results
    strong_match_threshold: float = STRONG_MATCH_THRESHOLD  # Minimum score for a fuzzy duplicate
    result_limit: int = 10

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Create config from environment variables."""
        return cls(
            threshold=float(os.environ.get("BOOKMARKS_FUZZY_THRESHOLD", str(FUZZY_THRESHOLD))),
            strong_match_threshold=float(
                os.environ.get("BOOKMARKS_STRONG_MATCH_THRESHOLD", str(STRONG_MATCH_THRESHOLD))
            ),
            result_limit=int(os.environ.get("BOOKMARKS_RESULT_LIMIT", "10")),
        )


@dataclass
class Config:
    """Main configuration for the bookmark search MCP server."""
    search: SearchConfig = field(default_factory=SearchConfig.from_env)
    bookmarks_path: Optional[Path] = None  # None = Chrome profile location
    chrome_profile: str = "Default"  # Chrome profile name

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        path_str = os.environ.get("BOOKMARKS_FILE")
        bookmarks_path = Path(path_str) if path_str else None

        return cls(
            search=SearchConfig.from_env(),
            bookmarks_path=bookmarks_path,
            chrome_profile=os.environ.get("BOOKMARKS_CHROME_PROFILE", "Default"),
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config
