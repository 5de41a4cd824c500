"""Search engine module for bookmarks."""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from bookmark_search.normalize import sanitize
from bookmark_search.scoring import compute_bookmark_score


# Minimum score for a bookmark to show up in search results
FUZZY_THRESHOLD = 0.45

# Minimum score for a top match to count as "the same bookmark"
STRONG_MATCH_THRESHOLD = 0.8


@dataclass(frozen=True)
class BookmarkMatch:
    """A bookmark paired with how well it matched a query."""
    bookmark: Mapping[str, Any]
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"bookmark": dict(self.bookmark), "score": self.score}


def rank_bookmarks(
    bookmarks: Sequence[Mapping[str, Any]],
    query: str,
    threshold: float = FUZZY_THRESHOLD,
) -> List[BookmarkMatch]:
    """Rank bookmarks against a free-text query.

    Args:
        bookmarks: Bookmarks with 'title', 'url', and optionally 'domain'
            and 'description'
        query: Search query string
        threshold: Minimum score a bookmark needs to be included

    Returns:
        Matches sorted by score (highest first); equal scores keep input
        order. An empty or whitespace-only query returns every bookmark
        with score 1, in input order, without threshold filtering.
    """
    normalized_query = query.strip().lower()
    if not normalized_query:
        return [BookmarkMatch(bookmark, 1.0) for bookmark in bookmarks]

    sanitized_query = sanitize(normalized_query)

    scored = []
    for index, bookmark in enumerate(bookmarks):
        score = compute_bookmark_score(bookmark, normalized_query, sanitized_query)
        if score >= threshold:
            scored.append((score, index, bookmark))

    scored.sort(key=lambda entry: (-entry[0], entry[1]))

    return [BookmarkMatch(bookmark, score) for score, _, bookmark in scored]



class SearchEngine(Protocol):
    """Protocol for search engines to allow extensibility."""

    def rank(
        self,
        query: str,
        bookmarks: List[Dict[str, Any]],
        threshold: Optional[float] = None,
    ) -> List[BookmarkMatch]:
        """Score and order bookmarks against a query.

        Args:
            query: Search query string
            bookmarks: List of bookmarks to rank
            threshold: Minimum score, or None for the engine's default

        Returns:
            Matches with scores, best first
        """
        ...

    def search(self, query: str, bookmarks: List[Dict[str, Any]], limit: int = 10) -> List[Dict[str, Any]]:
        """Search bookmarks based on query.

        Args:
            query: Search query string
            bookmarks: List of bookmarks to search
            limit: Maximum number of results to return

        Returns:
            List of matching bookmarks, sorted by relevance
        """
        ...


class FuzzySearchEngine:
    """Search engine backed by fuzzy bookmark ranking."""

    def __init__(self, threshold: float = FUZZY_THRESHOLD):
        self.threshold = threshold

    def rank(
        self,
        query: str,
        bookmarks: List[Dict[str, Any]],
        threshold: Optional[float] = None,
    ) -> List[BookmarkMatch]:
        """Rank bookmarks with fuzzy matching (empty query keeps input order)."""
        if threshold is None:
            threshold = self.threshold
        return rank_bookmarks(bookmarks, query, threshold=threshold)

    def search(self, query: str, bookmarks: List[Dict[str, Any]], limit: int = 10) -> List[Dict[str, Any]]:
        """Search bookmarks using fuzzy matching.

        Args:
            query: Search query string
            bookmarks: List of bookmarks to search
            limit: Maximum number of results to return

        Returns:
            List of matching bookmarks, sorted by relevance (highest score first)
        """
        if not query.strip() or not bookmarks or limit <= 0:
            return []

        matches = self.rank(query, bookmarks)

        return [match.bookmark for match in matches[:limit]]
