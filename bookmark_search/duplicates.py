"""Detection of already-bookmarked URLs.

Before a submitted URL becomes a new bookmark, the collection is checked
for something the user most likely already has:

  1. exact: same normalized URL (ignoring protocol, www. and trailing slash)
  2. hostname: same site, regardless of path or query
  3. fuzzy: the text being submitted is also the active search, and its top
     ranked match clears the strong match threshold
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from bookmark_search.normalize import extract_comparable_hostname, normalize_url_for_comparison
from bookmark_search.search import STRONG_MATCH_THRESHOLD, rank_bookmarks


@dataclass(frozen=True)
class DuplicateMatch:
    """An existing bookmark that a submitted URL duplicates."""
    bookmark: Mapping[str, Any]
    reason: str  # 'exact', 'hostname' or 'fuzzy'
    score: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "duplicate": True,
            "reason": self.reason,
            "score": self.score,
            "bookmark": dict(self.bookmark),
        }


def find_existing_bookmark(
    bookmarks: Sequence[Mapping[str, Any]],
    url: str,
    search: Optional[str] = None,
    strong_threshold: float = STRONG_MATCH_THRESHOLD,
) -> Optional[DuplicateMatch]:
    """Find the bookmark a submitted URL most likely duplicates.

    Args:
        bookmarks: Existing bookmarks
        url: URL being submitted
        search: Current search text, if any. The fuzzy check only applies
            when it is the same text as the submitted URL.
        strong_threshold: Minimum top score for a fuzzy duplicate

    Returns:
        The duplicate match, or None if the URL looks new
    """
    normalized_url = normalize_url_for_comparison(url)
    for bookmark in bookmarks:
        if normalize_url_for_comparison(bookmark.get("url") or "") == normalized_url:
            return DuplicateMatch(bookmark, "exact")

    hostname = extract_comparable_hostname(url)
    for bookmark in bookmarks:
        if extract_comparable_hostname(bookmark.get("url") or "") == hostname:
            return DuplicateMatch(bookmark, "hostname")

    if not search or not search.strip() or search.strip() != url.strip():
        return None

    matches = rank_bookmarks(bookmarks, search)
    if matches and matches[0].score >= strong_threshold:
        return DuplicateMatch(matches[0].bookmark, "fuzzy", matches[0].score)

    return None
