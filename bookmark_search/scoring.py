"""Similarity scoring between a bookmark and a free-text query.

Each searchable field is compared against the query with, in order of
precedence:

  1. exact case-insensitive substring containment (forces a score of 1)
  2. substring containment after sanitizing both sides
  3. in-order character subsequence matching
  4. bounded Levenshtein distance (rapidfuzz) against a best-fit window of the field

Scores are floats in [0, 1]. Everything here is pure and deterministic.
"""
from typing import Any, List, Mapping, Optional

from rapidfuzz.distance import Levenshtein

from bookmark_search.normalize import sanitize


# Sanitized substring hits score between these two values
SUBSTRING_BASE_SCORE = 0.85
SUBSTRING_LENGTH_BONUS = 0.15

# Subsequence score shaping
SUBSEQUENCE_COMPLETENESS_WEIGHT = 0.75
SUBSEQUENCE_COHESION_WEIGHT = 0.25
SUBSEQUENCE_MAX_GAP_PENALTY = 0.6
SUBSEQUENCE_MAX_SCORE = 0.9

# Edit distance limits
EDIT_DISTANCE_MAX_PATTERN = 64
EDIT_DISTANCE_MAX_SCORE = 0.95
EXTRA_WINDOW_CANDIDATES = 6


def searchable_fields(bookmark: Mapping[str, Any]) -> List[str]:
    """Collect the fields of a bookmark that a query is matched against.

    Args:
        bookmark: Bookmark with 'title', 'url', and optionally 'domain' and
            'description'

    Returns:
        Field values in matching order: title, domain, url, description
    """
    fields = [
        bookmark.get("title") or "",
        bookmark.get("domain") or "",
        bookmark.get("url") or "",
    ]
    description = bookmark.get("description")
    if description:
        fields.append(description)
    return fields


def score_bookmark(bookmark: Mapping[str, Any], query: str) -> float:
    """Score how well a bookmark matches a query.

    Args:
        bookmark: Bookmark mapping
        query: Raw query string

    Returns:
        Score in [0, 1]. An empty query matches everything with 1.
    """
    normalized_query = query.strip().lower()
    if not normalized_query:
        return 1.0
    return compute_bookmark_score(bookmark, normalized_query, sanitize(normalized_query))


def compute_bookmark_score(
    bookmark: Mapping[str, Any],
    normalized_query: str,
    sanitized_query: str,
) -> float:
    """Score a bookmark against a query that was already normalized.

    Args:
        bookmark: Bookmark mapping
        normalized_query: Trimmed, lower-cased query (non-empty)
        sanitized_query: ``sanitize(normalized_query)``, possibly empty

    Returns:
        Score in [0, 1]
    """
    best_score = 0.0

    for field in searchable_fields(bookmark):
        if not field:
            continue

        normalized_field = field.lower()
        if normalized_query in normalized_field:
            return 1.0

        field_score = 0.0
        if sanitized_query:
            sanitized_field = sanitize(normalized_field)
            if not sanitized_field:
                continue

            if sanitized_query in sanitized_field:
                length_ratio = len(sanitized_query) / max(len(sanitized_field), len(sanitized_query))
                field_score = SUBSTRING_BASE_SCORE + min(
                    SUBSTRING_LENGTH_BONUS, length_ratio * SUBSTRING_LENGTH_BONUS
                )

            field_score = max(field_score, subsequence_score(sanitized_field, sanitized_query))
            field_score = max(field_score, edit_distance_score(sanitized_field, sanitized_query))
        else:
            # All-punctuation query: in-order match on the raw text only
            field_score = subsequence_score(normalized_field, normalized_query)

        best_score = max(best_score, field_score)

    return min(1.0, best_score)


def subsequence_score(text: str, pattern: str) -> float:
    """Score how well pattern appears in text as an in-order subsequence.

    Characters are matched greedily left to right. Completeness (share of
    pattern characters found) dominates; cohesion (how few text characters
    were skipped between matches) refines it.

    Args:
        text: Text to scan
        pattern: Characters to find in order

    Returns:
        Score in [0, 0.9]
    """
    if not pattern:
        return 1.0

    pattern_index = 0
    last_match_index = -1
    gap = 0
    for index, char in enumerate(text):
        if pattern_index >= len(pattern):
            break
        if char != pattern[pattern_index]:
            continue
        if last_match_index != -1:
            gap += index - last_match_index - 1
        last_match_index = index
        pattern_index += 1

    if pattern_index == 0:
        return 0.0

    completeness = pattern_index / len(pattern)
    gap_penalty = min(gap / max(len(text), 1), SUBSEQUENCE_MAX_GAP_PENALTY)
    cohesion = 1 - gap_penalty
    return min(
        SUBSEQUENCE_MAX_SCORE,
        completeness * SUBSEQUENCE_COMPLETENESS_WEIGHT + cohesion * SUBSEQUENCE_COHESION_WEIGHT,
    )


def max_distance_for(length: int) -> int:
    """Maximum edit distance tolerated for a pattern of the given length."""
    if length <= 2:
        return 0
    if length <= 4:
        return 1
    if length <= 8:
        return 2
    return 3


def edit_distance_score(text: str, pattern: str) -> float:
    """Score a near match of pattern anywhere in text.

    Args:
        text: Text to search in
        pattern: Pattern to approximate

    Returns:
        Score in [0, 0.95]; 0 when the pattern is empty, longer than 64
        characters, too short to tolerate typos, or too far from the text
    """
    if not pattern or len(pattern) > EDIT_DISTANCE_MAX_PATTERN:
        return 0.0

    max_distance = max_distance_for(len(pattern))
    if max_distance == 0:
        return 0.0

    distance = best_window_distance(text, pattern, max_distance)
    if distance is None or distance > max_distance:
        return 0.0

    base = 1 - distance / (len(pattern) + 1)
    return min(EDIT_DISTANCE_MAX_SCORE, base) if base > 0 else 0.0


def window_starts(text: str, pattern: str) -> List[int]:
    """Pick the window offsets in text worth comparing pattern against.

    Always includes the first and last possible offsets, then every offset
    where the pattern's first character occurs, then evenly spaced offsets,
    until ``len(pattern) + 6`` distinct offsets are collected.

    Args:
        text: Text to slice windows from
        pattern: Non-empty pattern

    Returns:
        Distinct offsets in ascending order
    """
    max_start = max(len(text) - len(pattern), 0)
    limit = len(pattern) + EXTRA_WINDOW_CANDIDATES
    starts: List[int] = []
    seen = set()

    def register(start: int) -> None:
        bounded = max(0, min(start, max_start))
        if bounded not in seen:
            seen.add(bounded)
            starts.append(bounded)

    register(0)
    register(max_start)

    first_char = pattern[0]
    index = 0
    while index <= max_start and index < len(text) and len(starts) < limit:
        if text[index] == first_char:
            register(index)
        index += 1

    step = max(1, len(pattern) // 2)
    index = step
    while index < max_start and len(starts) < limit:
        register(index)
        index += step

    return sorted(starts)


def best_window_distance(text: str, pattern: str, max_distance: int) -> Optional[int]:
    """Find the smallest bounded edit distance between pattern and a window of text.

    Args:
        text: Text to search in
        pattern: Pattern to approximate
        max_distance: Distances above this are not computed exactly

    Returns:
        Best distance found; any value above max_distance means "no match"
    """
    if not pattern:
        return 0
    if not text:
        return len(pattern)

    window = len(pattern) + max_distance
    best = max_distance + 1
    for start in window_starts(text, pattern):
        # Distances above the cutoff come back as max_distance + 1
        distance = Levenshtein.distance(text[start:start + window], pattern, score_cutoff=max_distance)
        if distance < best:
            best = distance
            if best == 0:
                break

    return best
