"""Text and URL normalization used for bookmark matching."""
import re
from typing import Optional
from urllib.parse import SplitResult, urlsplit


_NON_ALNUM = re.compile(r"[^a-z0-9]")
_WHITESPACE = re.compile(r"\s+")
_TRAILING_SLASHES = re.compile(r"/+$")
_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")

# Schemes that require a host
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def sanitize(text: str) -> str:
    """Reduce text to its lower-case ASCII letters and digits.

    Args:
        text: Text to sanitize

    Returns:
        Text with punctuation, whitespace and separators removed
    """
    return _NON_ALNUM.sub("", text.lower())


def _strip_www(hostname: str) -> str:
    if hostname.startswith("www."):
        return hostname[len("www."):]
    return hostname


def _parse_url(url: str) -> Optional[SplitResult]:
    """Parse an absolute URL, returning None when it isn't one.

    Args:
        url: Candidate URL string

    Returns:
        Split URL parts, or None if the string has no scheme, lacks a host
        for a web scheme, has whitespace in its host, or is otherwise malformed
    """
    candidate = url.strip()
    if not _URL_SCHEME.match(candidate):
        return None

    try:
        parts = urlsplit(candidate)
        # Accessing the port validates it
        parts.port
    except ValueError:
        return None

    if parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname:
        return None
    if _WHITESPACE.search(parts.netloc):
        return None

    return parts


def normalize_url_for_comparison(url: str) -> str:
    """Build a key for deciding whether two URLs point at the same bookmark.

    The key is the hostname without ``www.``, the path without trailing
    slashes and the raw query string. Protocol is ignored, so
    ``https://www.example.com/foo/`` and ``http://example.com/foo`` share a
    key, while ``?a=1`` and ``?a=2`` do not.

    Args:
        url: URL to normalize. Apply to both sides of a comparison.

    Returns:
        Comparison key. Unparseable input falls back to the input with all
        whitespace removed, lower-cased.
    """
    parts = _parse_url(url)
    if parts is None:
        return _WHITESPACE.sub("", url.strip()).lower()

    hostname = _strip_www((parts.hostname or "").lower())
    path = _TRAILING_SLASHES.sub("", parts.path)
    if path == "/":
        path = ""
    search = f"?{parts.query}" if parts.query else ""

    return f"{hostname}{path}{search}"


def extract_comparable_hostname(url: str) -> str:
    """Extract the hostname used for the looser "same site" check.

    Args:
        url: URL to inspect

    Returns:
        Lower-cased hostname without ``www.``, or the trimmed lower-cased
        input if it cannot be parsed as a URL
    """
    parts = _parse_url(url)
    if parts is None:
        return url.strip().lower()

    return _strip_www((parts.hostname or "").lower())
