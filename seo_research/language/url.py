"""URL and slug helpers"""

import re
from urllib.parse import unquote, urlparse

_SLUG_SEPARATORS_RE = re.compile(r"[-_]")


def parse_slug(slug: str) -> str:
    """
    Turn a slug into whitespace-separated words.

    Every dash and underscore becomes one space, everything else is kept.

    Examples:
        >>> parse_slug("pop-art_project")
        'pop art project'
        >>> parse_slug("")
        ''
    """
    if not slug:
        return ""
    return _SLUG_SEPARATORS_RE.sub(" ", slug)


def slug_from_url(url: str) -> str:
    """
    Extract the slug (last non-empty path segment) from a URL.

    Examples:
        >>> slug_from_url("https://example.com/blog/pop-art-exhibit/?ref=home")
        'pop-art-exhibit'
        >>> slug_from_url("https://example.com/")
        ''
    """
    if not url:
        return ""
    path = urlparse(url).path
    segments = [s for s in path.split("/") if s]
    return unquote(segments[-1]) if segments else ""
