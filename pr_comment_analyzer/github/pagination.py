"""Link header parsing for GitHub REST pagination."""

from typing import Optional


def parse_next_link(link_header: Optional[str]) -> Optional[str]:
    """Extract the ``rel="next"`` URL from a Link header.

    Format: ``<https://api.github.com/...?page=2>; rel="next", <...>; rel="last"``

    Segments that do not split into exactly a URL part and a relation part are
    skipped. The relation value may hold several space separated tokens; only
    the exact token ``next`` counts.

    Args:
    ----
        link_header: Raw Link header value

    Returns:
    -------
        Next page URL or None if there is no next page

    """
    if not link_header:
        return None

    for segment in link_header.split(","):
        parts = [part.strip() for part in segment.strip().split(";")]
        if len(parts) != 2:
            continue

        url_part, rel_part = parts
        if not (url_part.startswith("<") and url_part.endswith(">")):
            continue

        name, _, value = rel_part.partition("=")
        if name.strip().lower() != "rel" or not value:
            continue

        relations = value.strip().strip('"').split()
        if "next" in relations:
            url = url_part[1:-1].strip()
            if url:
                return url

    return None
