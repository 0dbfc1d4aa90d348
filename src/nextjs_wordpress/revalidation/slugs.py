"""Map WordPress post types onto Next.js frontend routes."""

from __future__ import annotations

from collections.abc import Mapping

# Adjust to match the frontend's routing scheme.
DEFAULT_ROUTE_PREFIXES: Mapping[str, str] = {
    "post": "/blog/",
    "book": "/books/",
}


class SlugResolver:
    """Resolve a post type and slug to the frontend path Next.js revalidates.

    Post types without a configured prefix resolve to the bare slug.
    """

    def __init__(self, prefixes: Mapping[str, str] | None = None) -> None:
        self._prefixes = dict(DEFAULT_ROUTE_PREFIXES)
        if prefixes:
            self._prefixes.update(prefixes)

    @property
    def prefixes(self) -> Mapping[str, str]:
        return dict(self._prefixes)

    def resolve(self, post_type: str, post_name: str) -> str:
        """Return the frontend path for a post."""
        return f"{self._prefixes.get(post_type, '')}{post_name}"
