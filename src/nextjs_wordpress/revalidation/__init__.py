"""On-demand revalidation of the Next.js frontend."""

from nextjs_wordpress.revalidation.listener import TransitionListener, should_revalidate
from nextjs_wordpress.revalidation.notifier import RevalidationNotifier, build_request
from nextjs_wordpress.revalidation.slugs import DEFAULT_ROUTE_PREFIXES, SlugResolver

__all__ = [
    "DEFAULT_ROUTE_PREFIXES",
    "RevalidationNotifier",
    "SlugResolver",
    "TransitionListener",
    "build_request",
    "should_revalidate",
]
