"""HTTP routes exposed to the CMS."""

from nextjs_wordpress.routes.content import router as content_router
from nextjs_wordpress.routes.hooks import router as hooks_router
from nextjs_wordpress.routes.links import router as links_router
from nextjs_wordpress.routes.status import router as status_router

__all__ = ["content_router", "hooks_router", "links_router", "status_router"]
