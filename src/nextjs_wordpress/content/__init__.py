"""Content transforms for the headless frontend."""

from nextjs_wordpress.content.blocks import BLOCKS_FIELD, attach_blocks, get_blocks
from nextjs_wordpress.content.links import replace_site_url, rewrite_links
from nextjs_wordpress.content.preview import headless_home_url, preview_link, rest_preview_link

__all__ = [
    "BLOCKS_FIELD",
    "attach_blocks",
    "get_blocks",
    "headless_home_url",
    "preview_link",
    "replace_site_url",
    "rest_preview_link",
    "rewrite_links",
]
