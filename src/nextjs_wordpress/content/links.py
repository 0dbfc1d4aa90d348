"""Rewrite links in post content so they point at the frontend."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup


def replace_site_url(url: str, site_url: str, frontend_url: str) -> str:
    """Case-insensitively swap every occurrence of the site URL."""
    return re.sub(re.escape(site_url), lambda _: frontend_url, url, flags=re.IGNORECASE)


def rewrite_links(html: str, site_url: str | None, frontend_url: str | None) -> str:
    """Point internal ``<a href>`` targets at the frontend.

    Links wrapping an image are left alone so media keeps resolving against
    the CMS.
    """
    if not html or not site_url or not frontend_url:
        return html

    soup = BeautifulSoup(html, "html.parser")
    changed = False
    for anchor in soup.find_all("a"):
        if anchor.find("img") is not None:
            continue
        href = anchor.get("href")
        if not href or site_url.lower() not in href.lower():
            continue
        anchor["href"] = replace_site_url(href, site_url, frontend_url)
        changed = True

    return str(soup) if changed else html
