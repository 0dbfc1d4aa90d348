"""Tests for preview and permalink rewriting."""

import pytest

from nextjs_wordpress.config import FrontendConfig
from nextjs_wordpress.content.preview import headless_home_url, preview_link, rest_preview_link
from nextjs_wordpress.models.post import Post

SITE = "https://cms.example.com"


@pytest.fixture
def frontend():
    return FrontendConfig(
        url="https://www.example.com/",
        revalidation_secret="",
        preview_secret="preview-secret",
        route_prefixes={},
    )


@pytest.fixture
def no_frontend():
    return FrontendConfig(url="", revalidation_secret="", preview_secret="", route_prefixes={})


class TestPreviewLink:
    """Test preview button rewriting."""

    def test_points_at_frontend_preview_route(self, frontend) -> None:
        link = preview_link(f"{SITE}/?p=42&preview=true", 42, frontend)
        assert link == "https://www.example.com/preview/42?secret=preview-secret"

    def test_keeps_original_without_secret(self) -> None:
        config = FrontendConfig(url="https://www.example.com", revalidation_secret="", preview_secret="", route_prefixes={})
        assert preview_link("original", 42, config) == "original"

    def test_keeps_original_without_frontend(self, no_frontend) -> None:
        assert preview_link("original", 42, no_frontend) == "original"


class TestHomeUrl:
    """Test admin home URL rewriting."""

    def test_rewrites_in_admin(self, frontend) -> None:
        url = headless_home_url(f"{SITE}/about", "/about", is_admin=True, is_block_editor=False, frontend=frontend)
        assert url == "https://www.example.com/about"

    def test_empty_path_returns_base(self, frontend) -> None:
        url = headless_home_url(SITE, "", is_admin=True, is_block_editor=False, frontend=frontend)
        assert url == "https://www.example.com"

    @pytest.mark.parametrize(
        ("scheme", "is_admin", "is_block_editor"),
        [("rest", True, False), (None, False, False), (None, True, True)],
    )
    def test_keeps_cms_url(self, frontend, scheme, is_admin, is_block_editor) -> None:
        url = headless_home_url(
            f"{SITE}/about", "/about", scheme, is_admin=is_admin, is_block_editor=is_block_editor, frontend=frontend
        )
        assert url == f"{SITE}/about"

    def test_keeps_cms_url_without_frontend(self, no_frontend) -> None:
        url = headless_home_url(f"{SITE}/about", "/about", is_admin=True, is_block_editor=False, frontend=no_frontend)
        assert url == f"{SITE}/about"


class TestRestPreviewLink:
    """Test REST payload link rewriting."""

    def test_draft_gets_preview_link(self, frontend) -> None:
        post = Post(id=5, post_status="draft")
        payload = rest_preview_link({"link": f"{SITE}/?p=5"}, post, SITE, frontend)
        assert payload["link"] == "https://www.example.com/preview/5?secret=preview-secret"

    def test_published_permalink_points_at_frontend(self, frontend) -> None:
        post = Post(id=5, post_status="publish", permalink=f"{SITE}/blog/hello/")
        payload = rest_preview_link({"link": f"{SITE}/?p=5"}, post, SITE, frontend)
        assert payload["link"] == "https://www.example.com/blog/hello/"

    def test_published_falls_back_to_payload_link(self, frontend) -> None:
        post = Post(id=5, post_status="publish")
        payload = rest_preview_link({"link": f"{SITE}/hello/"}, post, SITE, frontend)
        assert payload["link"] == "https://www.example.com/hello/"

    def test_foreign_permalink_untouched(self, frontend) -> None:
        post = Post(id=5, post_status="publish", permalink="https://other.org/hello/")
        payload = rest_preview_link({"link": "https://other.org/hello/"}, post, SITE, frontend)
        assert payload["link"] == "https://other.org/hello/"

    def test_other_statuses_untouched(self, frontend) -> None:
        post = Post(id=5, post_status="pending", permalink=f"{SITE}/hello/")
        payload = rest_preview_link({"link": f"{SITE}/?p=5"}, post, SITE, frontend)
        assert payload["link"] == f"{SITE}/?p=5"

    def test_draft_without_preview_secret_uses_cms_preview_link(self, no_frontend) -> None:
        post = Post(id=5, post_status="draft", preview_link=f"{SITE}/?p=5&preview=true&preview_nonce=abc")
        payload = rest_preview_link({"link": f"{SITE}/hello/"}, post, SITE, no_frontend)
        assert payload["link"] == f"{SITE}/?p=5&preview=true&preview_nonce=abc"

    def test_draft_without_preview_secret_builds_cms_preview_url(self, no_frontend) -> None:
        post = Post(id=5, post_status="draft")
        payload = rest_preview_link({"link": f"{SITE}/hello/"}, post, f"{SITE}/", no_frontend)
        assert payload["link"] == f"{SITE}/?p=5&preview=true"

    def test_draft_without_site_keeps_payload_link(self, no_frontend) -> None:
        post = Post(post_status="draft")
        payload = rest_preview_link({"link": f"{SITE}/hello/"}, post, None, no_frontend)
        assert payload["link"] == f"{SITE}/hello/"
