"""Tests for the link rewriting routes."""


def test_preview_link(client):
    response = client.post("/links/preview", json={"link": "https://cms.example.com/?p=3", "post_id": 3})
    assert response.json() == {"link": "https://www.example.com/preview/3?secret=preview-secret"}


def test_home_url_outside_admin_unchanged(client):
    response = client.post("/links/home", json={"url": "https://cms.example.com/about", "path": "/about"})
    assert response.json() == {"url": "https://cms.example.com/about"}


def test_home_url_in_admin(client):
    response = client.post(
        "/links/home",
        json={"url": "https://cms.example.com/about", "path": "/about", "is_admin": True},
    )
    assert response.json() == {"url": "https://www.example.com/about"}


def test_rest_link_for_published_post(client):
    response = client.post(
        "/links/rest",
        json={
            "payload": {"id": 3, "link": "https://cms.example.com/blog/hello/"},
            "post": {"id": 3, "post_status": "publish"},
        },
    )
    assert response.json() == {"id": 3, "link": "https://www.example.com/blog/hello/"}
