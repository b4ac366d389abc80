"""Tests for the health and info endpoints."""


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "app": "DocuSeal App"}


def test_info(client):
    body = client.get("/api/info").json()
    assert body["version"] == "1.0.0"
    assert body["docuseal_url"] == "https://docuseal.test"
    assert body["available_page_renderers"] == ["pymupdf", "embed"]
