"""Tests for the field-overlay editor routes."""
import pytest
import requests

from conftest import make_response

BASE = "/api/editor/templates"
DOC_URL = "https://docuseal.test/file/nda.pdf"

TEMPLATE = {
    "id": 7,
    "name": "NDA",
    "created_at": "2024-05-01T10:00:00Z",
    "updated_at": "2024-05-01T10:00:00Z",
    "preferences": {"custom_fields": [{"id": "f1", "name": "Buyer", "x": 0.1, "y": 0.1}]},
    "documents": [{"id": 1, "url": DOC_URL}],
}


def pdf_response():
    fitz = pytest.importorskip("fitz")
    doc = fitz.open()
    doc.new_page(width=200, height=300)
    response = make_response(200, text="")
    response._content = doc.tobytes()
    doc.close()
    return response


class TestEditorState:

    def test_requires_session(self, client, upstream):
        assert client.get(f"{BASE}/7").status_code == 401

    def test_falls_back_to_embed_when_download_fails(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.return_value = make_response(403, {"error": "expired"})
        response = client.get(f"{BASE}/7", headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["template_id"] == 7
        assert body["fields"][0]["id"] == "f1"
        assert body["fields"][0]["w"] == 0.2
        assert (body["renderer"], body["interactive"], body["page_count"]) == ("embed", False, None)

    def test_falls_back_to_embed_when_download_unreachable(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.side_effect = requests.ConnectionError("network down")
        response = client.get(f"{BASE}/7", headers=auth_headers)
        assert response.status_code == 200
        assert (response.json()["renderer"], response.json()["interactive"]) == ("embed", False)

    def test_rich_renderer(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.return_value = pdf_response()
        body = client.get(f"{BASE}/7", headers=auth_headers).json()
        assert (body["renderer"], body["interactive"], body["page_count"]) == ("pymupdf", True, 1)

    def test_template_without_documents(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, {**TEMPLATE, "documents": []})
        body = client.get(f"{BASE}/7", headers=auth_headers).json()
        assert body["renderer"] is None
        upstream_get.assert_not_called()

    def test_malformed_template(self, client, auth_headers, upstream):
        upstream.return_value = make_response(200, {"id": 7})
        assert client.get(f"{BASE}/7", headers=auth_headers).status_code == 502

    def test_upstream_error(self, client, auth_headers, upstream):
        upstream.return_value = make_response(404, {"error": "Not Found"})
        response = client.get(f"{BASE}/7", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestSaveFields:

    def test_save(self, client, auth_headers, upstream):
        fields = [{"id": "f1", "name": "Buyer", "type": "signature", "page": 2, "x": 0.5, "y": 0.5, "w": 0.1, "h": 0.1}]
        response = client.put(f"{BASE}/7/fields", json={"fields": fields}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"fields": fields}
        assert upstream.call_args.args == ("PUT", "https://docuseal.test/templates/7")
        assert upstream.call_args.kwargs["json"] == {"preferences": {"custom_fields": fields}}

    def test_invalid_field(self, client, auth_headers, upstream):
        response = client.put(f"{BASE}/7/fields", json={"fields": [{"name": "no id"}]}, headers=auth_headers)
        assert response.status_code == 422
        upstream.assert_not_called()


class TestRenderPage:

    def test_embed_fallback(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.return_value = make_response(500, text="error")
        response = client.get(f"{BASE}/7/pages/1", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"url": DOC_URL, "page": 1, "interactive": False}

    def test_embed_fallback_on_download_timeout(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.side_effect = requests.Timeout("read timed out")
        response = client.get(f"{BASE}/7/pages/1", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"url": DOC_URL, "page": 1, "interactive": False}

    def test_png(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.return_value = pdf_response()
        response = client.get(f"{BASE}/7/pages/1", params={"zoom": 2}, headers=auth_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")
        assert response.headers["x-page-width"] == "400"
        assert response.headers["x-page-height"] == "600"

    def test_page_out_of_range(self, client, auth_headers, upstream, upstream_get):
        upstream.return_value = make_response(200, TEMPLATE)
        upstream_get.return_value = make_response(500, text="error")
        assert client.get(f"{BASE}/7/pages/0", headers=auth_headers).status_code == 404

    def test_no_documents(self, client, auth_headers, upstream):
        upstream.return_value = make_response(200, {**TEMPLATE, "documents": []})
        response = client.get(f"{BASE}/7/pages/1", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"detail": "Template has no documents"}

    def test_invalid_zoom(self, client, auth_headers, upstream):
        assert client.get(f"{BASE}/7/pages/1", params={"zoom": 0}, headers=auth_headers).status_code == 422
