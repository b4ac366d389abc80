"""Tests for the submitter proxy routes."""
from docuseal_app.routers.submitters import build_submitter_query
from conftest import make_response

BASE = "/api/docuseal/submitters"


def test_build_submitter_query_drops_empty_filters():
    params = build_submitter_query({"submission_id": "4", "q": "", "external_id": "ext-1", "other": "x"})
    assert params == {"limit": "10", "submission_id": "4", "external_id": "ext-1"}


def test_list_anonymous_wraps_array(client, upstream):
    upstream.return_value = make_response(200, [{"id": 1, "status": "sent"}])
    response = client.get(BASE, params={"limit": "3", "completed_after": "2024-01-01"})
    assert response.status_code == 200
    assert response.json() == {"data": [{"id": 1, "status": "sent"}]}
    assert upstream.call_args.kwargs["params"] == {"limit": "3", "completed_after": "2024-01-01"}


def test_get_requires_session(client, upstream):
    assert client.get(f"{BASE}/1").status_code == 401
    upstream.assert_not_called()


def test_get(client, auth_headers, upstream):
    upstream.return_value = make_response(200, {"id": 1, "status": "opened"})
    response = client.get(f"{BASE}/1", headers=auth_headers)
    assert response.json() == {"id": 1, "status": "opened"}
    assert upstream.call_args.args == ("GET", "https://docuseal.test/submitters/1")


def test_update(client, auth_headers, upstream):
    body = {"values": {"Name": "Jane"}, "completed": True}
    client.put(f"{BASE}/1", json=body, headers=auth_headers)
    assert upstream.call_args.args == ("PUT", "https://docuseal.test/submitters/1")
    assert upstream.call_args.kwargs["json"] == body


def test_error_relayed(client, auth_headers, upstream):
    upstream.return_value = make_response(401, text="Unauthorized")
    response = client.get(f"{BASE}/1", headers=auth_headers)
    assert response.status_code == 401
    assert response.json() == "Unauthorized"
