"""
Shared fixtures.

Environment is set before the app is imported so the cached settings pick
it up.
"""
import json
import os
from unittest.mock import AsyncMock, patch

os.environ["DOCUSEAL_API_KEY"] = "test-api-key"
os.environ["DOCUSEAL_URL"] = "https://docuseal.test"
os.environ["DOCUSEAL_USER_EMAIL"] = "builder@example.com"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"

import pytest
import requests
from fastapi.testclient import TestClient

from docuseal_app.auth.utils import create_access_token
from docuseal_app.main import app


def make_response(status_code: int = 200, body=None, text: str = None) -> requests.Response:
    """Build a real requests.Response with a JSON or text body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://docuseal.test"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
    else:
        response._content = (text or "").encode("utf-8")
        response.encoding = "utf-8"
    return response


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def token():
    return create_access_token({"sub": "user-1", "email": "user@example.com"})


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def upstream():
    """Patch the HTTP layer of the DocuSeal client."""
    with patch("docuseal_app.services.docuseal.requests.request") as mock_request:
        mock_request.return_value = make_response(200, {})
        yield mock_request


@pytest.fixture
def upstream_get():
    """Patch plain GETs used for document downloads."""
    with patch("docuseal_app.services.docuseal.requests.get") as mock_get:
        yield mock_get


@pytest.fixture
def firestore():
    """FirestoreService replacement shared by the auth modules."""
    service = AsyncMock()
    with patch("docuseal_app.auth.routes.FirestoreService", return_value=service), \
            patch("docuseal_app.auth.dependencies.FirestoreService", return_value=service):
        yield service
