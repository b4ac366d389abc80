"""
DocuSeal REST API client.

Thin wrapper over `requests`: every call sends the server-held API key in the
X-Auth-Token header and raises DocuSealAPIError on a non-2xx response so
routes can relay the upstream body and status unchanged.
"""
import base64
import logging
from typing import Any, Dict, Optional

import requests

from docuseal_app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocuSealAPIError(Exception):
    """Upstream returned a non-2xx response."""

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"DocuSeal API error {status_code}: {payload}")


def is_docx(filename: str, content_type: Optional[str]) -> bool:
    """Whether an uploaded file should go to the DOCX import endpoint."""
    return content_type == DOCX_MIME_TYPE or filename.lower().endswith(".docx")


class DocuSealClient:
    """Client for the DocuSeal REST API."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.docuseal_api_key
        self.base_url = (base_url or settings.get_docuseal_base_url()).rstrip("/")
        self.timeout = settings.docuseal_timeout_seconds

    def _headers(self, content_type: Optional[str] = "application/json") -> Dict[str, str]:
        headers = {"X-Auth-Token": self.api_key or ""}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        data: Optional[bytes] = None,
        content_type: Optional[str] = "application/json",
    ) -> Any:
        url = f"{self.base_url}{path}"
        response = requests.request(
            method,
            url,
            params=params,
            json=json,
            data=data,
            headers=self._headers(content_type),
            timeout=self.timeout,
        )

        if not response.ok:
            logger.error("DocuSeal %s %s failed: %s", method, path, response.status_code)
            raise DocuSealAPIError(response.status_code, _parse_body(response))

        if not response.content:
            return None
        return response.json()

    # ==================== Templates ====================

    def list_templates(self, page: str = "1", per_page: str = "10") -> Any:
        return self._request("GET", "/templates", params={"page": page, "per_page": per_page})

    def get_template(self, template_id: str) -> Any:
        return self._request("GET", f"/templates/{template_id}")

    def create_template(self, body: Any) -> Any:
        return self._request("POST", "/templates", json=body)

    def update_template(self, template_id: str, body: Any) -> Any:
        return self._request("PUT", f"/templates/{template_id}", json=body)

    def delete_template(self, template_id: str) -> Any:
        return self._request("DELETE", f"/templates/{template_id}", content_type=None)

    def update_template_documents(self, template_id: str, body: Any) -> Any:
        return self._request("PUT", f"/templates/{template_id}/documents", json=body)

    def create_template_from_document(
        self,
        name: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> Any:
        """
        Create a template from a PDF or DOCX file.

        DocuSeal's /templates/pdf and /templates/docx endpoints take the file
        base64-encoded inside a JSON body.
        """
        path = "/templates/docx" if is_docx(filename, content_type) else "/templates/pdf"
        body = {
            "name": name,
            "documents": [
                {
                    "name": filename,
                    "file": base64.b64encode(content).decode("ascii"),
                }
            ],
        }
        return self._request("POST", path, json=body)

    # ==================== Submissions ====================

    def list_submissions(self, params: Dict[str, str]) -> Any:
        return self._request("GET", "/submissions", params=params)

    def get_submission(self, submission_id: str) -> Any:
        return self._request("GET", f"/submissions/{submission_id}")

    def create_submission(self, body: Any) -> Any:
        return self._request("POST", "/submissions", json=body)

    def create_submission_multipart(self, raw_body: bytes, content_type: str) -> Any:
        """Forward a multipart body as-is, keeping its boundary header."""
        return self._request("POST", "/submissions", data=raw_body, content_type=content_type)

    def update_submission(self, submission_id: str, body: Any) -> Any:
        return self._request("PUT", f"/submissions/{submission_id}", json=body)

    def delete_submission(self, submission_id: str) -> Any:
        return self._request("DELETE", f"/submissions/{submission_id}", content_type=None)

    def get_submission_documents(self, submission_id: str) -> Any:
        return self._request("GET", f"/submissions/{submission_id}/documents")

    # ==================== Submitters ====================

    def list_submitters(self, params: Dict[str, str]) -> Any:
        return self._request("GET", "/submitters", params=params)

    def get_submitter(self, submitter_id: str) -> Any:
        return self._request("GET", f"/submitters/{submitter_id}")

    def update_submitter(self, submitter_id: str, body: Any) -> Any:
        return self._request("PUT", f"/submitters/{submitter_id}", json=body)

    # ==================== Documents ====================

    def download(self, url: str) -> bytes:
        """Download raw document bytes (document URLs are pre-signed)."""
        response = requests.get(url, timeout=self.timeout)
        if not response.ok:
            raise DocuSealAPIError(response.status_code, _parse_body(response))
        return response.content


def _parse_body(response: requests.Response) -> Any:
    """Parsed JSON body, or the raw text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text
