"""
DocuSeal submission proxy routes.
"""
import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from docuseal_app.auth.dependencies import get_current_user_id, get_optional_user_id
from docuseal_app.config import get_settings
from docuseal_app.models.docuseal import CreateSubmissionRequest, DecodeError, decode_submission
from docuseal_app.routers.proxy import (
    decode_error_response,
    internal_error_response,
    read_json,
    relay,
    upstream_error_response,
    wrap_list,
)
from docuseal_app.services.docuseal import DocuSealAPIError, DocuSealClient

settings = get_settings()
router = APIRouter()
logger = logging.getLogger(__name__)

# Query parameters forwarded unchanged when present
_PASSTHROUGH_PARAMS = ("after", "before", "template_id", "q", "slug", "template_folder", "archived")


def map_status_filter(value: Optional[str]) -> Optional[str]:
    """
    Map the UI's status filter onto DocuSeal's.
    SENT is DocuSeal's "pending"; OPENED has no upstream filter; ALL means none.
    """
    if not value or value in ("ALL", "OPENED"):
        return None
    if value == "SENT":
        return "pending"
    return value


def build_submission_query(query: Dict[str, str]) -> Dict[str, str]:
    params = {"limit": query.get("limit") or "10"}
    for key in _PASSTHROUGH_PARAMS:
        if key in query:
            params[key] = query[key]

    mapped = map_status_filter(query.get("status"))
    if mapped:
        params["status"] = mapped
    return params


def validate_submission_body(body) -> Optional[JSONResponse]:
    """Return a 400 response for an unusable create-submission body, else None."""
    if not isinstance(body, dict) or not body.get("template_id"):
        logger.error("Missing template_id in request body")
        return JSONResponse(
            content={"message": "template_id is required", "received": body},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    submitters = body.get("submitters")
    if not submitters:
        logger.error("Missing or empty submitters array")
        return JSONResponse(
            content={"message": "At least one submitter is required", "received": body},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    for i, submitter in enumerate(submitters):
        if not isinstance(submitter, dict) or not submitter.get("email"):
            logger.error("Submitter %d missing email", i)
            return JSONResponse(
                content={"message": f"Submitter {i + 1} must have an email address"},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

    try:
        CreateSubmissionRequest.model_validate(body)
    except ValidationError as exc:
        return JSONResponse(
            content={"message": "Invalid submission request", "errors": exc.errors(include_url=False, include_context=False)},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return None


@router.get("")
async def list_submissions(
    request: Request,
    current_user_id: Optional[str] = Depends(get_optional_user_id)
):
    """List submissions with pagination, filters and search."""
    if current_user_id is None:
        logger.warning("[api/docuseal/submissions] no session - proceeding as anonymous")

    params = build_submission_query(dict(request.query_params))
    client = DocuSealClient()
    return relay(
        lambda: client.list_submissions(params),
        "fetching DocuSeal submissions",
        transform=wrap_list,
    )


@router.post("")
async def create_submission(
    request: Request,
    current_user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Create a submission (send a template for signing).
    Allowed with a session, or with an API key from the server or the
    incoming X-Auth-Token header.
    """
    api_key = settings.docuseal_api_key or request.headers.get("x-auth-token") or ""
    if current_user_id is None and not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - no session and no server API key configured"
        )

    client = DocuSealClient(api_key=api_key)
    content_type = request.headers.get("content-type", "")

    # File uploads are forwarded untouched, boundary included
    if content_type.startswith("multipart/form-data"):
        raw_body = await request.body()
        return relay(
            lambda: client.create_submission_multipart(raw_body, content_type),
            "creating DocuSeal submission",
            status_code=status.HTTP_201_CREATED,
        )

    body = await read_json(request)
    logger.debug("Received submission request: %s", body)

    invalid = validate_submission_body(body)
    if invalid is not None:
        return invalid

    return relay(
        lambda: client.create_submission(body),
        "creating DocuSeal submission",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{submission_id}")
async def get_submission(
    submission_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Get a submission by ID."""
    client = DocuSealClient()
    return relay(
        lambda: client.get_submission(submission_id),
        f"fetching DocuSeal submission {submission_id}",
    )


@router.put("/{submission_id}")
async def update_submission(
    submission_id: str,
    request: Request,
    current_user_id: str = Depends(get_current_user_id)
):
    """Update a submission."""
    body = await read_json(request)
    client = DocuSealClient()
    return relay(
        lambda: client.update_submission(submission_id, body),
        f"updating DocuSeal submission {submission_id}",
    )


@router.delete("/{submission_id}")
async def delete_submission(
    submission_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Delete (archive) a submission."""
    client = DocuSealClient()
    return relay(
        lambda: client.delete_submission(submission_id),
        f"deleting DocuSeal submission {submission_id}",
        transform=lambda _: {"message": "Submission deleted successfully"},
    )


@router.get("/{submission_id}/documents")
async def get_submission_documents(
    submission_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Get the signed documents of a submission."""
    client = DocuSealClient()
    return relay(
        lambda: client.get_submission_documents(submission_id),
        f"fetching submission documents {submission_id}",
    )


@router.get("/{submission_id}/signing_link")
async def get_signing_link(
    submission_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Embeddable signing URL of the submission's first submitter."""
    client = DocuSealClient()
    try:
        submission = decode_submission(client.get_submission(submission_id))
    except DocuSealAPIError as exc:
        return upstream_error_response(exc)
    except DecodeError as exc:
        return decode_error_response(exc)
    except Exception as exc:
        logger.exception("Error fetching signing link for submission %s", submission_id)
        return internal_error_response(exc)

    if not submission.submitters or not submission.submitters[0].embed_src:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Signing link not found for this submission."
        )

    return {"embed_src": submission.submitters[0].embed_src}
