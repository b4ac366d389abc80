"""
DocuSeal submitter proxy routes.
"""
import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Request

from docuseal_app.auth.dependencies import get_current_user_id, get_optional_user_id
from docuseal_app.routers.proxy import read_json, relay, wrap_list
from docuseal_app.services.docuseal import DocuSealClient

router = APIRouter()
logger = logging.getLogger(__name__)

# Forwarded only when present and non-empty
_FILTER_PARAMS = (
    "after",
    "before",
    "submission_id",
    "q",
    "slug",
    "completed_after",
    "completed_before",
    "external_id",
)


def build_submitter_query(query: Dict[str, str]) -> Dict[str, str]:
    params = {"limit": query.get("limit") or "10"}
    for key in _FILTER_PARAMS:
        value = query.get(key)
        if value:
            params[key] = value
    return params


@router.get("")
async def list_submitters(
    request: Request,
    current_user_id: Optional[str] = Depends(get_optional_user_id)
):
    """List submitters with pagination and filters."""
    if current_user_id is None:
        logger.warning("[api/docuseal/submitters] no session - proceeding as anonymous")

    params = build_submitter_query(dict(request.query_params))
    client = DocuSealClient()
    return relay(
        lambda: client.list_submitters(params),
        "fetching DocuSeal submitters",
        transform=wrap_list,
    )


@router.get("/{submitter_id}")
async def get_submitter(
    submitter_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Get a submitter by ID."""
    client = DocuSealClient()
    return relay(
        lambda: client.get_submitter(submitter_id),
        f"fetching DocuSeal submitter {submitter_id}",
    )


@router.put("/{submitter_id}")
async def update_submitter(
    submitter_id: str,
    request: Request,
    current_user_id: str = Depends(get_current_user_id)
):
    """Update a submitter (values, email, completion, ...)."""
    body = await read_json(request)
    client = DocuSealClient()
    return relay(
        lambda: client.update_submitter(submitter_id, body),
        f"updating DocuSeal submitter {submitter_id}",
    )
