"""
DocuSeal form-builder token route.
"""
import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from docuseal_app.config import get_settings

settings = get_settings()
router = APIRouter()
logger = logging.getLogger(__name__)


def create_builder_token() -> str:
    """JWT for the embedded DocuSeal builder, signed with the API key."""
    payload = {
        "user_email": settings.docuseal_user_email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.builder_token_expire_minutes),
    }
    return jwt.encode(payload, settings.docuseal_api_key, algorithm="HS256")


@router.post("")
async def builder_token():
    """Issue a builder token."""
    try:
        token = create_builder_token()
    except Exception:
        logger.exception("Failed to generate builder token")
        return JSONResponse(
            content={"error": "Failed to generate token"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return {"token": token}
