"""
Relay helpers shared by the DocuSeal proxy routers.
"""
import logging
from typing import Any, Callable

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from docuseal_app.models.docuseal import DecodeError
from docuseal_app.services.docuseal import DocuSealAPIError

logger = logging.getLogger(__name__)


async def read_json(request: Request) -> Any:
    """Parsed JSON request body; 400 when the body is not JSON."""
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be JSON"
        )


def wrap_list(data: Any) -> Any:
    """Wrap bare array responses as {"data": [...]}."""
    if isinstance(data, list):
        return {"data": data}
    return data


def upstream_error_response(exc: DocuSealAPIError) -> JSONResponse:
    """Relay an upstream error body with its original status."""
    return JSONResponse(content=exc.payload, status_code=exc.status_code)


def internal_error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(
        content={"message": "Internal Server Error", "error": str(exc)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def decode_error_response(exc: DecodeError) -> JSONResponse:
    return JSONResponse(
        content={"message": "Invalid upstream payload", "error": str(exc)},
        status_code=status.HTTP_502_BAD_GATEWAY,
    )


def relay(
    call: Callable[[], Any],
    action: str,
    status_code: int = status.HTTP_200_OK,
    transform: Callable[[Any], Any] = lambda data: data,
) -> JSONResponse:
    """
    Run an upstream call and turn its outcome into a response.

    Upstream errors are relayed verbatim; anything else that goes wrong
    becomes a 500 carrying the exception message.
    """
    try:
        data = call()
    except DocuSealAPIError as exc:
        return upstream_error_response(exc)
    except Exception as exc:
        logger.exception("Error %s", action)
        return internal_error_response(exc)

    return JSONResponse(content=transform(data), status_code=status_code)
