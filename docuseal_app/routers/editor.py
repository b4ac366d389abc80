"""
Field-overlay editor routes.

Load a template's fields, save them back, and render template pages for the
overlay. Rendering uses the richest renderer available for the document and
degrades to an embeddable document URL.
"""
import logging

import requests
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from docuseal_app.auth.dependencies import get_current_user_id
from docuseal_app.editor import PageRenderError, select_renderer
from docuseal_app.models.docuseal import DecodeError
from docuseal_app.models.field import UpdateFieldsRequest
from docuseal_app.routers.proxy import (
    decode_error_response,
    internal_error_response,
    upstream_error_response,
)
from docuseal_app.services.docuseal import DocuSealAPIError
from docuseal_app.services.field_store import TemplateFieldStore

router = APIRouter()
logger = logging.getLogger(__name__)


def _load_renderer(store: TemplateFieldStore, template):
    url = store.document_url(template)
    if url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template has no documents"
        )

    try:
        document_bytes = store.document_bytes(url)
    except (DocuSealAPIError, requests.RequestException) as exc:
        # The document can still be embedded by URL
        logger.info("Could not download template document (%s); embedding instead", exc)
        document_bytes = None
    return select_renderer(document_bytes, url)


@router.get("/templates/{template_id}")
async def get_editor_state(
    template_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Template summary, stored fields and rendering capability."""
    store = TemplateFieldStore()
    capability = {"renderer": None, "interactive": False, "page_count": None}
    try:
        template, fields = store.load(template_id)
        if template.documents:
            renderer = _load_renderer(store, template)
            capability = {
                "renderer": renderer.name,
                "interactive": renderer.interactive,
                "page_count": renderer.page_count,
            }
            renderer.close()
    except DocuSealAPIError as exc:
        return upstream_error_response(exc)
    except DecodeError as exc:
        return decode_error_response(exc)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Error loading editor state for template %s", template_id)
        return internal_error_response(exc)

    return {
        "template_id": template.id,
        "name": template.name,
        "fields": [f.model_dump(mode="json") for f in fields],
        **capability,
    }


@router.put("/templates/{template_id}/fields")
async def save_fields(
    template_id: str,
    request: UpdateFieldsRequest,
    current_user_id: str = Depends(get_current_user_id)
):
    """Replace the template's field list."""
    store = TemplateFieldStore()
    try:
        fields = store.save(template_id, request.fields)
    except DocuSealAPIError as exc:
        return upstream_error_response(exc)
    except Exception as exc:
        logger.exception("Error saving fields for template %s", template_id)
        return internal_error_response(exc)

    return {"fields": [f.model_dump(mode="json") for f in fields]}


@router.get("/templates/{template_id}/pages/{page}")
async def render_page(
    template_id: str,
    page: int,
    zoom: float = Query(1.0, gt=0, le=8),
    current_user_id: str = Depends(get_current_user_id)
):
    """
    Render a 1-based template page.
    Returns PNG bytes, or {"url": ...} when the page can only be embedded.
    """
    store = TemplateFieldStore()
    renderer = None
    try:
        template, _ = store.load(template_id)
        renderer = _load_renderer(store, template)
        view = renderer.render(page - 1, zoom)
    except PageRenderError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except DocuSealAPIError as exc:
        return upstream_error_response(exc)
    except DecodeError as exc:
        return decode_error_response(exc)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Error rendering page %s of template %s", page, template_id)
        return internal_error_response(exc)
    finally:
        if renderer is not None:
            renderer.close()

    if view.image is not None:
        return Response(
            content=view.image,
            media_type=view.media_type,
            headers={"X-Page-Width": str(view.width), "X-Page-Height": str(view.height)},
        )
    return {"url": view.url, "page": page, "interactive": renderer.interactive}
