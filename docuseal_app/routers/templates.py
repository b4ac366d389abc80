"""
DocuSeal template proxy routes.
Template creation accepts JSON or multipart form data (PDF/DOCX upload).
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from docuseal_app.auth.dependencies import get_current_user_id, get_optional_user_id
from docuseal_app.config import get_settings
from docuseal_app.routers.proxy import read_json, relay
from docuseal_app.services.docuseal import DocuSealClient

settings = get_settings()
router = APIRouter()

DEFAULT_TEMPLATE_NAME = "Uploaded Template"


async def _create_from_upload(file: Optional[StarletteUploadFile], name: Optional[str]) -> JSONResponse:
    """Convert an uploaded document into a DocuSeal template."""
    if file is None:
        return JSONResponse(
            content={"message": "File is required"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    content = await file.read()
    filename = file.filename or "document"
    client = DocuSealClient()
    return relay(
        lambda: client.create_template_from_document(
            name=name or DEFAULT_TEMPLATE_NAME,
            filename=filename,
            content=content,
            content_type=file.content_type,
        ),
        "creating DocuSeal template from upload",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("")
async def list_templates(
    page: str = "1",
    limit: str = "10",
    current_user_id: str = Depends(get_current_user_id)
):
    """List templates (paginated)."""
    client = DocuSealClient()
    return relay(
        lambda: client.list_templates(page=page or "1", per_page=limit or "10"),
        "fetching DocuSeal templates",
    )


@router.post("")
async def create_template(
    request: Request,
    current_user_id: str = Depends(get_current_user_id)
):
    """Create a template from a JSON body or an uploaded document."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        file = form.get("file")
        if not isinstance(file, StarletteUploadFile):
            file = None
        name = form.get("name") or form.get("template_name")
        return await _create_from_upload(file, name if isinstance(name, str) else None)

    body = await read_json(request)

    client = DocuSealClient()
    return relay(
        lambda: client.create_template(body),
        "creating DocuSeal template",
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/upload")
async def upload_template(
    file: Optional[UploadFile] = File(None),
    name: Optional[str] = Form(None),
    template_name: Optional[str] = Form(None),
    current_user_id: Optional[str] = Depends(get_optional_user_id)
):
    """
    Upload a PDF or DOCX and create a template from it.
    Allowed without a session when the server holds a DocuSeal API key.
    """
    if current_user_id is None and not settings.docuseal_api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )

    return await _create_from_upload(file, name or template_name)


@router.get("/{template_id}")
async def get_template(
    template_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Get a template by ID."""
    client = DocuSealClient()
    return relay(
        lambda: client.get_template(template_id),
        f"fetching DocuSeal template {template_id}",
    )


@router.put("/{template_id}")
async def update_template(
    template_id: str,
    request: Request,
    current_user_id: str = Depends(get_current_user_id)
):
    """Update a template (name, folder, preferences, ...)."""
    body = await read_json(request)
    client = DocuSealClient()
    return relay(
        lambda: client.update_template(template_id, body),
        f"updating DocuSeal template {template_id}",
    )


@router.delete("/{template_id}")
async def delete_template(
    template_id: str,
    current_user_id: str = Depends(get_current_user_id)
):
    """Delete (archive) a template."""
    client = DocuSealClient()
    return relay(
        lambda: client.delete_template(template_id),
        f"deleting DocuSeal template {template_id}",
        transform=lambda _: {"message": "Template deleted successfully"},
    )


@router.put("/{template_id}/documents")
async def update_template_documents(
    template_id: str,
    request: Request,
    current_user_id: str = Depends(get_current_user_id)
):
    """Add or replace documents of a template."""
    body = await read_json(request)
    client = DocuSealClient()
    return relay(
        lambda: client.update_template_documents(template_id, body),
        f"updating documents of DocuSeal template {template_id}",
    )
