"""
DocuSeal App - FastAPI Backend

Main application entry point.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docuseal_app.config import get_settings
from docuseal_app.logging_config import configure_logging
from docuseal_app.auth.routes import router as auth_router
from docuseal_app.routers.templates import router as templates_router
from docuseal_app.routers.submissions import router as submissions_router
from docuseal_app.routers.submitters import router as submitters_router
from docuseal_app.routers.builder_token import router as builder_token_router
from docuseal_app.routers.editor import router as editor_router

APP_VERSION = "1.0.0"

settings = get_settings()
configure_logging(settings)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Proxy and field editor backend for the DocuSeal document-signing API.",
    version=APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(templates_router, prefix="/api/docuseal/templates", tags=["Templates"])
app.include_router(submissions_router, prefix="/api/docuseal/submissions", tags=["Submissions"])
app.include_router(submitters_router, prefix="/api/docuseal/submitters", tags=["Submitters"])
app.include_router(builder_token_router, prefix="/api/docuseal/builder_token", tags=["Builder"])
app.include_router(editor_router, prefix="/api/editor", tags=["Editor"])


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


@app.get("/api/info")
async def app_info():
    """Get application info including available page renderers."""
    from docuseal_app.editor import list_page_renderers

    return {
        "app": settings.app_name,
        "version": APP_VERSION,
        "docuseal_url": settings.get_docuseal_base_url(),
        "available_page_renderers": list_page_renderers(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("docuseal_app.main:app", host="0.0.0.0", port=8000, reload=True)
