# Field-overlay editor
import logging
from typing import Optional

from .base import PageRenderer, PageRenderError, PageView
from .embed_renderer import EmbedRenderer

logger = logging.getLogger(__name__)

# Preference order: the first renderer that can be built wins
_PAGE_RENDERER_NAMES = ["pymupdf", "embed"]


def select_renderer(document_bytes: Optional[bytes], document_url: str) -> PageRenderer:
    """
    Pick the richest renderer available for a document.

    Tries PyMuPDF (lazy import) and falls back to embedding the document URL
    when the library is missing or cannot open the document. Never raises.
    """
    if document_bytes:
        try:
            from .pymupdf_renderer import PyMuPDFRenderer
            renderer = PyMuPDFRenderer(document_bytes)
            logger.info("Using pymupdf renderer (%d pages)", renderer.page_count)
            return renderer
        except ImportError:
            logger.info("PyMuPDF not installed; falling back to embedded view")
        except RuntimeError as exc:
            logger.info("PyMuPDF could not open document (%s); falling back to embedded view", exc)
    return EmbedRenderer(document_url)


def list_page_renderers() -> list[str]:
    """List page renderer names in preference order."""
    return _PAGE_RENDERER_NAMES
