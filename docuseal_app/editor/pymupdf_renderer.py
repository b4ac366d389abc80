"""
PyMuPDF page renderer.
"""
import fitz  # PyMuPDF

from .base import PageRenderer, PageRenderError, PageView


class PyMuPDFRenderer(PageRenderer):
    """Rich renderer: rasterizes pages to PNG so overlays align to measured pixels."""

    def __init__(self, document_bytes: bytes):
        self.document = fitz.open(stream=document_bytes, filetype="pdf")

    @property
    def name(self) -> str:
        return "pymupdf"

    @property
    def interactive(self) -> bool:
        return True

    @property
    def page_count(self) -> int:
        return self.document.page_count

    def render(self, page_index: int, zoom: float = 1.0) -> PageView:
        if page_index < 0 or page_index >= self.document.page_count:
            raise PageRenderError(f"Page index out of range: {page_index}")

        try:
            page = self.document.load_page(page_index)
            pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
        except RuntimeError as exc:
            raise PageRenderError(f"Failed to render page {page_index + 1}") from exc

        return PageView(
            page_index=page_index,
            zoom=zoom,
            width=pix.width,
            height=pix.height,
            image=pix.tobytes("png"),
        )

    def close(self) -> None:
        self.document.close()
