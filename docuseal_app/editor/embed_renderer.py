"""
Inline-frame fallback renderer.

Hands the raw document URL back for embedding. No pixel measurements come
out of it, so overlays are view-only.
"""
from typing import Optional

from .base import PageRenderer, PageRenderError, PageView


class EmbedRenderer(PageRenderer):
    """Basic renderer that embeds the document URL."""

    def __init__(self, document_url: str, page_count: Optional[int] = None):
        self.document_url = document_url
        self._page_count = page_count

    @property
    def name(self) -> str:
        return "embed"

    @property
    def interactive(self) -> bool:
        return False

    @property
    def page_count(self) -> Optional[int]:
        return self._page_count

    def render(self, page_index: int, zoom: float = 1.0) -> PageView:
        if page_index < 0 or (self._page_count is not None and page_index >= self._page_count):
            raise PageRenderError(f"Page index out of range: {page_index}")
        return PageView(
            page_index=page_index,
            zoom=zoom,
            url=self.document_url,
            media_type="text/uri-list",
        )
