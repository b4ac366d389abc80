"""
Base class for page renderers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class PageRenderError(RuntimeError):
    """Raised when a page cannot be rendered."""


@dataclass
class PageView:
    """Result of rendering one page."""
    page_index: int
    zoom: float
    width: Optional[float] = None   # pixels; None when the page is embedded
    height: Optional[float] = None
    image: Optional[bytes] = None   # PNG bytes from a rich renderer
    url: Optional[str] = None       # document URL for inline-frame embedding
    media_type: str = "image/png"


class PageRenderer(ABC):
    """
    Abstract base class for page renderers.

    To add a new renderer:
    1. Create a new file in this directory
    2. Create a class that inherits from PageRenderer
    3. Implement `name`, `interactive`, `page_count` and `render`
    4. Register it in __init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The name of the renderer."""
        pass

    @property
    @abstractmethod
    def interactive(self) -> bool:
        """Whether overlays can be dragged and resized over this renderer's output."""
        pass

    @property
    @abstractmethod
    def page_count(self) -> Optional[int]:
        """Number of pages, or None when the renderer cannot tell."""
        pass

    @abstractmethod
    def render(self, page_index: int, zoom: float = 1.0) -> PageView:
        """
        Render a page.

        Args:
            page_index: 0-based page index
            zoom: scale factor

        Returns:
            PageView
        """
        pass

    def close(self) -> None:
        """Release any resources held by the renderer."""
        pass
