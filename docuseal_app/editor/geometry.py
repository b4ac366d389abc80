"""
Conversions between page fractions and measured pixels.
"""
from dataclasses import dataclass
from typing import Optional

from docuseal_app.models.field import Field

DEFAULT_PAGE_WIDTH = 800
DEFAULT_PAGE_HEIGHT = 1000


@dataclass(frozen=True)
class Bounds:
    """Measured pixel size of the page (or its container)."""
    width: float
    height: float

    @property
    def usable(self) -> bool:
        return self.width > 0 and self.height > 0


DEFAULT_BOUNDS = Bounds(DEFAULT_PAGE_WIDTH, DEFAULT_PAGE_HEIGHT)


@dataclass(frozen=True)
class PixelRect:
    """A rectangle in pixels relative to the page's top-left corner."""
    x: float
    y: float
    width: float
    height: float


def resolve_bounds(
    page_rect: Optional[Bounds] = None,
    container_rect: Optional[Bounds] = None,
) -> Bounds:
    """Page rect, then container rect, then the fixed default."""
    for candidate in (page_rect, container_rect):
        if candidate is not None and candidate.usable:
            return candidate
    return DEFAULT_BOUNDS


def to_pixels(field: Field, bounds: Bounds) -> PixelRect:
    return PixelRect(
        x=field.x * bounds.width,
        y=field.y * bounds.height,
        width=field.w * bounds.width,
        height=field.h * bounds.height,
    )


def to_fractions(rect: PixelRect, bounds: Bounds) -> dict:
    """Fractional x/y/w/h for a pixel rectangle, ready to patch into a Field."""
    return {
        "x": rect.x / bounds.width,
        "y": rect.y / bounds.height,
        "w": rect.width / bounds.width,
        "h": rect.height / bounds.height,
    }
