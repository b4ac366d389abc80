"""
State model for the field-overlay editor.

Holds the field list of one template, the current page and zoom, the latest
page measurements and the selection/inspector state. Pointer and keyboard
handlers of the UI call straight into this class; all positions are kept as
page fractions and converted through the freshest measured bounds.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from docuseal_app.editor.base import PageRenderer, PageView
from docuseal_app.editor.geometry import (
    Bounds,
    PixelRect,
    resolve_bounds,
    to_fractions,
    to_pixels,
)
from docuseal_app.models.field import Field, FieldType, custom_fields_payload, new_field_id

logger = logging.getLogger(__name__)

NUDGE_STEP_PX = 4
NUDGE_STEP_LARGE_PX = 16

_ARROW_DELTAS = {
    "ArrowLeft": (-1, 0),
    "ArrowRight": (1, 0),
    "ArrowUp": (0, -1),
    "ArrowDown": (0, 1),
}


@dataclass
class Overlay:
    """A field as drawn over the current page."""
    field_id: str
    name: str
    type: str
    rect: PixelRect
    active: bool
    interactive: bool


@dataclass
class InspectorValues:
    """Pending name/type edits for the active field."""
    name: str
    type: str


class FieldEditor:
    """
    Editor state for placing fields on a rendered document.

    Args:
        fields: initial field list
        renderer: page renderer picked once for this editor's lifetime
        total_pages: page count; taken from the renderer when omitted
        zoom: initial zoom factor
    """

    def __init__(
        self,
        fields: Iterable[Field],
        renderer: PageRenderer,
        total_pages: Optional[int] = None,
        zoom: float = 1.0,
    ):
        self.fields: List[Field] = list(fields)
        self.renderer = renderer
        self.total_pages = total_pages if total_pages is not None else renderer.page_count
        self.zoom = zoom
        self.current_index = 0
        self.active_id: Optional[str] = None
        self.inspector: Optional[InspectorValues] = None
        self.page_rect: Optional[Bounds] = None
        self.container_rect: Optional[Bounds] = None
        self.view: Optional[PageView] = None

        if not renderer.interactive:
            logger.info("Renderer %s is not interactive; overlays are view-only", renderer.name)

    # ==================== Rendering & measurement ====================

    @property
    def interactive(self) -> bool:
        return self.renderer.interactive

    @property
    def bounds(self) -> Bounds:
        return resolve_bounds(self.page_rect, self.container_rect)

    def render(self) -> PageView:
        """Render the current page and re-measure from the result."""
        self.view = self.renderer.render(self.current_index, self.zoom)
        if self.view.width and self.view.height:
            self.measure(page_rect=Bounds(self.view.width, self.view.height))
        return self.view

    def measure(
        self,
        page_rect: Optional[Bounds] = None,
        container_rect: Optional[Bounds] = None,
    ) -> Bounds:
        """Record fresh measurements; missing ones keep the cached value."""
        if page_rect is not None and page_rect.usable:
            self.page_rect = page_rect
        if container_rect is not None and container_rect.usable:
            self.container_rect = container_rect
        return self.bounds

    # ==================== Fields ====================

    @property
    def current_page(self) -> int:
        """1-based page number shown."""
        return self.current_index + 1

    @property
    def active_field(self) -> Optional[Field]:
        return self.get_field(self.active_id) if self.active_id else None

    def get_field(self, field_id: str) -> Optional[Field]:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def visible_fields(self) -> List[Field]:
        return [f for f in self.fields if f.page == self.current_page]

    def overlays(self) -> List[Overlay]:
        bounds = self.bounds
        return [
            Overlay(
                field_id=f.id,
                name=f.name,
                type=f.type,
                rect=to_pixels(f, bounds),
                active=f.id == self.active_id,
                interactive=self.interactive,
            )
            for f in self.visible_fields()
        ]

    def add_field(
        self,
        name: str,
        type: str = FieldType.TEXT.value,
        page: Optional[int] = None,
    ) -> Field:
        field = Field(id=new_field_id(), name=name, type=type, page=page or self.current_page)
        self.fields.append(field)
        return field

    def update_field(self, field_id: str, **patch) -> bool:
        for i, field in enumerate(self.fields):
            if field.id == field_id:
                self.fields[i] = field.model_copy(update=patch)
                return True
        return False

    def remove_field(self, field_id: str) -> bool:
        before = len(self.fields)
        self.fields = [f for f in self.fields if f.id != field_id]
        if self.active_id == field_id:
            self.clear_selection()
        return len(self.fields) != before

    # ==================== Selection & inspector ====================

    def select(self, field_id: str) -> bool:
        """Activate a field drawn on the current page."""
        field = self.get_field(field_id)
        if field is None or field.page != self.current_page:
            return False
        self.active_id = field.id
        self.inspector = InspectorValues(name=field.name, type=field.type)
        return True

    def clear_selection(self) -> None:
        self.active_id = None
        self.inspector = None

    def click_outside(self) -> None:
        self.clear_selection()

    def edit_inspector(self, name: Optional[str] = None, type: Optional[str] = None) -> None:
        if self.inspector is None:
            return
        if name is not None:
            self.inspector.name = name
        if type is not None:
            self.inspector.type = type

    def save_inspector(self) -> bool:
        """Commit the inspector's name/type into the active field, then deselect."""
        field = self.active_field
        saved = False
        if field is not None and self.inspector is not None:
            patch = {}
            if self.inspector.name is not None:
                patch["name"] = self.inspector.name
            if self.inspector.type is not None:
                patch["type"] = self.inspector.type
            saved = self.update_field(field.id, **patch)
        self.clear_selection()
        return saved

    def close_inspector(self) -> None:
        self.clear_selection()

    def delete_active(self) -> bool:
        if self.active_id is None:
            return False
        return self.remove_field(self.active_id)

    # ==================== Pointer & keyboard ====================

    def drag_stop(self, field_id: str, x: float, y: float) -> bool:
        if not self.interactive:
            return False
        bounds = self.bounds
        return self.update_field(field_id, x=x / bounds.width, y=y / bounds.height)

    def resize_stop(self, field_id: str, x: float, y: float, width: float, height: float) -> bool:
        if not self.interactive:
            return False
        rect = PixelRect(x=x, y=y, width=max(width, 0.0), height=max(height, 0.0))
        return self.update_field(field_id, **to_fractions(rect, self.bounds))

    def handle_key(self, key: str, shift: bool = False) -> bool:
        """Apply a key press to the active field. Returns True when handled."""
        field = self.active_field
        if field is None:
            return False

        if key == "Escape":
            self.clear_selection()
            return True
        if key in ("Delete", "Backspace"):
            return self.remove_field(field.id)

        delta = _ARROW_DELTAS.get(key)
        if delta is None:
            return False

        step = NUDGE_STEP_LARGE_PX if shift else NUDGE_STEP_PX
        bounds = self.bounds
        x_px = field.x * bounds.width + delta[0] * step
        y_px = field.y * bounds.height + delta[1] * step
        return self.update_field(field.id, x=x_px / bounds.width, y=y_px / bounds.height)

    # ==================== Navigation & zoom ====================

    def go_to_page(self, page_index: int) -> PageView:
        page_index = max(page_index, 0)
        if self.total_pages:
            page_index = min(page_index, self.total_pages - 1)
        self.current_index = page_index
        return self.render()

    def next_page(self) -> PageView:
        return self.go_to_page(self.current_index + 1)

    def prev_page(self) -> PageView:
        return self.go_to_page(self.current_index - 1)

    def set_zoom(self, zoom: float) -> PageView:
        if zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {zoom}")
        self.zoom = zoom
        return self.render()

    # ==================== Persistence ====================

    def payload(self) -> dict:
        """Template update body carrying the current field list."""
        return custom_fields_payload(self.fields)
