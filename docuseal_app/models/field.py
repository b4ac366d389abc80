"""
Editor field models.

Fields are stored on the DocuSeal template under
``preferences.custom_fields``; positions are fractions of the page.
"""
import time
from enum import Enum
from typing import List

from pydantic import BaseModel

DEFAULT_FIELD_WIDTH = 0.2
DEFAULT_FIELD_HEIGHT = 0.12


class FieldType(str, Enum):
    """Built-in field types offered by the inspector."""
    TEXT = "text"
    DATE = "date"
    SIGNATURE = "signature"


class Field(BaseModel):
    """A named, typed rectangle placed on a document page."""
    id: str
    name: str
    # Any string is accepted so new types do not need a release
    type: str = FieldType.TEXT.value
    page: int = 1
    x: float = 0.0
    y: float = 0.0
    w: float = DEFAULT_FIELD_WIDTH
    h: float = DEFAULT_FIELD_HEIGHT


class UpdateFieldsRequest(BaseModel):
    """Request to replace the field list of a template."""
    fields: List[Field]


_last_id_ms = 0


def new_field_id() -> str:
    """Timestamp-based field id, unique within the process."""
    global _last_id_ms
    now_ms = int(time.time() * 1000)
    if now_ms <= _last_id_ms:
        now_ms = _last_id_ms + 1
    _last_id_ms = now_ms
    return f"field_{now_ms}"


def custom_fields_payload(fields: List[Field]) -> dict:
    """Template update body storing `fields` under preferences.custom_fields."""
    return {
        "preferences": {
            "custom_fields": [f.model_dump(mode="json") for f in fields]
        }
    }
