"""
Persistence of editor fields on DocuSeal templates.
"""
import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError

from docuseal_app.models.docuseal import DecodeError, Template, decode_template
from docuseal_app.models.field import Field, custom_fields_payload
from docuseal_app.services.docuseal import DocuSealClient

logger = logging.getLogger(__name__)

CUSTOM_FIELDS_KEY = "custom_fields"


class TemplateFieldStore:
    """Loads and saves the editor's field list through the DocuSeal API."""

    def __init__(self, client: Optional[DocuSealClient] = None):
        self.client = client or DocuSealClient()

    def load(self, template_id: str) -> Tuple[Template, List[Field]]:
        """Fetch a template and the fields stored in its preferences."""
        template = decode_template(self.client.get_template(template_id))
        raw_fields = template.preferences.get(CUSTOM_FIELDS_KEY) or []
        if not isinstance(raw_fields, list):
            raise DecodeError("template", f"{CUSTOM_FIELDS_KEY} must be a list")
        try:
            fields = [Field.model_validate(f) for f in raw_fields]
        except ValidationError as exc:
            raise DecodeError("template", str(exc)) from exc
        return template, fields

    def save(self, template_id: str, fields: List[Field]) -> List[Field]:
        """Replace the template's field list with `fields`."""
        logger.info("Saving %d fields on template %s", len(fields), template_id)
        self.client.update_template(template_id, custom_fields_payload(fields))
        return fields

    def document_url(self, template: Template) -> Optional[str]:
        """URL of the template's first document, if any."""
        for document in template.documents:
            if document.url:
                return document.url
        return None

    def document_bytes(self, url: str) -> bytes:
        return self.client.download(url)
