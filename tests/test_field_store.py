"""Tests for persisting editor fields on templates."""
from unittest.mock import MagicMock

import pytest

from docuseal_app.models.docuseal import DecodeError
from docuseal_app.models.field import Field
from docuseal_app.services.field_store import TemplateFieldStore


def template_payload(**preferences):
    return {
        "id": 7,
        "name": "NDA",
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-01T10:00:00Z",
        "preferences": preferences,
        "documents": [{"id": 1, "url": None}, {"id": 2, "url": "https://docuseal.test/b.pdf"}],
    }


@pytest.fixture
def docuseal():
    return MagicMock()


def test_load_fields(docuseal):
    docuseal.get_template.return_value = template_payload(
        custom_fields=[{"id": "f1", "name": "Name", "page": 2, "x": 0.1, "y": 0.2, "w": 0.3, "h": 0.05}]
    )
    template, fields = TemplateFieldStore(docuseal).load("7")
    assert template.id == 7
    assert fields == [Field(id="f1", name="Name", page=2, x=0.1, y=0.2, w=0.3, h=0.05)]


def test_load_without_fields(docuseal):
    docuseal.get_template.return_value = template_payload()
    _, fields = TemplateFieldStore(docuseal).load("7")
    assert fields == []


@pytest.mark.parametrize("custom_fields", [
    {"id": "f1"},
    [{"name": "missing id"}],
])
def test_load_malformed_fields(docuseal, custom_fields):
    docuseal.get_template.return_value = template_payload(custom_fields=custom_fields)
    with pytest.raises(DecodeError):
        TemplateFieldStore(docuseal).load("7")


def test_save_replaces_preferences(docuseal):
    fields = [Field(id="f1", name="Name")]
    assert TemplateFieldStore(docuseal).save("7", fields) == fields
    template_id, body = docuseal.update_template.call_args.args
    assert template_id == "7"
    assert body["preferences"]["custom_fields"][0]["id"] == "f1"


def test_document_url_skips_documents_without_url(docuseal):
    docuseal.get_template.return_value = template_payload()
    template, _ = TemplateFieldStore(docuseal).load("7")
    assert TemplateFieldStore(docuseal).document_url(template) == "https://docuseal.test/b.pdf"
