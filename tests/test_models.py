"""Tests for DocuSeal resource decoding and editor field models."""
import pytest

from docuseal_app.models.docuseal import (
    DecodeError,
    SubmissionStatus,
    SubmitterStatus,
    decode_submission,
    decode_submitter,
    decode_template,
)
from docuseal_app.models.field import Field, FieldType, custom_fields_payload, new_field_id

TEMPLATE = {
    "id": 7,
    "name": "NDA",
    "created_at": "2024-05-01T10:00:00Z",
    "updated_at": "2024-05-02T10:00:00Z",
    "preferences": {"custom_fields": [{"id": "f1", "name": "Name"}]},
    "documents": [{"id": 1, "uuid": "doc-1", "url": "https://docuseal.test/doc.pdf"}],
    "schema": [{"name": "nda.pdf", "attachment_uuid": "doc-1"}],
}

SUBMITTER = {
    "id": 3,
    "submission_id": 9,
    "email": "signer@example.com",
    "status": "opened",
    "embed_src": "https://docuseal.test/s/abc",
}


class TestTemplateDecoding:

    def test_decodes_template(self):
        template = decode_template(TEMPLATE)
        assert template.id == 7
        assert template.documents[0].url == "https://docuseal.test/doc.pdf"
        assert template.preferences["custom_fields"][0]["id"] == "f1"

    def test_unwraps_data_envelope(self):
        assert decode_template({"data": TEMPLATE}).name == "NDA"

    def test_missing_required_key(self):
        broken = {k: v for k, v in TEMPLATE.items() if k != "name"}
        with pytest.raises(DecodeError) as exc_info:
            decode_template(broken)
        assert exc_info.value.resource == "template"

    def test_non_object_payload(self):
        with pytest.raises(DecodeError):
            decode_template([TEMPLATE])


class TestSubmissionDecoding:

    def test_status_enums(self):
        submission = decode_submission({"id": 9, "status": "pending", "submitters": [SUBMITTER]})
        assert submission.status == SubmissionStatus.PENDING
        assert submission.submitters[0].status == SubmitterStatus.OPENED

    def test_unknown_status_rejected(self):
        with pytest.raises(DecodeError):
            decode_submission({"id": 9, "status": "sent"})

    def test_submitter(self):
        assert decode_submitter(SUBMITTER).embed_src == "https://docuseal.test/s/abc"

    def test_submitter_unknown_status_rejected(self):
        with pytest.raises(DecodeError):
            decode_submitter({**SUBMITTER, "status": "pending"})


class TestField:

    def test_defaults(self):
        f = Field(id="x", name="Name")
        assert f.type == FieldType.TEXT
        assert f.page == 1
        assert (f.x, f.y, f.w, f.h) == (0.0, 0.0, 0.2, 0.12)

    def test_custom_type_allowed(self):
        assert Field(id="x", name="Initials", type="initials").type == "initials"

    def test_ids_are_timestamp_based_and_unique(self):
        ids = [new_field_id() for _ in range(100)]
        assert len(set(ids)) == 100
        assert all(i.startswith("field_") for i in ids)

    def test_custom_fields_payload(self):
        payload = custom_fields_payload([Field(id="x", name="Name", page=2)])
        assert payload == {
            "preferences": {
                "custom_fields": [
                    {"id": "x", "name": "Name", "type": "text", "page": 2,
                     "x": 0.0, "y": 0.0, "w": 0.2, "h": 0.12}
                ]
            }
        }
