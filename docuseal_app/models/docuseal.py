"""
DocuSeal resource models.

Upstream payloads are owned by DocuSeal; these models describe the parts of
them this app reads. Unknown keys are ignored so upstream additions do not
break decoding.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError


class DecodeError(ValueError):
    """Raised when an upstream payload does not match the expected shape."""

    def __init__(self, resource: str, detail: str):
        self.resource = resource
        self.detail = detail
        super().__init__(f"Invalid {resource} payload: {detail}")


class SubmissionStatus(str, Enum):
    """Status of a submission as reported by DocuSeal."""
    PENDING = "pending"
    COMPLETED = "completed"
    DECLINED = "declined"
    EXPIRED = "expired"


class SubmitterStatus(str, Enum):
    """Status of a single submitter."""
    SENT = "sent"
    OPENED = "opened"
    COMPLETED = "completed"
    DECLINED = "declined"


class _Resource(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TemplateDocument(_Resource):
    """A document attached to a template."""
    id: Optional[int] = None
    uuid: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None


class FieldArea(_Resource):
    """Placement of a DocuSeal field on a document page."""
    page: int
    attachment_uuid: Optional[str] = None
    x: float
    y: float
    w: float
    h: float


class TemplateField(_Resource):
    """A field defined on a template by the DocuSeal builder."""
    name: str
    type: str
    required: Optional[bool] = None
    uuid: Optional[str] = None
    submitter_uuid: Optional[str] = None
    areas: List[FieldArea] = []


class Template(_Resource):
    """A DocuSeal template."""
    id: int
    name: str
    slug: Optional[str] = None
    external_id: Optional[str] = None
    folder_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    preferences: Dict[str, Any] = {}
    documents: List[TemplateDocument] = []
    fields: List[TemplateField] = []


class SubmitterValue(_Resource):
    field: str
    value: Union[str, int, float, bool, None] = None


class SubmitterDocument(_Resource):
    name: str
    url: str


class Submitter(_Resource):
    """A DocuSeal submitter (one signing party of a submission)."""
    id: int
    submission_id: Optional[int] = None
    uuid: Optional[str] = None
    email: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    external_id: Optional[str] = None
    role: Optional[str] = None
    status: SubmitterStatus
    sent_at: Optional[datetime] = None
    opened_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    declined_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    metadata: Dict[str, Any] = {}
    values: List[SubmitterValue] = []
    documents: List[SubmitterDocument] = []
    embed_src: Optional[str] = None


class SubmissionEvent(_Resource):
    id: int
    submitter_id: int
    event_type: str
    event_timestamp: datetime


class SubmissionDocument(_Resource):
    name: str
    url: str


class Submission(_Resource):
    """A DocuSeal submission."""
    id: int
    name: Optional[str] = None
    source: Optional[str] = None
    submitters_order: Optional[str] = None
    slug: Optional[str] = None
    status: SubmissionStatus
    audit_log_url: Optional[str] = None
    combined_document_url: Optional[str] = None
    expire_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    archived_at: Optional[datetime] = None
    submitters: List[Submitter] = []
    template: Optional[Dict[str, Any]] = None
    submission_events: List[SubmissionEvent] = []
    documents: List[SubmissionDocument] = []


class Pagination(_Resource):
    count: int
    next: Optional[int] = None
    prev: Optional[int] = None


class SubmitterMessage(BaseModel):
    subject: Optional[str] = None
    body: Optional[str] = None


class CreateSubmitterRequest(BaseModel):
    """Submitter entry of a create-submission request."""
    model_config = ConfigDict(extra="allow")

    email: str
    name: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    values: Optional[Dict[str, Any]] = None
    external_id: Optional[str] = None
    send_email: Optional[bool] = None
    send_sms: Optional[bool] = None
    order: Optional[int] = None
    message: Optional[SubmitterMessage] = None


class CreateSubmissionRequest(BaseModel):
    """Body of POST /submissions."""
    model_config = ConfigDict(extra="allow")

    template_id: int
    send_email: Optional[bool] = None
    send_sms: Optional[bool] = None
    order: Optional[str] = None
    completed_redirect_url: Optional[str] = None
    expire_at: Optional[str] = None
    message: Optional[SubmitterMessage] = None
    submitters: List[CreateSubmitterRequest]


def _decode(model, resource: str, data: Any):
    if not isinstance(data, dict):
        raise DecodeError(resource, f"expected an object, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(resource, str(exc)) from exc


def decode_template(data: Any) -> Template:
    """Decode a template payload, unwrapping a {"data": ...} envelope."""
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    return _decode(Template, "template", data)


def decode_submission(data: Any) -> Submission:
    return _decode(Submission, "submission", data)


def decode_submitter(data: Any) -> Submitter:
    return _decode(Submitter, "submitter", data)
