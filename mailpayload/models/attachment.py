"""
Attachment Model

One file attached to an outgoing message. Content is held as raw bytes
and base64 encoded when the fragment is rendered.
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional

from mailpayload.errors import (
    InvalidContentID,
    InvalidContentType,
    InvalidFilename,
    MailValidationError,
)
from mailpayload.models.base import JSONSerializable, Validatable, has_forbidden
from mailpayload.models.content import (
    AnyContentType,
    ContentDisposition,
    content_type_description,
)


@dataclass(frozen=True)
class Attachment(JSONSerializable, Validatable):
    """
    An email attachment.

    Args:
        filename: Name shown to the recipient
        content: Raw file bytes
        disposition: Attachment or inline
        type: Optional MIME type
        content_id: Optional Content-ID, referenced as ``cid:`` from HTML bodies
    """
    filename: str
    content: bytes
    disposition: ContentDisposition = ContentDisposition.ATTACHMENT
    type: Optional[AnyContentType] = None
    content_id: Optional[str] = None

    @property
    def encoded_content(self) -> str:
        return base64.b64encode(self.content).decode('ascii')

    @property
    def json_dict(self) -> Dict[str, Any]:
        # Key order is part of the wire contract
        payload = {
            'disposition': self.disposition.value,
            'content': self.encoded_content,
            'filename': self.filename,
        }
        if self.type is not None:
            payload['type'] = content_type_description(self.type)
        if self.content_id is not None:
            payload['content_id'] = self.content_id
        return payload

    def validation_error(self) -> Optional[MailValidationError]:
        description = content_type_description(self.type)
        if description is not None and has_forbidden(description, ';'):
            return InvalidContentType(description)

        if has_forbidden(self.filename, ';,'):
            return InvalidFilename(self.filename)

        if self.content_id is not None:
            if not self.content_id or has_forbidden(self.content_id, ',;'):
                return InvalidContentID(self.content_id)

        return None
