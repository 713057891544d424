"""
Attachment content descriptors: disposition and MIME type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ContentDisposition(Enum):
    """How the recipient's client should present an attachment."""
    ATTACHMENT = "attachment"
    INLINE = "inline"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class OtherContentType:
    """A MIME type not covered by ContentType, passed through as given."""
    value: str

    @property
    def description(self) -> str:
        return self.value

    def __str__(self):
        return self.description


class ContentType(Enum):
    """Well-known MIME types for attachments."""
    # Images
    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"
    BMP = "image/bmp"
    TIFF = "image/tiff"
    SVG = "image/svg+xml"

    # Documents
    PDF = "application/pdf"
    PLAIN_TEXT = "text/plain"
    HTML = "text/html"
    CSV = "text/csv"
    CALENDAR = "text/calendar"
    RTF = "application/rtf"
    JSON = "application/json"
    XML = "application/xml"
    WORD = "application/msword"
    WORD_OPEN_XML = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    EXCEL = "application/vnd.ms-excel"
    EXCEL_OPEN_XML = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    POWERPOINT = "application/vnd.ms-powerpoint"
    POWERPOINT_OPEN_XML = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

    # Archives and binary
    ZIP = "application/zip"
    GZIP = "application/gzip"
    OCTET_STREAM = "application/octet-stream"

    # Media
    MP3 = "audio/mpeg"
    WAV = "audio/wav"
    MP4 = "video/mp4"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self):
        return self.description

    @staticmethod
    def other(value: str) -> OtherContentType:
        return OtherContentType(value)


AnyContentType = Union[ContentType, OtherContentType]


def content_type_description(content_type: Optional[AnyContentType]) -> Optional[str]:
    """Canonical MIME string for either kind of content type."""
    if content_type is None:
        return None
    return content_type.description
