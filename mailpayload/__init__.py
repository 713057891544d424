"""
mailpayload - client-side models for SendGrid v3 mail-send requests.

Usage:
    from mailpayload import Attachment, ContentType, SpamChecker, MailSettings
    from mailpayload import build_request_fragment

    logo = Attachment('logo.png', data, type=ContentType.PNG, content_id='logo')
    fragment = build_request_fragment(
        attachments=[logo],
        mail_settings=MailSettings(SpamChecker(enable=True, threshold=5)),
    )
"""

from mailpayload.errors import (
    InvalidContentID,
    InvalidContentType,
    InvalidFilename,
    MailValidationError,
    ThresholdOutOfRange,
)
from mailpayload.models import (
    Attachment,
    ContentDisposition,
    ContentType,
    JSONSerializable,
    MailSetting,
    MailSettings,
    OtherContentType,
    SpamChecker,
    Validatable,
    content_type_description,
)
from mailpayload.payload import build_request_fragment

__all__ = [
    'Attachment',
    'ContentDisposition',
    'ContentType',
    'InvalidContentID',
    'InvalidContentType',
    'InvalidFilename',
    'JSONSerializable',
    'MailSetting',
    'MailSettings',
    'MailValidationError',
    'OtherContentType',
    'SpamChecker',
    'ThresholdOutOfRange',
    'Validatable',
    'build_request_fragment',
    'content_type_description',
]
