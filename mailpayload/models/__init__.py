from mailpayload.models.base import JSONSerializable, MailSetting, Validatable
from mailpayload.models.content import (
    ContentDisposition,
    ContentType,
    OtherContentType,
    content_type_description,
)
from mailpayload.models.attachment import Attachment
from mailpayload.models.spam_checker import SpamChecker
from mailpayload.models.mail_settings import MailSettings

__all__ = [
    'Attachment',
    'ContentDisposition',
    'ContentType',
    'JSONSerializable',
    'MailSetting',
    'MailSettings',
    'OtherContentType',
    'SpamChecker',
    'Validatable',
    'content_type_description',
]
