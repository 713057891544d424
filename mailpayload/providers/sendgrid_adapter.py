"""
SendGrid Helper Adapter

Converts validated models into the official ``sendgrid`` helper objects so
they can be attached to a ``sendgrid.helpers.mail.Mail``. Sending the mail
stays with the caller.
"""

from sendgrid.helpers.mail import (
    Attachment as SendGridAttachment,
    ContentId,
    Disposition,
    FileContent,
    FileName,
    FileType,
    MailSettings as SendGridMailSettings,
    SpamCheck,
)

from mailpayload import logger
from mailpayload.models.attachment import Attachment
from mailpayload.models.content import content_type_description
from mailpayload.models.mail_settings import MailSettings
from mailpayload.models.spam_checker import SpamChecker


class SendGridAdapter:
    """Builds sendgrid-python helper objects from mailpayload models."""

    def get_provider_name(self) -> str:
        return "SendGrid"

    def attachment(self, attachment: Attachment) -> SendGridAttachment:
        """
        Convert an Attachment.

        Raises:
            MailValidationError: If the attachment does not validate
        """
        attachment.validate()

        converted = SendGridAttachment(
            file_content=FileContent(attachment.encoded_content),
            file_name=FileName(attachment.filename),
            disposition=Disposition(attachment.disposition.value)
        )
        if attachment.type is not None:
            converted.file_type = FileType(content_type_description(attachment.type))
        if attachment.content_id is not None:
            converted.content_id = ContentId(attachment.content_id)

        logger.debug(f'Converted attachment {attachment.filename} for SendGrid')
        return converted

    def spam_check(self, checker: SpamChecker) -> SpamCheck:
        """
        Convert a SpamChecker.

        Raises:
            ThresholdOutOfRange: If the threshold is outside 1 to 10
        """
        checker.validate()
        return SpamCheck(
            enable=checker.enable,
            threshold=checker.threshold,
            post_to_url=checker.post_url
        )

    def mail_settings(self, settings: MailSettings) -> SendGridMailSettings:
        """Convert every supported setting in the collection."""
        settings.validate()

        converted = SendGridMailSettings()
        for setting in settings.settings:
            if isinstance(setting, SpamChecker):
                converted.spam_check = self.spam_check(setting)
            else:
                logger.warn(
                    'Mail setting has no SendGrid helper equivalent',
                    setting=setting.key
                )
        return converted
