"""
Request Fragment Builder

Validates attachments and mail settings together and renders the parts of
a send request body they own. The caller merges the result into the full
request (personalizations, from, content) and handles transport.
"""

from typing import Any, Dict, Iterable, Optional

from mailpayload import logger
from mailpayload.models.attachment import Attachment
from mailpayload.models.mail_settings import MailSettings


def build_request_fragment(
    attachments: Iterable[Attachment] = (),
    mail_settings: Optional[MailSettings] = None
) -> Dict[str, Any]:
    """
    Validate and render attachments and mail settings.

    Args:
        attachments: Attachments for the message
        mail_settings: Optional mail settings collection

    Returns:
        Dict with 'attachments' and/or 'mail_settings' keys, only for
        non-empty inputs

    Raises:
        MailValidationError: The first invalid attachment or setting found
    """
    attachments = list(attachments)

    for attachment in attachments:
        err = attachment.validation_error()
        if err is not None:
            logger.debug(
                'Attachment failed validation',
                filename=attachment.filename,
                error=str(err)
            )
            raise err

    if mail_settings:
        err = mail_settings.validation_error()
        if err is not None:
            logger.debug('Mail settings failed validation', error=str(err))
            raise err

    fragment: Dict[str, Any] = {}
    if attachments:
        fragment['attachments'] = [a.json_dict for a in attachments]
    if mail_settings:
        fragment['mail_settings'] = mail_settings.dictionary_value

    logger.info(
        'Built request fragment',
        attachments=len(attachments),
        mail_settings=len(mail_settings) if mail_settings else 0
    )
    return fragment
