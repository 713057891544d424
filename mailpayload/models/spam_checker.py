"""
Spam Checker Mail Setting

Tests message content for spam. The threshold runs from 1 (lenient) to 10
(most strict); an optional webhook receives a copy of the message along
with the spam report.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from mailpayload.errors import MailValidationError, ThresholdOutOfRange
from mailpayload.models.base import MailSetting

MIN_THRESHOLD = 1
MAX_THRESHOLD = 10


@dataclass(frozen=True)
class SpamChecker(MailSetting):
    enable: bool
    threshold: int
    post_url: Optional[str] = None

    key = 'spam_check'

    def setting_fields(self) -> Dict[str, Any]:
        fields = {'threshold': self.threshold}
        if self.post_url is not None:
            fields['post_to_url'] = str(self.post_url)
        return fields

    def validation_error(self) -> Optional[MailValidationError]:
        if self.threshold < MIN_THRESHOLD or self.threshold > MAX_THRESHOLD:
            return ThresholdOutOfRange(self.threshold)
        return None
