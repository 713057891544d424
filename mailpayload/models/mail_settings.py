"""
Mail Settings Collection

Folds individual mail settings into the single ``mail_settings`` object of
a send request.
"""

from typing import Any, Dict, List, Optional

from mailpayload.errors import MailValidationError
from mailpayload.models.base import MailSetting, Validatable


class MailSettings(Validatable):
    """Ordered set of mail settings, at most one per setting key."""

    def __init__(self, *settings: MailSetting):
        self._settings: Dict[str, MailSetting] = {}
        for setting in settings:
            self.add(setting)

    def add(self, setting: MailSetting) -> 'MailSettings':
        """Add a setting, replacing any existing one with the same key."""
        if not isinstance(setting, MailSetting):
            raise TypeError(f'{setting!r} must implement MailSetting')
        self._settings[setting.key] = setting
        return self

    @property
    def settings(self) -> List[MailSetting]:
        return list(self._settings.values())

    def __len__(self):
        return len(self._settings)

    def __bool__(self):
        return bool(self._settings)

    def get(self, key: str) -> Optional[MailSetting]:
        return self._settings.get(key)

    @property
    def dictionary_value(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for setting in self._settings.values():
            merged.update(setting.dictionary_value)
        return merged

    def validation_error(self) -> Optional[MailValidationError]:
        for setting in self._settings.values():
            err = setting.validation_error()
            if err is not None:
                return err
        return None
