"""
Model Base Contracts

Shared interfaces for request fragments: serializing to JSON-ready dicts
and validating before a payload leaves the client.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional
import json

from mailpayload.errors import MailValidationError

NEWLINES = '\r\n'


def has_forbidden(value: str, chars: Iterable[str]) -> bool:
    """Return True if any of ``chars`` (or a newline) appears in ``value``."""
    return any(char in value for char in chars) or any(nl in value for nl in NEWLINES)


class Validatable(ABC):
    """Something that can check itself before being sent."""

    @abstractmethod
    def validation_error(self) -> Optional[MailValidationError]:
        """Return the first violated constraint, or None when valid."""
        pass

    def validate(self) -> None:
        """Raise the first violated constraint, if any."""
        err = self.validation_error()
        if err is not None:
            raise err


class JSONSerializable(ABC):
    """A request fragment that renders as an ordered JSON object."""

    @property
    @abstractmethod
    def json_dict(self) -> Dict[str, Any]:
        pass

    @property
    def json_value(self) -> str:
        """Compact JSON string, keys in insertion order."""
        return json.dumps(self.json_dict, separators=(',', ':'), ensure_ascii=False)


class MailSetting(Validatable):
    """
    Base contract for a mail setting.

    Concrete settings expose ``enable`` and name their ``key`` in the
    ``mail_settings`` object; ``dictionary_value`` nests the shared fields
    plus the setting's own fields under that key.
    """

    key: str = ''
    enable: bool

    def base_fields(self) -> Dict[str, Any]:
        return {'enable': self.enable}

    def setting_fields(self) -> Dict[str, Any]:
        """Fields specific to this setting, appended after the shared ones."""
        return {}

    @property
    def dictionary_value(self) -> Dict[str, Any]:
        fields = self.base_fields()
        fields.update(self.setting_fields())
        return {self.key: fields}

    def validation_error(self) -> Optional[MailValidationError]:
        return None
