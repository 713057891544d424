"""
Mail Validation Errors

Every failure carries the offending value so callers can report exactly
what was rejected. Errors are raised by ``validate()``, never by a
model's constructor.
"""


class MailValidationError(ValueError):
    """Base class for client-side mail request validation failures."""

    description = 'Invalid mail request value'

    def __init__(self, value):
        self.value = value
        super().__init__(f'{self.description}: {value!r}')

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        return f'{type(self).__name__}({self.value!r})'


class InvalidContentType(MailValidationError):
    """The attachment MIME type contains a semicolon or a newline."""
    description = 'Attachment content types cannot contain semicolons or newlines'


class InvalidFilename(MailValidationError):
    """The attachment filename contains a semicolon, comma or newline."""
    description = 'Attachment filenames cannot contain semicolons, commas, or newlines'


class InvalidContentID(MailValidationError):
    """The content ID is blank or contains a comma, semicolon or newline."""
    description = 'Content IDs must be non-empty and cannot contain commas, semicolons, or newlines'


class ThresholdOutOfRange(MailValidationError):
    """The spam checker threshold is outside of 1 to 10."""
    description = 'Spam checker threshold must be between 1 and 10'
