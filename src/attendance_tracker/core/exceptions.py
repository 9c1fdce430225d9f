class DomainError(Exception):
    """Base exception for errors reported to the operator."""


class ValidationError(DomainError):
    """Raised when a required field is missing or empty."""


class FormatError(DomainError):
    """Raised when an id, email or field value is malformed."""


class DateFormatError(FormatError):
    """Raised when a date cannot be parsed as YYYY-MM-DD."""


class DuplicateError(DomainError):
    """Raised when a person id is already on the roster."""


class NotFoundError(DomainError):
    """Raised when an operation targets an id or date that does not exist."""


class EmptyRosterError(DomainError):
    """Raised when attendance is requested while the roster is empty."""


class StorageError(DomainError):
    """Raised when reading, writing or renaming a data file fails."""
