class NotifierError(Exception):
    """Base notifier exception."""


class InvalidDocumentError(NotifierError):
    """Raised when a stored document cannot be parsed."""


class InvalidLocationDocument(InvalidDocumentError):
    """Raised when a location document lacks usable coordinates."""


class InvalidEventDocument(InvalidDocumentError):
    """Raised when an events document lacks a name or date."""


class InvalidDeliveryTarget(NotifierError):
    """Raised when a notification has no single, non-empty delivery target."""
