class CTBriefError(Exception):
    """Base error for the brief service."""


class StoreUnavailableError(CTBriefError):
    """Raised when the snapshot store cannot enumerate its records."""
