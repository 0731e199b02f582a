"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MissingURLError(ValidationError):
    """Raised when an invitation update carries no URL."""

    def __init__(self) -> None:
        super().__init__("URL is required")


class InvalidURLError(ValidationError):
    """Raised when an invitation URL cannot be parsed."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("Invalid URL format")


class NoInvitationError(ValidationError):
    """Raised when an operation needs a stored invitation URL and there is none."""

    def __init__(self) -> None:
        super().__init__("No invite link to validate")


class StoreError(DomainError):
    """Base error for invitation record storage."""

    pass


class RecordNotFoundError(StoreError):
    """Raised when no invitation record is stored in any backend."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invitation record not found: {key}")


class StoreTransportError(StoreError):
    """Raised when a storage backend cannot be reached or returns garbage."""

    pass


class StoreWriteError(StoreError):
    """Raised when the invitation record cannot be written."""

    pass
