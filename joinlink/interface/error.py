"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """Missing or invalid credentials."""

    pass
