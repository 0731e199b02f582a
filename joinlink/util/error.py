"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings cannot build a working component.

    Attributes:
        setting: Environment variable at fault, when known
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        if setting:
            message = f"{message} (check {setting})"
        super().__init__(message)


class DependencyInjectionError(UtilError):
    """Raised when no provider matches a requested component."""

    pass
