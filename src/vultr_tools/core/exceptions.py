"""Exception hierarchy for vultr-tools."""


class VultrToolsError(Exception):
    """Base exception for all vultr-tools errors."""

    pass


class ValidationError(VultrToolsError):
    """Raised when local validation fails, before any API call."""

    pass


class APIError(VultrToolsError):
    """Raised when the Vultr API call fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OperationError(VultrToolsError):
    """Raised when an object storage operation fails remotely."""

    pass
