"""Client errors."""

from typing import Any


class ConfigurationError(Exception):
    """Required configuration is missing."""

    def __init__(self, message: str = "Configuration error"):
        self.message = message
        super().__init__(self.message)


class TransportError(Exception):
    """Network failure or timeout before a response arrived."""

    def __init__(self, message: str = "Transport error"):
        self.message = message
        super().__init__(self.message)


class ApiError(Exception):
    """Backend answered with a non-2xx status.

    ``payload`` is the decoded response body (or raw text), passed through
    untouched so callers can render backend validation messages.
    """

    def __init__(self, status_code: int, message: str = "API error", payload: Any = None):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(f"{status_code}: {self.message}")


class UnauthorizedError(ApiError):
    """Backend rejected the credentials (401). The domain session is already cleared."""

    def __init__(self, message: str = "Unauthorized", payload: Any = None):
        super().__init__(401, message, payload)
