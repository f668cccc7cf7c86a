"""Domain error types."""


class EmptyMessageError(Exception):
    """Raised when a chat message is missing, not text, or blank."""


class ApiUnavailableError(Exception):
    """Raised by the client gateway when the backend cannot be reached."""
