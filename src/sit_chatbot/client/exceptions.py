"""Custom exceptions for the conversational client."""


class InvalidTransitionError(Exception):
    """Raised when the conversation state machine is asked for a forbidden move."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move from '{current}' to '{target}'")


class ProxyError(Exception):
    """Base class for failures talking to the request proxy."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)


class ProxyRequestError(ProxyError):
    """Raised when the proxy answers with a non-success status."""

    def __init__(self, operation: str, status_code: int, details: str = ""):
        self.status_code = status_code
        self.details = details
        super().__init__(
            operation, f"Server returned {status_code}: {details}".rstrip(": ")
        )


class ProxyUnavailableError(ProxyError):
    """Raised when the proxy cannot be reached or does not answer in time."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(operation, f"Could not reach the server for {operation}")


class MicrophoneError(Exception):
    """Raised when the microphone cannot be opened or read."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AudioPlaybackError(Exception):
    """Raised when synthesized audio cannot be played."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
