"""Custom exceptions for the request proxy."""


class ValidationError(Exception):
    """Raised when a client request is missing required input."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UpstreamError(Exception):
    """Raised when a reachable upstream service answers with a non-success status."""

    def __init__(self, service: str, status_code: int, body: str = ""):
        self.service = service
        self.status_code = status_code
        self.body = body
        super().__init__(f"{service} returned status {status_code}: {body}")


class UpstreamUnreachableError(Exception):
    """Raised when an upstream service cannot be reached or does not answer in time."""

    def __init__(self, service: str, cause: Exception | None = None):
        self.service = service
        self.cause = cause
        super().__init__(f"Could not reach {service}")


class LocalProcessingError(Exception):
    """Raised when local pre-processing of an uploaded audio file fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to normalize audio file '{file_name}'")
