"""
Custom exceptions for the iss_flyover package.

Provides a hierarchy of exceptions for clear error handling
and debugging of upstream lookups. Transport failures are not
wrapped: the httpx exception raised by the transport reaches the
caller unchanged.
"""


class ISSFlyoverError(Exception):
    """Base exception for all iss_flyover errors."""

    pass


class UpstreamStatusError(ISSFlyoverError):
    """Raised when an upstream service answers with a non-success status."""

    def __init__(self, resource: str, status_code: int, body: str) -> None:
        self.resource = resource
        self.status_code = status_code
        self.body = body
        message = f"Status Code {status_code} when fetching {resource}. Response: {body}"
        super().__init__(message)


class UpstreamParseError(ISSFlyoverError):
    """Raised when a response body cannot be read as the expected shape."""

    def __init__(self, resource: str, message: str) -> None:
        self.resource = resource
        super().__init__(f"Could not parse {resource} response: {message}")


class ConfigurationError(ISSFlyoverError):
    """Raised when an environment setting has an invalid value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r} (expected {expected})")
