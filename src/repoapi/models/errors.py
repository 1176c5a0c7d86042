from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    REQUEST = "request"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    UNEXPECTED = "unexpected"


class RepoApiError(Exception):
    """Base class for every error raised by the library.

    Callers can branch on ``kind`` instead of matching on messages.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(RepoApiError):
    """Missing or invalid configuration. Raised before any network call."""

    kind = ErrorKind.CONFIGURATION


class AuthTokenMissingError(ConfigurationError):
    def __init__(self, env_key: str) -> None:
        self.env_key = env_key
        super().__init__(
            f"{env_key} env not set. Export it or add it to your .env file."
        )


class ValidationError(RepoApiError):
    """Invalid caller input such as an empty URL, token or a non-object body."""

    kind = ErrorKind.VALIDATION


class RequestError(RepoApiError):
    """The server answered with a non-success status code."""

    kind = ErrorKind.REQUEST

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class RequestTimeoutError(RepoApiError):
    kind = ErrorKind.TIMEOUT


class TransportError(RepoApiError):
    """Network level failure (DNS, refused or reset connection, ...)."""

    kind = ErrorKind.TRANSPORT


class SendRequestError(RepoApiError):
    """Uniform failure raised by ``ApiRequest.send``.

    The original error is kept as ``cause`` (and as ``__cause__`` through
    exception chaining); ``kind``, ``status_code`` and ``response_body`` are
    copied from it.
    """

    def __init__(self, cause: RepoApiError) -> None:
        self.cause = cause
        self.kind = cause.kind
        self.status_code: int | None = getattr(cause, "status_code", None)
        self.response_body: str | None = getattr(cause, "response_body", None)
        super().__init__(f"Error sending request: {cause.message}")
