from .errors import (
    AuthTokenMissingError,
    ConfigurationError,
    ErrorKind,
    RepoApiError,
    RequestError,
    RequestTimeoutError,
    SendRequestError,
    TransportError,
    ValidationError,
)
from .gitlab import (
    GitlabIssue,
    GitlabProfile,
    GitlabProject,
    IssueQueryParams,
    ProjectQueryParams,
)

__all__ = [
    "AuthTokenMissingError",
    "ConfigurationError",
    "ErrorKind",
    "GitlabIssue",
    "GitlabProfile",
    "GitlabProject",
    "IssueQueryParams",
    "ProjectQueryParams",
    "RepoApiError",
    "RequestError",
    "RequestTimeoutError",
    "SendRequestError",
    "TransportError",
    "ValidationError",
]
