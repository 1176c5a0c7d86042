"""Config-driven client for GitLab/GitHub style REST APIs."""

from ._config import Config, load_config
from ._repo_api import RepoApi
from ._services import (
    ApiClient,
    ApiRequester,
    IssuesService,
    ProfileService,
    ProjectsService,
)
from ._utils import ApiRequest, RequestMethod, RequestOptions, interpolate
from .models.errors import (
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

__all__ = [
    "ApiClient",
    "ApiRequest",
    "ApiRequester",
    "AuthTokenMissingError",
    "Config",
    "ConfigurationError",
    "ErrorKind",
    "interpolate",
    "IssuesService",
    "load_config",
    "ProfileService",
    "ProjectsService",
    "RepoApi",
    "RepoApiError",
    "RequestError",
    "RequestMethod",
    "RequestOptions",
    "RequestTimeoutError",
    "SendRequestError",
    "TransportError",
    "ValidationError",
]
