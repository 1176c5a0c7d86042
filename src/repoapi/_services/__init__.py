from ._api_client import ApiClient, ApiRequester
from .issues_service import IssuesService
from .profile_service import ProfileService
from .projects_service import ProjectsService

__all__ = [
    "ApiClient",
    "ApiRequester",
    "IssuesService",
    "ProfileService",
    "ProjectsService",
]
