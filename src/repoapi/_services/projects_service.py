from typing import cast

from ..models import GitlabProject, ProjectQueryParams
from ._api_client import ApiRequester


class ProjectsService:
    """Service for listing GitLab projects."""

    def __init__(self, api: ApiRequester) -> None:
        self._api = api

    async def list_user_projects(
        self,
        user_id: int,
        params: ProjectQueryParams | None = None,
    ) -> list[GitlabProject]:
        """List the projects owned by a user.

        Args:
            user_id (int): The GitLab user id.
            params (ProjectQueryParams | None): Optional filters such as
                ``search`` or ``simple``. ``None`` values are ignored.

        Returns:
            list[GitlabProject]: The projects, as returned by the API.
        """
        url = self._api.build_api_url(
            "api.gitlab.user.project.list", {"userId": user_id}
        )
        return cast(
            list[GitlabProject],
            await self._api.send("GET", url, query_params=params),
        )

    async def list_organization_projects(
        self,
        group_id: int | str,
        params: ProjectQueryParams | None = None,
    ) -> list[GitlabProject]:
        """List the projects of a group (organization)."""
        url = self._api.build_api_url(
            "api.gitlab.organization.project.list", {"groupId": group_id}
        )
        return cast(
            list[GitlabProject],
            await self._api.send("GET", url, query_params=params),
        )

    async def find_by_name(self, user_id: int, name: str) -> list[GitlabProject]:
        """Return the user's projects whose name is exactly ``name``.

        The API ``search`` filter also matches descriptions and partial names,
        so its result is narrowed down here.
        """
        projects = await self.list_user_projects(
            user_id, {"search": name, "simple": True}
        )
        return [project for project in projects if project.get("name") == name]
