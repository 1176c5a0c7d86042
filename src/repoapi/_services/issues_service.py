from typing import Any, cast

from ..models import GitlabIssue, IssueQueryParams
from ._api_client import ApiRequester


class IssuesService:
    """Service for the issues of a single GitLab project.

    Args:
        api (ApiRequester): The client used to build URLs and send calls.
        project_id (int): The id of the project the issues belong to.
    """

    def __init__(self, api: ApiRequester, project_id: int) -> None:
        self._api = api
        self.project_id = project_id

    async def list_issues(
        self, params: IssueQueryParams | None = None
    ) -> list[GitlabIssue]:
        """List the issues of the project.

        Args:
            params (IssueQueryParams | None): Optional filters such as
                ``search``, ``issue_type`` or ``state``.

        Returns:
            list[GitlabIssue]: The issues, as returned by the API.
        """
        return cast(
            list[GitlabIssue],
            await self._api.send("GET", self._issues_url(), query_params=params),
        )

    async def retrieve(self, issue_id: int) -> GitlabIssue:
        """Retrieve one issue by its project-scoped id (``iid``)."""
        url = self._api.build_api_url(
            "api.gitlab.project.issue.detail",
            {"projectId": self.project_id, "issueId": issue_id},
        )
        return cast(GitlabIssue, await self._api.send("GET", url))

    async def create(self, title: str, **fields: Any) -> GitlabIssue:
        """Create an issue.

        Args:
            title (str): The issue title.
            **fields: Other issue attributes accepted by the API, e.g.
                ``description`` or ``labels``.
        """
        body = {"title": title, **fields}
        return cast(
            GitlabIssue,
            await self._api.send("POST", self._issues_url(), body=body),
        )

    def _issues_url(self) -> str:
        return self._api.build_api_url(
            "api.gitlab.project.issue.list", {"projectId": self.project_id}
        )
