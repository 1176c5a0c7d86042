from typing import cast

from ..models import GitlabProfile
from ._api_client import ApiRequester


class ProfileService:
    """Service for the profile of the authenticated user.

    Args:
        api (ApiRequester): The client used to build URLs and send calls.
        config_key (str): Config key of the profile endpoint. Use
            ``api.github.user.me`` with a GitHub token for the GitHub profile.
    """

    def __init__(
        self, api: ApiRequester, config_key: str = "api.gitlab.user.me"
    ) -> None:
        self._api = api
        self._config_key = config_key

    async def get_profile(self) -> GitlabProfile:
        """Retrieve the profile the token belongs to.

        Examples:
            ```python
            from repoapi import RepoApi

            profile = await RepoApi().profile.get_profile()
            print(profile["username"])
            ```
        """
        url = self._api.build_api_url(self._config_key)
        return cast(GitlabProfile, await self._api.send("GET", url))
