from logging import getLogger
from pathlib import Path

from dotenv import load_dotenv

from ._config import Config, load_config
from ._services import ApiClient, IssuesService, ProfileService, ProjectsService
from ._utils import setup_logging
from ._utils.constants import ENV_GITHUB_TOKEN, ENV_GITLAB_PAT

load_dotenv()


class RepoApi:
    """Entry point of the library.

    Loads the configuration once and hands the same read-only handle to every
    service it creates.

    Examples:
        ```python
        import asyncio

        from repoapi import RepoApi

        api = RepoApi()
        profile = asyncio.run(api.profile.get_profile())
        issues = asyncio.run(api.issues(42).list_issues({"search": "login"}))
        ```
    """

    def __init__(
        self,
        *,
        config: Config | None = None,
        config_path: str | Path | None = None,
        auth_token_env_key: str = ENV_GITLAB_PAT,
        debug: bool = False,
    ) -> None:
        setup_logging(debug)
        log = getLogger("repoapi")

        self._config = config or load_config(config_path)
        log.debug(
            f"CONFIG: api_version={self._config.api_version} "
            f"timeout_ms={self._config.timeout_ms}"
        )

        self._api = ApiClient(self._config, auth_token_env_key=auth_token_env_key)
        self._github_api: ApiClient | None = None

    @property
    def config(self) -> Config:
        return self._config

    @property
    def api(self) -> ApiClient:
        return self._api

    @property
    def profile(self) -> ProfileService:
        return ProfileService(self._api)

    @property
    def projects(self) -> ProjectsService:
        return ProjectsService(self._api)

    def issues(self, project_id: int) -> IssuesService:
        return IssuesService(self._api, project_id)

    @property
    def github_profile(self) -> ProfileService:
        """Profile of the GitHub user owning ``$GITHUB_TOKEN``."""
        if self._github_api is None:
            self._github_api = ApiClient(
                self._config, auth_token_env_key=ENV_GITHUB_TOKEN
            )
        return ProfileService(self._github_api, config_key="api.github.user.me")
