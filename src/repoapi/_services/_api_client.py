from dataclasses import replace
from logging import getLogger
from os import environ as env
from typing import Any, Mapping, Protocol

import httpx

from .._config import Config
from .._utils import ApiRequest, RequestMethod, RequestOptions, interpolate
from .._utils._request import QueryParamValue
from .._utils.constants import ENV_GITLAB_PAT
from ..models.errors import AuthTokenMissingError, ConfigurationError


class ApiRequester(Protocol):
    """What a resource service needs from the client: build a URL, send a call."""

    def build_api_url(
        self,
        config_key: str,
        path_replacements: Mapping[str, Any] | None = None,
    ) -> str: ...

    async def send(
        self,
        method: RequestMethod | str,
        url: str,
        *,
        query_params: Mapping[str, QueryParamValue] | None = None,
        body: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any: ...


class ApiClient:
    """Authenticated access to the endpoints declared in the configuration.

    The bearer token is read from the environment when the client is created;
    a missing token fails immediately.

    Args:
        config (Config): The loaded configuration handle.
        auth_token_env_key (str): Environment variable holding the token.
        client (httpx.AsyncClient | None): Optional shared HTTP client. When
            omitted every call opens and closes its own client.
    """

    def __init__(
        self,
        config: Config,
        *,
        auth_token_env_key: str = ENV_GITLAB_PAT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._logger = getLogger("repoapi")
        self._config = config
        self._auth_token_env_key = auth_token_env_key
        self._client = client

        self._auth_token = self._read_auth_token()
        self._request: ApiRequest | None = None

    def _read_auth_token(self) -> str:
        token = env.get(self._auth_token_env_key)
        if not token or not isinstance(token, str):
            raise AuthTokenMissingError(self._auth_token_env_key)
        return token

    @property
    def config(self) -> Config:
        return self._config

    @property
    def request(self) -> ApiRequest:
        """Pre-authenticated executor kept for the lifetime of this client.

        Its url, query parameters and body are overwritten by each caller, so it
        must not be shared by concurrent calls. Use ``send`` for that.
        """
        if self._request is None:
            self._request = self.new_request()
        return self._request

    def new_request(
        self,
        method: RequestMethod | str = RequestMethod.GET,
        *,
        options: RequestOptions | None = None,
    ) -> ApiRequest:
        options = options or RequestOptions()
        if options.timeout_ms is None:
            options = replace(options, timeout_ms=self._config.timeout_ms)

        request = ApiRequest(
            options,
            method=method,
            api_version=self._config.api_version,
            client=self._client,
        )
        request.set_auth_token(self._auth_token)
        return request

    def build_api_url(
        self,
        config_key: str,
        path_replacements: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolve a URL template from the configuration and fill its placeholders.

        Args:
            config_key (str): Dotted key of the template, e.g. ``api.gitlab.user.me``.
            path_replacements (Mapping[str, Any] | None): Values for the
                ``{placeholder}`` tokens of the template.

        Returns:
            str: The URL, verbatim when no replacements are given.

        Raises:
            ConfigurationError: The key is empty or does not resolve to a string.
        """
        if not config_key or not isinstance(config_key, str):
            raise ConfigurationError("API config key is required")

        template = self._config.resolve(config_key)
        if not template or not isinstance(template, str):
            raise ConfigurationError(
                f"API URL not found or invalid for config key: {config_key}"
            )

        if not path_replacements:
            return template
        return interpolate(template, path_replacements)

    async def send(
        self,
        method: RequestMethod | str,
        url: str,
        *,
        query_params: Mapping[str, QueryParamValue] | None = None,
        body: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one call on a fresh executor.

        Raises:
            ValidationError: The url or body is invalid.
            SendRequestError: The call itself failed.
        """
        request = self.new_request(method)
        request.set_url(url)
        request.set_query_params(query_params)
        if body is not None:
            request.set_body(body)
        if headers:
            request.set_headers(headers)
        return await request.send()
