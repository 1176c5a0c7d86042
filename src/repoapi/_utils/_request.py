import asyncio
import json
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from enum import Enum
from logging import getLogger
from typing import Any, AsyncIterator, Mapping, Union

import httpx

from ..models.errors import (
    RepoApiError,
    RequestError,
    RequestTimeoutError,
    SendRequestError,
    TransportError,
    ValidationError,
)
from ._interpolate import stringify
from .constants import (
    ACCEPT_VALUE,
    APPLICATION_JSON,
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT_MS,
    HEADER_ACCEPT,
    HEADER_API_VERSION,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    UNKNOWN_ERROR_BODY,
)

QueryParamValue = Union[str, int, float, bool, None]


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


NO_BODY_METHODS = (RequestMethod.GET, RequestMethod.DELETE)


@dataclass
class RequestOptions:
    """Per-request settings carried by an ``ApiRequest``."""

    headers: dict[str, str] = field(default_factory=dict)
    timeout_ms: int | None = None
    body: Any | None = None
    query_params: dict[str, QueryParamValue] = field(default_factory=dict)


def merge_headers(*sources: Mapping[str, str]) -> dict[str, str]:
    """Merge header mappings left to right, matching names case-insensitively."""
    merged: dict[str, str] = {}
    for source in sources:
        for name, value in source.items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


class ApiRequest:
    """Builds and sends a single authenticated JSON API call.

    The url, query parameters and body are call-scoped state: one instance must
    not be used by two concurrent ``send()`` calls.

    Examples:
        ```python
        request = ApiRequest()
        request.set_url("https://gitlab.com/api/v4/users/1/projects")
        request.set_auth_token(token)
        request.set_query_params({"simple": True, "search": None})
        projects = await request.send()
        ```
    """

    def __init__(
        self,
        options: RequestOptions | None = None,
        *,
        method: RequestMethod | str = RequestMethod.GET,
        api_version: str = DEFAULT_API_VERSION,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._logger = getLogger("repoapi")
        self.url: str = ""
        self.method = RequestMethod.GET
        options = options or RequestOptions()
        self.options = replace(
            options,
            headers=dict(options.headers),
            query_params=dict(options.query_params),
        )
        self.api_version = api_version
        self._auth_token = ""
        self._client = client

        self.use_method(method)

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_CONTENT_TYPE: APPLICATION_JSON,
            HEADER_ACCEPT: ACCEPT_VALUE,
            HEADER_API_VERSION: self.api_version,
        }

    @property
    def timeout_ms(self) -> int:
        return self.options.timeout_ms or DEFAULT_TIMEOUT_MS

    def use_method(self, method: RequestMethod | str) -> None:
        name = method.value if isinstance(method, RequestMethod) else str(method)
        try:
            self.method = RequestMethod(name.upper())
        except ValueError as e:
            raise ValidationError(f"Unsupported HTTP method: {method}") from e

    def set_url(self, url: str) -> None:
        if not url or not isinstance(url, str):
            raise ValidationError("URL is required")
        self.url = url

    def set_auth_token(self, token: str) -> None:
        if not token or not isinstance(token, str):
            raise ValidationError("Invalid auth token")
        self._auth_token = token

    def set_query_params(self, params: Mapping[str, QueryParamValue] | None) -> None:
        if not isinstance(params, Mapping):
            return

        filtered = {k: v for k, v in params.items() if v is not None}
        if not filtered:
            return

        self.options.query_params = filtered

    def set_body(self, body: Mapping[str, Any] | list[Any]) -> None:
        if not isinstance(body, (Mapping, list)):
            raise ValidationError("Request body must be a mapping or a list")
        self.options.body = body

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self.options.headers = dict(headers)

    def set_timeout(self, timeout_ms: int) -> None:
        if not isinstance(timeout_ms, int) or isinstance(timeout_ms, bool):
            raise ValidationError("Timeout must be an integer number of milliseconds")
        if timeout_ms <= 0:
            raise ValidationError("Timeout must be positive")
        self.options.timeout_ms = timeout_ms

    def build_url(self) -> str:
        params = {
            key: stringify(value)
            for key, value in self.options.query_params.items()
            if value is not None
        }
        if not params:
            return self.url
        return str(httpx.URL(self.url).copy_merge_params(params))

    def build_headers(self) -> dict[str, str]:
        headers = merge_headers(self.default_headers, self.options.headers)
        if self._auth_token:
            headers = merge_headers(
                headers, {HEADER_AUTHORIZATION: f"Bearer {self._auth_token}"}
            )
        return headers

    def build_body(self) -> str | None:
        if self.method in NO_BODY_METHODS or self.options.body is None:
            return None
        return json.dumps(self.options.body)

    async def send(self) -> Any:
        """Send the request and decode the response.

        Returns:
            Any: The parsed JSON document when the response declares
            ``application/json``, the response text otherwise.

        Raises:
            SendRequestError: For any failure. ``kind`` tells validation, request,
            timeout and transport failures apart.
        """
        try:
            return await self._send()
        except Exception as e:
            cause = e if isinstance(e, RepoApiError) else self._classify(e)
            self._logger.debug(
                f"Request failed: {self.method.value} {self.url}: {cause.message}"
            )
            raise SendRequestError(cause) from e

    async def _send(self) -> Any:
        self._validate_url()

        url = self.build_url()
        timeout = self.timeout_ms / 1000

        self._logger.debug(f"Request: {self.method.value} {url}")

        async with self._client_context(timeout) as client:
            response = await asyncio.wait_for(
                client.request(
                    self.method.value,
                    url,
                    headers=self.build_headers(),
                    content=self.build_body(),
                ),
                timeout=timeout,
            )

        self._logger.debug(f"Response: {response.status_code} {url}")

        if response.status_code >= 400:
            error_body = self._read_error_body(response)
            raise RequestError(
                f"Request failed with status {response.status_code}: {error_body}",
                response.status_code,
                error_body,
            )

        content_type = response.headers.get("content-type", "")
        if APPLICATION_JSON in content_type:
            if not response.content:
                return None
            return response.json()
        return response.text

    def _validate_url(self) -> None:
        if not self.url or not isinstance(self.url, str):
            raise ValidationError("Invalid URL")

    @asynccontextmanager
    async def _client_context(
        self, timeout: float
    ) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), follow_redirects=True
        ) as client:
            yield client

    @staticmethod
    def _read_error_body(response: httpx.Response) -> str:
        try:
            return response.text
        except Exception:
            return UNKNOWN_ERROR_BODY

    def _classify(self, error: Exception) -> RepoApiError:
        if isinstance(error, (asyncio.TimeoutError, httpx.TimeoutException)):
            return RequestTimeoutError(
                f"Request timed out after {self.timeout_ms} ms"
            )
        if isinstance(error, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
            return ValidationError(f"Invalid URL {self.url!r}: {error}")
        if isinstance(error, httpx.HTTPError):
            return TransportError(str(error) or type(error).__name__)
        return RepoApiError(str(error) or type(error).__name__)
