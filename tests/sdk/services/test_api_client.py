import json
from typing import Any

import pytest
from pytest_httpx import HTTPXMock

from repoapi._config import Config
from repoapi._services import ApiClient
from repoapi._utils import RequestMethod, RequestOptions
from repoapi.models.errors import (
    AuthTokenMissingError,
    ConfigurationError,
    ErrorKind,
    SendRequestError,
    ValidationError,
)


class TestApiClient:
    class TestAuthToken:
        def test_missing_token_fails_fast(self, config: Config):
            with pytest.raises(AuthTokenMissingError, match="GITLAB_PAT env not set"):
                ApiClient(config)

        def test_empty_token_fails_fast(
            self, config: Config, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_PAT", "")

            with pytest.raises(AuthTokenMissingError) as exc_info:
                ApiClient(config)

            assert exc_info.value.kind is ErrorKind.CONFIGURATION

        def test_custom_env_key(
            self, config: Config, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("MY_TOKEN", "abc")

            client = ApiClient(config, auth_token_env_key="MY_TOKEN")

            assert client.request.build_headers()["Authorization"] == "Bearer abc"

        def test_custom_env_key_missing(
            self, config: Config, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_PAT", "abc")

            with pytest.raises(AuthTokenMissingError, match="MY_TOKEN"):
                ApiClient(config, auth_token_env_key="MY_TOKEN")

    class TestBuildApiUrl:
        def test_without_replacements_returns_template(
            self, api_client: ApiClient, base_url: str
        ):
            assert api_client.build_api_url("api.gitlab.user.me") == f"{base_url}/user"
            assert (
                api_client.build_api_url("api.gitlab.user.project.list")
                == f"{base_url}/users/{{userId}}/projects"
            )
            assert (
                api_client.build_api_url("api.gitlab.user.project.list", {})
                == f"{base_url}/users/{{userId}}/projects"
            )

        def test_with_replacements_interpolates(
            self, api_client: ApiClient, base_url: str
        ):
            url = api_client.build_api_url(
                "api.gitlab.project.issue.detail", {"projectId": 7, "issueId": 3}
            )

            assert url == f"{base_url}/projects/7/issues/3"

        @pytest.mark.parametrize(
            "key", ["api.gitlab.user.unknown", "api.gitlab.user", "api.gitlab.nope.x"]
        )
        def test_key_not_resolving_to_string(self, api_client: ApiClient, key: str):
            with pytest.raises(ConfigurationError, match=key):
                api_client.build_api_url(key)

        @pytest.mark.parametrize("key", ["", None])
        def test_empty_key(self, api_client: ApiClient, key: Any):
            with pytest.raises(ConfigurationError, match="config key is required"):
                api_client.build_api_url(key)

        def test_non_string_template(
            self, secret: str, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_PAT", secret)
            client = ApiClient(Config(endpoints={"api": {"port": 8080}}))

            with pytest.raises(ConfigurationError, match="api.port"):
                client.build_api_url("api.port")

    class TestRequests:
        def test_request_is_preauthenticated_and_reused(
            self, api_client: ApiClient, secret: str
        ):
            request = api_client.request

            assert request is api_client.request
            assert request.build_headers()["Authorization"] == f"Bearer {secret}"

        def test_new_request_uses_config(
            self, secret: str, endpoints: dict, monkeypatch: pytest.MonkeyPatch
        ):
            monkeypatch.setenv("GITLAB_PAT", secret)
            client = ApiClient(
                Config(endpoints=endpoints, api_version="v9", timeout_ms=1500)
            )

            request = client.new_request(RequestMethod.DELETE)

            assert request is not client.new_request()
            assert request.method is RequestMethod.DELETE
            assert request.timeout_ms == 1500
            assert request.build_headers()["X-GitHub-Api-Version"] == "v9"

        def test_new_requests_do_not_share_options(self, api_client: ApiClient):
            options = RequestOptions(headers={"X-Trace": "1"})

            first = api_client.new_request(options=options)
            second = api_client.new_request(options=options)
            first.set_query_params({"search": "private"})
            first.set_body({"title": "draft"})
            first.set_headers({"X-Trace": "2"})

            assert second.options.query_params == {}
            assert second.options.body is None
            assert second.options.headers == {"X-Trace": "1"}
            assert options == RequestOptions(headers={"X-Trace": "1"})
            assert second.timeout_ms == api_client.config.timeout_ms

        @pytest.mark.asyncio
        async def test_request_with_set_url_and_send(
            self, httpx_mock: HTTPXMock, api_client: ApiClient, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/user", json={"id": 1})

            api_client.request.set_url(api_client.build_api_url("api.gitlab.user.me"))

            assert await api_client.request.send() == {"id": 1}

        @pytest.mark.asyncio
        async def test_send(
            self,
            httpx_mock: HTTPXMock,
            api_client: ApiClient,
            base_url: str,
            secret: str,
        ):
            url = f"{base_url}/projects/7/issues"
            httpx_mock.add_response(
                url=f"{url}?confidential=false", method="POST", json={"iid": 1}
            )

            result = await api_client.send(
                "POST",
                url,
                query_params={"confidential": False, "skip": None},
                body={"title": "Bug"},
                headers={"X-Request-Id": "abc"},
            )

            assert result == {"iid": 1}

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.headers["Authorization"] == f"Bearer {secret}"
            assert sent_request.headers["X-Request-Id"] == "abc"
            assert json.loads(sent_request.content) == {"title": "Bug"}

        @pytest.mark.asyncio
        async def test_send_rejects_empty_url(self, api_client: ApiClient):
            with pytest.raises(ValidationError):
                await api_client.send("GET", "")

        @pytest.mark.asyncio
        async def test_send_wraps_failures(
            self, httpx_mock: HTTPXMock, api_client: ApiClient, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/user", status_code=401, text="401 Unauthorized"
            )

            with pytest.raises(SendRequestError) as exc_info:
                await api_client.send("GET", f"{base_url}/user")

            assert exc_info.value.kind is ErrorKind.REQUEST
            assert exc_info.value.status_code == 401
