import sys
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

# Ensure local source package (src/repoapi) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from repoapi._config import Config  # noqa: E402
from repoapi._services import ApiClient  # noqa: E402


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("GITLAB_PAT", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_VERSION", raising=False)
    monkeypatch.delenv("REPO_API_CONFIG", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://gitlab.example.com/api/v4"


@pytest.fixture
def secret() -> str:
    return "glpat-secret_access_token"


@pytest.fixture
def endpoints(base_url: str) -> dict[str, Any]:
    return {
        "api": {
            "gitlab": {
                "user": {
                    "me": f"{base_url}/user",
                    "project": {"list": f"{base_url}/users/{{userId}}/projects"},
                },
                "project": {
                    "issue": {
                        "list": f"{base_url}/projects/{{projectId}}/issues",
                        "detail": f"{base_url}/projects/{{projectId}}/issues/{{issueId}}",
                    }
                },
                "organization": {
                    "project": {"list": f"{base_url}/groups/{{groupId}}/projects"}
                },
            },
            "github": {"user": {"me": "https://api.github.example.com/user"}},
        }
    }


@pytest.fixture
def config(endpoints: dict[str, Any]) -> Config:
    return Config(endpoints=endpoints)


@pytest.fixture
def api_client(
    config: Config, secret: str, monkeypatch: pytest.MonkeyPatch
) -> ApiClient:
    monkeypatch.setenv("GITLAB_PAT", secret)
    return ApiClient(config)


@pytest.fixture
def config_file(tmp_path: Path, base_url: str) -> Path:
    path = tmp_path / "repository-api.yaml"
    path.write_text(
        "api:\n"
        "  gitlab:\n"
        "    user:\n"
        f"      me: {base_url}/user\n"
        "      project:\n"
        f"        list: {base_url}/users/{{userId}}/projects\n"
        "    project:\n"
        "      issue:\n"
        f"        list: {base_url}/projects/{{projectId}}/issues\n",
        encoding="utf-8",
    )
    return path
