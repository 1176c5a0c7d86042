import os
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ._utils.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_CONFIG_FILE,
    DEFAULT_TIMEOUT_MS,
    ENV_CONFIG_FILE,
    ENV_GITHUB_API_VERSION,
)
from .models.errors import ConfigurationError


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class Config(BaseModel):
    """Read-only configuration handle.

    ``endpoints`` holds the parsed YAML tree, copied into read-only mappings and
    tuples. It is loaded once at startup and passed explicitly to every
    component that needs it.
    """

    model_config = ConfigDict(frozen=True)

    endpoints: Mapping[str, Any]
    api_version: str = DEFAULT_API_VERSION
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    @field_validator("endpoints")
    @classmethod
    def freeze_endpoints(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(value)

    def resolve(self, key: str) -> Any:
        """Look up a dotted key such as ``api.gitlab.user.me``.

        Returns ``None`` when any segment is missing or when an intermediate
        value is not a mapping.
        """
        if not key or not isinstance(key, str):
            raise ConfigurationError("Config key must be a non-empty string")

        keys = [k for k in key.split(".") if k]
        if not keys:
            raise ConfigurationError("Config key cannot be empty")

        current: Any = self.endpoints
        for k in keys:
            if not isinstance(current, Mapping):
                return None
            current = current.get(k)
            if current is None:
                return None
        return current


def default_config_path() -> Path:
    env_path = os.environ.get(ENV_CONFIG_FILE)
    if env_path:
        return Path(env_path)
    return Path(str(resources.files("repoapi") / "config" / DEFAULT_CONFIG_FILE))


def load_config(
    path: str | Path | None = None,
    *,
    api_version: str | None = None,
    timeout_ms: int | None = None,
) -> Config:
    """Load the endpoint configuration from a YAML file.

    Args:
        path: The YAML file. Defaults to ``$REPO_API_CONFIG`` or the packaged
            ``repository-api.yaml``.
        api_version: Value of the API version header. Defaults to
            ``$GITHUB_API_VERSION`` or ``2022-11-28``.
        timeout_ms: Default request timeout in milliseconds.

    Raises:
        ConfigurationError: The file cannot be read or parsed, its root is not
            a mapping, or a value such as ``timeout_ms`` is out of range.
    """
    config_path = Path(path) if path is not None else default_config_path()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Failed to load configuration: "
            f"Invalid YAML configuration in {config_path}: root must be a mapping"
        )

    try:
        return Config(
            endpoints=data,
            api_version=api_version
            or os.environ.get(ENV_GITHUB_API_VERSION)
            or DEFAULT_API_VERSION,
            timeout_ms=timeout_ms if timeout_ms is not None else DEFAULT_TIMEOUT_MS,
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e
