import asyncio
import functools
import json
from typing import Any, Callable, Coroutine, TypeVar

import click

from ..._repo_api import RepoApi
from ...models.errors import RepoApiError

T = TypeVar("T")


def get_repo_api(ctx: click.Context) -> RepoApi:
    """Create the ``RepoApi`` on first use so ``--help`` works without a token."""
    obj = ctx.ensure_object(dict)
    if "repo_api" not in obj:
        obj["repo_api"] = RepoApi(
            config_path=obj.get("config_path"), debug=obj.get("verbose", False)
        )
    return obj["repo_api"]


def run(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)


def echo_json(data: Any) -> None:
    if isinstance(data, str):
        click.echo(data)
        return
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def handle_errors(function: Callable[..., Any]) -> Callable[..., Any]:
    """Print library errors as ``Error: <message>`` and exit with status 1."""

    @functools.wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except RepoApiError as e:
            click.echo(f"Error: {e.message}", err=True)
            click.get_current_context().exit(1)

    return wrapper
