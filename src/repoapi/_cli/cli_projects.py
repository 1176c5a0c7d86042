from typing import Optional

import click

from .._repo_api import RepoApi
from ..models import ProjectQueryParams
from ._utils._common import echo_json, get_repo_api, handle_errors, run


async def _list_projects(
    repo_api: RepoApi, user_id: Optional[int], params: ProjectQueryParams
) -> list:
    if user_id is None:
        user_id = (await repo_api.profile.get_profile())["id"]
    return await repo_api.projects.list_user_projects(user_id, params)


@click.command()
@click.option("--user-id", type=int, help="GitLab user id. Defaults to your own.")
@click.option("--search", help="Only projects matching this text")
@click.option("--owned", is_flag=True, help="Only owned projects")
@click.option("--archived/--no-archived", default=None, help="Filter by archived")
@click.option("--simple", is_flag=True, help="Return fewer fields")
@click.pass_context
@handle_errors
def projects(
    ctx: click.Context,
    user_id: Optional[int] = None,
    search: Optional[str] = None,
    owned: bool = False,
    archived: Optional[bool] = None,
    simple: bool = False,
) -> None:
    """List the projects of a GitLab user."""
    params: ProjectQueryParams = {}
    if search is not None:
        params["search"] = search
    if owned:
        params["owned"] = True
    if archived is not None:
        params["archived"] = archived
    if simple:
        params["simple"] = True

    echo_json(run(_list_projects(get_repo_api(ctx), user_id, params)))
