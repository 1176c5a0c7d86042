from typing import Optional

import click

from .._repo_api import RepoApi
from ..models import IssueQueryParams
from ._utils._common import echo_json, get_repo_api, handle_errors, run


async def _resolve_project_id(repo_api: RepoApi, project_name: str) -> int:
    profile = await repo_api.profile.get_profile()
    matches = await repo_api.projects.find_by_name(profile["id"], project_name)
    if not matches:
        raise click.ClickException(f"Project '{project_name}' not found")
    return matches[0]["id"]


async def _list_issues(
    repo_api: RepoApi,
    project_id: Optional[int],
    project_name: Optional[str],
    params: IssueQueryParams,
) -> list:
    if project_id is None:
        project_id = await _resolve_project_id(repo_api, project_name or "")
    return await repo_api.issues(project_id).list_issues(params)


@click.command()
@click.option("--project-id", type=int, help="Id of the project")
@click.option("--project-name", help="Exact name of one of your projects")
@click.option("--search", help="Only issues matching this text")
@click.option("--issue-type", help="issue, incident, test_case or task")
@click.option("--state", type=click.Choice(["opened", "closed", "all"]))
@click.pass_context
@handle_errors
def issues(
    ctx: click.Context,
    project_id: Optional[int] = None,
    project_name: Optional[str] = None,
    search: Optional[str] = None,
    issue_type: Optional[str] = None,
    state: Optional[str] = None,
) -> None:
    """List the issues of a project."""
    if (project_id is None) == (project_name is None):
        raise click.UsageError("Pass exactly one of --project-id or --project-name")

    params: IssueQueryParams = {}
    if search is not None:
        params["search"] = search
    if issue_type is not None:
        params["issue_type"] = issue_type
    if state is not None:
        params["state"] = state

    echo_json(
        run(_list_issues(get_repo_api(ctx), project_id, project_name, params))
    )
