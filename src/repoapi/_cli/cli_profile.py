import click

from ._utils._common import echo_json, get_repo_api, handle_errors, run


@click.command()
@click.option(
    "--github",
    is_flag=True,
    help="Show the GitHub profile of $GITHUB_TOKEN instead of the GitLab one",
)
@click.pass_context
@handle_errors
def profile(ctx: click.Context, github: bool = False) -> None:
    """Show the profile of the authenticated user."""
    repo_api = get_repo_api(ctx)
    service = repo_api.github_profile if github else repo_api.profile
    echo_json(run(service.get_profile()))
