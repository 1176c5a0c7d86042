import click
from dotenv import load_dotenv

from .cli_issues import issues
from .cli_profile import profile
from .cli_projects import projects

load_dotenv()


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="REPO_API_CONFIG",
    help="YAML file with the endpoint URL templates",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Query a GitLab/GitHub style REST API from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


cli.add_command(profile)
cli.add_command(projects)
cli.add_command(issues)
