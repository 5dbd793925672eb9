"""ABOUTME: CLI commands that print links to the lock and project job views
ABOUTME: Wraps the URL generator so operators can check the configured routes"""

import click

from atlantis_router import bootstrap
from atlantis_router.domain.value_objects import ProjectJobContext
from atlantis_router.service_layer.exceptions import JobURLError


@click.command("lock-url")
@click.argument("lock_id")
@click.pass_context
def lock_url(ctx: click.Context, lock_id: str) -> None:
    """Print the URL of the lock view for LOCK_ID."""
    url_generator = bootstrap.bootstrap(route_config=ctx.obj["route_config"], resolver=ctx.obj.get("resolver"))
    click.echo(url_generator.generate_lock_url(lock_id))


@click.command("job-url")
@click.option("--owner", required=True, help="Owner of the pull request's base repo")
@click.option("--repo", required=True, help="Name of the pull request's base repo")
@click.option("--pull", "pull_number", type=int, required=True, help="Pull request number")
@click.option("--workspace", default="default", show_default=True, help="Terraform workspace")
@click.option("--project-name", default="", help="Project name, takes precedence over --dir")
@click.option("--dir", "repo_rel_dir", default=".", show_default=True, help="Project directory relative to repo root")
@click.pass_context
def job_url(
    ctx: click.Context,
    owner: str,
    repo: str,
    pull_number: int,
    workspace: str,
    project_name: str,
    repo_rel_dir: str,
) -> None:
    """Print the URL of the job view for one project in a pull request."""
    job_ctx = ProjectJobContext.from_project(
        pull_owner=owner,
        pull_repo_name=repo,
        pull_number=pull_number,
        workspace=workspace,
        repo_rel_dir=repo_rel_dir,
        project_name=project_name,
    )
    url_generator = bootstrap.bootstrap(route_config=ctx.obj["route_config"], resolver=ctx.obj.get("resolver"))
    try:
        click.echo(url_generator.generate_project_job_url(job_ctx))
    except JobURLError as e:
        click.echo(click.style(f"✗ Error generating job url: {e}", "red"))
        raise click.Abort() from e
