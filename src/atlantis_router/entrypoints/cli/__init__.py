"""ABOUTME: Main CLI entry point using Click for generating Atlantis links
ABOUTME: Loads route configuration and logging, then dispatches to link subcommands"""

import click

import atlantis_router.logging
from atlantis_router import config


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Atlantis link generation CLI."""
    # Ensure context object exists
    ctx.ensure_object(dict)

    try:
        atlantis_router.logging.logging_setup(config.get_log_level())

        # Tests may provide their own route config in the context
        if "route_config" not in ctx.obj:
            ctx.obj["route_config"] = config.get_route_config()
    except config.InvalidConfig as e:
        click.echo(click.style(f"✗ Invalid configuration: {e}", "red"))
        raise click.Abort() from e


@cli.command()
def version() -> None:
    """Show atlantis-router version."""
    click.echo("atlantis-router 0.1.0")


# Import subcommands to register them
from .links import job_url, lock_url  # noqa: E402

cli.add_command(lock_url)
cli.add_command(job_url)


if __name__ == "__main__":
    cli()
