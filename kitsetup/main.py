"""
Starter kit setup — CLI entrypoint.

Usage:
    python -m kitsetup.main --help
    python -m kitsetup.main setup
    python -m kitsetup.main -C path/to/app setup --no-post
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from kitsetup import __version__
from kitsetup.core.observability.logging_config import resolve_level, setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="starter-setup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--project-root",
    "-C",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Application root (default: nearest directory with composer.json or artisan).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    project_root: Path | None,
) -> None:
    """Laravel Starter Kit — interactive optional setup."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["project_root"] = project_root

    setup_logging(level=resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    # Bare invocation runs the setup with default options.
    if ctx.invoked_subcommand is None:
        ctx.invoke(setup)


@cli.command()
@click.option("--no-post", is_flag=True, help="Skip running post-install artisan commands.")
@click.option("--dry-run", is_flag=True, help="Show the commands without executing them.")
@click.option("--yes", "-y", "assume_defaults", is_flag=True, help="Accept the default answer to every prompt.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def setup(
    ctx: click.Context,
    no_post: bool = False,
    dry_run: bool = False,
    assume_defaults: bool = False,
    as_json: bool = False,
) -> None:
    """Choose optional packages, install them and run their setup commands."""
    from kitsetup.adapters.shell.command import ShellCommandAdapter
    from kitsetup.core.use_cases.setup import run_setup
    from kitsetup.ui.cli.prompts import ClickPrompter

    prompter = ClickPrompter(assume_defaults=assume_defaults, err=as_json)
    adapter = ShellCommandAdapter(sink=prompter.output)

    result = run_setup(
        prompter=prompter,
        adapter=adapter,
        project_root=ctx.obj.get("project_root"),
        run_post=not no_post,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if ctx.obj.get("quiet") or result.selection.is_empty:
        return

    click.echo()
    if result.failed_count:
        click.secho(
            f"   ⚠️  {result.failed_count} command(s) failed — fix the cause and re-run the setup.",
            fg="yellow",
            bold=True,
        )
        for receipt in result.failures:
            click.echo(f"     • {' '.join(receipt.metadata.get('argv', [])) or receipt.action_id}")
    else:
        click.secho("   All commands succeeded.", fg="green", bold=True)
    click.echo()


if __name__ == "__main__":
    cli()
