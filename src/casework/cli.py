"""Root CLI group for casework with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from casework import __version__
from casework.commands import register_commands
from casework.commands._context import AppContext
from casework.config.settings import CaseworkSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="casework")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--content-dir",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Override the case study directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    content_dir: Path | None,
) -> None:
    """casework — case study content tools for the Pinnacle site."""
    settings = CaseworkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        content_dir=content_dir,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
