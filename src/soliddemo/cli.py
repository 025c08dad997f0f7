"""Root CLI group for soliddemo with global flags and command registration."""

from __future__ import annotations

import click

from soliddemo import __version__
from soliddemo.commands import register_commands
from soliddemo.commands._context import AppContext
from soliddemo.config.settings import DemoSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="soliddemo")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Show computed values and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """soliddemo — the five SOLID principles, one small example each.

    Without a subcommand, runs every demonstration in order.
    """
    settings = DemoSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.obj.emit(ctx.obj.demo.run_all())


register_commands(cli)
