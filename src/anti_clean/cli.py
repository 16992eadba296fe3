"""
Command line host for the clean operation.
"""
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config.configuration import CleanConfiguration, ensure_clean_config
from .config.loader import load_config
from .error.exceptions import ConfigurationError
from .execution.runner import ScriptRunner
from .scripts import ANTI_CLEAN_SCRIPT
from .utils.logging import configure_logging
from .utils.platform_utils import get_platform_info

app = typer.Typer(
    name="anti-clean",
    help="Remove Antigravity's cached conversation and session data",
    no_args_is_help=True
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("anti-clean")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"anti-clean {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Load configuration and set up logging for every command."""
    overrides = {}
    if log_level:
        overrides["log_level"] = log_level
    if json_logs:
        overrides["structured_logging"] = True

    try:
        config = load_config(config_path)
        if overrides:
            config = ensure_clean_config({**config.model_dump(), **overrides})
    except ConfigurationError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {e.message}", highlight=False)
        raise typer.Exit(code=2)

    configure_logging(config)
    ctx.obj = config


@app.command("clean")
def clean(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Also delete conversation history; run while Antigravity is open"),
):
    """Run the clean script and print its report."""
    config: CleanConfiguration = ctx.obj
    logger.info("Running clean script" + (" with force" if force else ""))

    result = ScriptRunner(config).run_clean(force)

    if result.success:
        console.print(result.message or "Clean finished with no output", style="green", markup=False, highlight=False)
        return

    err_console.print(f"Clean failed ({result.kind})", style="bold red", markup=False, highlight=False)
    if result.message:
        err_console.print(result.message, style="red", markup=False, highlight=False)
    raise typer.Exit(code=1)


@app.command("script")
def script():
    """Print the embedded clean script."""
    typer.echo(ANTI_CLEAN_SCRIPT, nl=False)


@app.command("info")
def info(ctx: typer.Context):
    """Show platform support and where the script would be written."""
    config: CleanConfiguration = ctx.obj
    platform_info = get_platform_info()
    runner = ScriptRunner(config)

    table = Table(title="anti-clean")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Platform", f"{platform_info['platform']} ({platform_info['platform_release']})")
    table.add_row("Supported", "yes" if platform_info["supported"] else "no")
    table.add_row("Interpreter", config.interpreter)
    table.add_row("Script path", str(runner.script_path()))
    table.add_row("Force flag", config.force_flag)
    console.print(table)


if __name__ == "__main__":
    app()
