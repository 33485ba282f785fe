"""CLI entry point for spendlog."""

import typer

from spendlog.commands.admin import init_command
from spendlog.commands.shell import shell_command

app = typer.Typer(
    name="spendlog",
    help="Smart Student Expense Minimizer - track spending and find the cheapest store",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, "--log-level", help="Logging level (e.g. DEBUG, INFO)"),
) -> None:
    """Smart Student Expense Minimizer - track spending and find the cheapest store."""
    ctx.obj = {"log_level": log_level}


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config: str = typer.Option(None, "--config", "-c", help="Config file path (default: ~/.config/spendlog/config.toml)"),
) -> None:
    """Create the spendlog configuration file."""
    init_command(force, config)


@app.command()
def shell(
    ctx: typer.Context,
    config: str = typer.Option(None, "--config", "-c", help="Config file path (default: ~/.config/spendlog/config.toml)"),
) -> None:
    """Start an interactive session for expenses and price comparison."""
    log_level = ctx.obj.get("log_level") if ctx.obj else None
    shell_command(config, log_level)


if __name__ == "__main__":
    app()
