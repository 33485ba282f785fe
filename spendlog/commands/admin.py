"""Admin commands for setting up configuration."""

import sys
from pathlib import Path

from rich.console import Console

from spendlog.config import create_default_config, get_config_path

console = Console()


def init_command(force: bool = False, config_path: str | None = None) -> None:
    """Write the default spendlog configuration file."""
    path = Path(config_path).expanduser() if config_path else get_config_path()

    # Guard: refuse to overwrite without force flag
    if path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {path}")
        console.print("\n[yellow]Use 'spendlog init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {path}...[/cyan]")
        create_default_config(path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Config: {path}[/dim]")
