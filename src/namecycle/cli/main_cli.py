"""
Top-level CLI that aggregates sub-apps and shows the active configuration.
"""

import logging
import typer
from rich.console import Console
from rich.table import Table

from namecycle.core.config import settings
from namecycle.cli.cycle_cli import cycle_app


main_app = typer.Typer(help="namecycle CLI")
console = Console()

# Add subcommands as Typer sub-apps:
main_app.add_typer(cycle_app, name="docs")


@main_app.command("config")
def config_cmd():
    """
    Show the settings in effect (environment variables prefixed NAMECYCLE_).
    """
    table = Table(title="namecycle settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


def main():
    logging.basicConfig(
        level=settings.numeric_log_level(),
        format="%(levelname)s %(name)s - %(message)s"
    )
    main_app()

if __name__ == "__main__":
    main()
