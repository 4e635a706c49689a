import logging

import typer
from .commands.core import shell, demo, get_config

app = typer.Typer(help="Project Board - track active and finished projects")


@app.callback()
def main() -> None:
    """Configure logging for every command."""
    config = get_config()
    logging.basicConfig(level=config.log_level.upper())


@app.command()
def hello() -> None:
    """Sanity check command."""
    typer.echo("Project Board is alive.")

# Register board commands
app.command()(shell)
app.command()(demo)

# Entry point function for the CLI script
def cli() -> None:
    app()
