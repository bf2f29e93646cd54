"""Root CLI application for apkscope."""

import typer

from apkscope import __version__
from apkscope.cli import analyze
from apkscope.utils.logging import setup_logging

app = typer.Typer(
    name="apkscope",
    help="Extract and normalize manifest and signing metadata from APKs.",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(analyze.app, name="analyze", help="Extract APK metadata")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"apkscope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """apkscope - APK manifest and certificate inspection."""
    setup_logging("DEBUG" if verbose else "WARNING")


if __name__ == "__main__":
    app()
