"""Rich console helpers for terminal output."""

from typing import Any

from rich.console import Console as RichConsole
from rich.table import Table

from apkscope.models.certificate import CertificateInfo
from apkscope.models.manifest import ManifestRecord


class Console:
    """Wrapper around rich.Console that stays quiet in JSON mode."""

    def __init__(self) -> None:
        self._console = RichConsole()
        self._error_console = RichConsole(stderr=True)
        self._json_mode = False

    def set_json_mode(self, enabled: bool) -> None:
        """Enable or disable JSON mode (suppresses rich output)."""
        self._json_mode = enabled

    @property
    def json_mode(self) -> bool:
        return self._json_mode

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (suppressed in JSON mode)."""
        if not self._json_mode:
            self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print an error message in red.

        Errors go to stderr and are shown in JSON mode too.
        """
        self._error_console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        self.print(f"[yellow]⚠[/yellow] {message}")


def _key_value_table(title: str, rows: dict[str, Any]) -> Table:
    table = Table(title=title, title_justify="left", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in rows.items():
        table.add_row(key, "-" if value is None else str(value))
    return table


def render_manifest(record: ManifestRecord) -> None:
    """Print a manifest record as rich tables."""
    console.print(f"\n[bold]Manifest:[/bold] {record.manifest_path}")
    console.print(_key_value_table("Application", record.application.to_report()))
    console.print(_key_value_table("SDK", record.sdk.model_dump()))

    if record.permissions:
        console.print(f"\n[bold]Permissions ({len(record.permissions)}):[/bold]")
        for permission in record.permissions:
            console.print(f"  {permission}")

    if record.intents:
        table = Table(title="Intent filters", title_justify="left")
        table.add_column("#", style="cyan", width=4)
        table.add_column("Actions", style="green")
        table.add_column("Category")
        for i, intent in enumerate(record.intents, 1):
            table.add_row(
                str(i),
                "\n".join(intent.actions or []),
                intent.category or "",
            )
        console.print(table)

    if record.features:
        console.print(f"\n[bold]Features ({len(record.features)}):[/bold]")
        for feature in record.features:
            console.print("  " + ", ".join(f"{k}={v}" for k, v in feature.items()))

    if record.supported_screens:
        screens = ", ".join(record.supported_screens)
        console.print(f"\n[bold]Supported screens:[/bold] {screens}")

    console.print()


def render_certificate(info: CertificateInfo) -> None:
    """Print certificate details, or a warning when there are none."""
    if info.is_empty:
        console.print_warning("No signing certificate found.")
        return

    console.print(_key_value_table("Signing certificate", info.model_dump()))


# Global console instance
console = Console()
