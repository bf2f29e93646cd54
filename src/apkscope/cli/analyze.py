"""CLI commands for APK metadata extraction."""

import json
from pathlib import Path

import typer

from apkscope.core.manifest import ManifestExtractor
from apkscope.core.signing import CertificateInspector
from apkscope.exceptions import ApkScopeError
from apkscope.utils.output import console, render_certificate, render_manifest

app = typer.Typer(no_args_is_help=True)


@app.command("manifest")
def show_manifest(
    apk_path: Path = typer.Argument(
        ...,
        help="Path to the APK file to analyze.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Extract manifest metadata from an APK.

    Reports application attributes, intent filters, SDK bounds,
    permissions, features and supported screens.
    """
    console.set_json_mode(json_output)

    try:
        record = ManifestExtractor(apk_path).extract()
    except ApkScopeError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(record.to_report(), indent=2))
        return

    render_manifest(record)


@app.command("cert")
def show_certificate(
    apk_path: Path = typer.Argument(
        ...,
        help="Path to the APK file to analyze.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Show the subject and validity of the APK's signing certificate.

    Requires keytool and openssl. An unsigned APK is not an error.
    """
    console.set_json_mode(json_output)

    try:
        info = CertificateInspector(apk_path).inspect()
    except ApkScopeError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(info.model_dump(), indent=2))
        return

    render_certificate(info)
