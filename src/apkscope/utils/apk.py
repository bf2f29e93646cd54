"""APK file validation utilities."""

from pathlib import Path

from apkscope.exceptions import InvalidAPKError

# ZIP file magic header (APKs are ZIP files)
ZIP_FILE_HEADER = b"PK\x03\x04"


def validate_apk_path(apk_path: Path) -> None:
    """Validate that an APK file path is usable for extraction.

    Checks that the path exists, is a regular file with an .apk
    extension and starts with the ZIP magic header.

    Args:
        apk_path: Path to the APK file to validate.

    Raises:
        InvalidAPKError: If validation fails.
    """
    if not apk_path.exists():
        raise InvalidAPKError(f"APK not found: {apk_path}")

    if not apk_path.is_file():
        raise InvalidAPKError(f"Not a file: {apk_path}")

    if apk_path.suffix.lower() != ".apk":
        raise InvalidAPKError(
            f"Not an APK file (expected .apk extension): {apk_path}"
        )

    try:
        with apk_path.open("rb") as f:
            header = f.read(len(ZIP_FILE_HEADER))
    except OSError as e:
        raise InvalidAPKError(f"Failed to read APK header: {e}") from e

    if header != ZIP_FILE_HEADER:
        raise InvalidAPKError(
            f"Header mismatch. Expected: {ZIP_FILE_HEADER!r}, got: {header!r}"
        )
