"""Entry lookup inside APK (ZIP) archives."""

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from zipfile import BadZipFile, ZipFile

from apkscope.exceptions import InvalidAPKError, MissingEntryError


class ArchiveReader:
    """Read-only access to the entries of an APK archive.

    Use as a context manager so the underlying ZIP handle is closed::

        with ArchiveReader(apk_path) as archive:
            path = archive.find_entry("AndroidManifest.xml")
    """

    def __init__(self, apk_path: Path):
        self.apk_path = apk_path
        try:
            self._zip = ZipFile(apk_path, "r")
        except BadZipFile as e:
            raise InvalidAPKError(f"Invalid APK (not a valid ZIP file): {e}") from e
        except OSError as e:
            raise InvalidAPKError(f"Failed to read APK: {e}") from e

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def each_entry(self) -> Iterator[str]:
        """Yield entry names in archive order."""
        for info in self._zip.infolist():
            yield info.filename

    def find_entry(self, name: str) -> str | None:
        """Locate an entry by name.

        Looks for an exact match at the archive root first, then for the
        first entry (in archive order) whose path contains `name`.

        Returns:
            The entry path, or None if nothing matches.
        """
        try:
            return self._zip.getinfo(name).filename
        except KeyError:
            pass

        for entry in self.each_entry():
            if name in entry:
                return entry
        return None

    def read(self, entry: str) -> bytes:
        """Read the raw bytes of an entry.

        Raises:
            MissingEntryError: If the entry does not exist.
            InvalidAPKError: If the entry cannot be read.
        """
        try:
            return self._zip.read(entry)
        except KeyError as e:
            raise MissingEntryError(entry) from e
        except (BadZipFile, OSError) as e:
            raise InvalidAPKError(f"Failed to read '{entry}' from APK: {e}") from e
