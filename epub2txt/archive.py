"""Read-only access to the members of an EPUB (ZIP) container."""

import zipfile
import zlib
from pathlib import Path

from .errors import CannotOpenArchiveError, MemberNotFoundError, MemberReadError


def normalize_member_path(path: str) -> str:
    """Collapse Windows-style separators so member names compare equal."""
    return path.replace("\\", "/")


class EpubArchive:
    """An opened EPUB archive.

    Use it as a context manager so the underlying file handle is released
    on every exit path:

        with open_archive("book.epub") as archive:
            data = archive.read_member("META-INF/container.xml")
    """

    def __init__(self, zip_file: zipfile.ZipFile, path: Path):
        self._zip = zip_file
        self.path = path
        self.closed = False

    def namelist(self) -> list[str]:
        """Return every member name, separator-normalized, in archive order."""
        return [normalize_member_path(info.filename) for info in self._zip.infolist()]

    def read_member(self, logical_path: str) -> bytes:
        """Return the raw bytes of the member stored at *logical_path*.

        Matching is exact and case-sensitive once separators on both sides
        have been normalized.

        Raises:
            MemberNotFoundError: If no member matches.
            MemberReadError: If the member cannot be decompressed.
        """
        wanted = normalize_member_path(logical_path)
        for info in self._zip.infolist():
            if normalize_member_path(info.filename) != wanted:
                continue
            try:
                return self._zip.read(info)
            except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
                raise MemberReadError(wanted, str(e)) from e
        raise MemberNotFoundError(wanted)

    def close(self) -> None:
        if not self.closed:
            self._zip.close()
            self.closed = True

    def __enter__(self) -> "EpubArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"EpubArchive(path={str(self.path)!r}, {state})"


def open_archive(path: str | Path) -> EpubArchive:
    """Open *path* as a ZIP container.

    Raises:
        CannotOpenArchiveError: If the file is missing, unreadable or not a ZIP.
    """
    path = Path(path)
    try:
        zip_file = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile) as e:
        raise CannotOpenArchiveError(f"failed to open EPUB file: {e}") from e
    return EpubArchive(zip_file, path)
