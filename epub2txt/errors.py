"""Exceptions raised while converting an EPUB archive to text.

Two families exist:

- ``EpubConversionError`` and its subclasses are fatal. The conversion is
  aborted and nothing is written to the output.
- ``ArchiveMemberError`` and its subclasses concern a single member. The
  converter reports them as warnings and moves on to the next resource.
"""


class EpubConversionError(Exception):
    """Base class for errors that abort a conversion."""


class CannotOpenArchiveError(EpubConversionError):
    """The input file is missing or is not a readable ZIP container."""


class MalformedContainerError(EpubConversionError):
    """``META-INF/container.xml`` is absent or not well-formed XML."""


class NoRootFileError(EpubConversionError):
    """The container declares no ``rootfile`` entry."""


class MalformedPackageError(EpubConversionError):
    """The package document (OPF) is absent or not well-formed XML."""


class ArchiveMemberError(Exception):
    """Base class for errors reading one member of an open archive."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class MemberNotFoundError(ArchiveMemberError):
    """No member matches the requested path."""

    def __init__(self, path: str):
        super().__init__(path, "file not found")


class MemberReadError(ArchiveMemberError):
    """The member exists but its data could not be decompressed."""
