"""
epub2txt - Extract the plain text of EPUB books in reading order.

This package resolves an EPUB's spine through its container and package
documents, strips the markup of each resource and concatenates the result.
"""

from .archive import EpubArchive, open_archive
from .config import Config
from .converter import ConverterConfig, convert_epub_to_text
from .descriptor import (
    ContainerDescriptor,
    ManifestItem,
    PackageDescriptor,
    ResolvedContent,
    resolve_content_paths,
)
from .errors import (
    ArchiveMemberError,
    CannotOpenArchiveError,
    EpubConversionError,
    MalformedContainerError,
    MalformedPackageError,
    MemberNotFoundError,
    MemberReadError,
    NoRootFileError,
)
from .markup_stripper import MarkupStripper, MarkupStripperConfig, extract_text_from_html
from .stripper import Stripper, StripperConfig

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "convert_epub_to_text",
    "ConverterConfig",
    "Config",
    # Archive access
    "EpubArchive",
    "open_archive",
    # Descriptors
    "ContainerDescriptor",
    "ManifestItem",
    "PackageDescriptor",
    "ResolvedContent",
    "resolve_content_paths",
    # Markup stripping
    "Stripper",
    "StripperConfig",
    "MarkupStripper",
    "MarkupStripperConfig",
    "extract_text_from_html",
    # Errors
    "EpubConversionError",
    "CannotOpenArchiveError",
    "MalformedContainerError",
    "NoRootFileError",
    "MalformedPackageError",
    "ArchiveMemberError",
    "MemberNotFoundError",
    "MemberReadError",
]
