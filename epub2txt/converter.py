"""EPUB to plain-text conversion pipeline."""

import codecs
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .archive import open_archive
from .config import Config
from .descriptor import resolve_content_paths
from .errors import ArchiveMemberError
from .markup_stripper import MarkupStripper, MarkupStripperConfig
from .stripper import Stripper

RESOURCE_SEPARATOR = "\n\n"


@dataclass
class ConverterConfig(Config):
    """
    Configuration for a conversion, as read from the `--config` JSON file.

    Attributes:
        encoding: Encoding used to decode spine resources. Default: "utf-8".
        stripper: Settings for the markup stripper (see MarkupStripperConfig).
    """

    encoding: str = "utf-8"
    stripper: MarkupStripperConfig = field(default_factory=MarkupStripperConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.encoding, str):
            raise ValueError(f"encoding must be a string, got {self.encoding!r}")
        codecs.lookup(self.encoding)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ConverterConfig":
        config_dict = dict(config_dict)
        stripper = config_dict.pop("stripper", {})
        if not isinstance(stripper, dict):
            raise ValueError(f"stripper must be an object, got {stripper!r}")
        return cls(stripper=MarkupStripperConfig.from_dict(stripper), **config_dict)

    def create_stripper(self) -> MarkupStripper:
        return MarkupStripper(self.stripper)


def convert_epub_to_text(
    epub_path: str | Path,
    stripper: Stripper | None = None,
    encoding: str = "utf-8",
    verbose: bool = False,
) -> str:
    """Extract the text of an EPUB in reading order.

    Each spine resource is read from the archive, decoded and stripped of
    markup. Non-empty results are concatenated, each followed by a blank
    line. A resource that cannot be read is reported on stderr and skipped.

    Args:
        epub_path: Path to the EPUB file
        stripper: Stripper applied to each resource (default: MarkupStripper)
        encoding: Encoding used to decode resources; undecodable bytes are replaced
        verbose: Whether to print progress information to stderr

    Returns:
        The extracted text

    Raises:
        EpubConversionError: If the archive, its container.xml or its
            package document cannot be opened or parsed
    """
    stripper = stripper or MarkupStripper()
    parts: list[str] = []

    with open_archive(epub_path) as archive:
        resolved = resolve_content_paths(archive)

        if verbose:
            print(f"Archive: {epub_path} ({len(archive.namelist())} members)", file=sys.stderr)
            print(f"Package document: {resolved.content_path}", file=sys.stderr)
            print(f"Found {len(resolved.paths)} spine resources", file=sys.stderr)

        for member_path in resolved.paths:
            try:
                raw = archive.read_member(member_path)
            except ArchiveMemberError as e:
                print(f"Warning: failed to read {member_path}: {e}", file=sys.stderr)
                continue

            text = stripper.strip(raw.decode(encoding, errors="replace"))
            if not text:
                if verbose:
                    print(f"  Skipping {member_path} (no text)", file=sys.stderr)
                continue

            parts.append(text)
            parts.append(RESOURCE_SEPARATOR)
            if verbose:
                print(f"  {member_path} ({len(text)} chars)", file=sys.stderr)

    return "".join(parts)
