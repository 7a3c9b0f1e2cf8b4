"""Resolve an EPUB's reading order to member paths.

EPUB declares its reading order indirectly:

1. ``META-INF/container.xml`` points at the package document (OPF).
2. The OPF manifest maps item ids to hrefs.
3. The OPF spine lists item ids in reading order.

The resolver dereferences those three levels and knows nothing about the
content of the resources themselves.
"""

import posixpath
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .archive import EpubArchive
from .errors import (
    ArchiveMemberError,
    MalformedContainerError,
    MalformedPackageError,
    NoRootFileError,
)

CONTAINER_PATH = "META-INF/container.xml"


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[-1] if "}" in tag else tag


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem if _local_name(child.tag) == name]


def _attr(elem: ET.Element, name: str) -> str:
    for key, value in elem.attrib.items():
        if _local_name(key) == name:
            return value
    return ""


@dataclass(frozen=True)
class ContainerDescriptor:
    """Root-file entries declared by ``META-INF/container.xml``."""

    rootfiles: tuple[str, ...]

    @property
    def content_path(self) -> str:
        """Full path of the first root file, the only one that is used."""
        if not self.rootfiles:
            raise NoRootFileError("no rootfile found in container.xml")
        return self.rootfiles[0]

    @classmethod
    def from_xml(cls, data: bytes) -> "ContainerDescriptor":
        root = ET.fromstring(data)
        paths = [
            _attr(rootfile, "full-path")
            for section in _children(root, "rootfiles")
            for rootfile in _children(section, "rootfile")
        ]
        return cls(rootfiles=tuple(paths))


@dataclass(frozen=True)
class ManifestItem:
    href: str
    media_type: str


@dataclass(frozen=True)
class PackageDescriptor:
    """Manifest and spine of an OPF package document."""

    manifest: dict[str, ManifestItem]
    spine: tuple[str, ...]

    @classmethod
    def from_xml(cls, data: bytes) -> "PackageDescriptor":
        root = ET.fromstring(data)
        manifest: dict[str, ManifestItem] = {}
        for section in _children(root, "manifest"):
            for item in _children(section, "item"):
                manifest[_attr(item, "id")] = ManifestItem(
                    href=_attr(item, "href"),
                    media_type=_attr(item, "media-type"),
                )
        spine = tuple(
            _attr(itemref, "idref")
            for section in _children(root, "spine")
            for itemref in _children(section, "itemref")
        )
        return cls(manifest=manifest, spine=spine)

    def resolve(self, content_dir: str) -> list[str]:
        """Map the spine to member paths relative to *content_dir*.

        Spine ids missing from the manifest are skipped; duplicates are kept.
        """
        paths = []
        for idref in self.spine:
            item = self.manifest.get(idref)
            if item is None:
                continue
            paths.append(join_content_path(content_dir, item.href))
        return paths


@dataclass(frozen=True)
class ResolvedContent:
    """Outcome of resolution: where the OPF lives and what to read, in order."""

    content_path: str
    content_dir: str
    paths: list[str]


def join_content_path(content_dir: str, href: str) -> str:
    """Join *href* onto *content_dir*, always treating *href* as relative."""
    joined = posixpath.join(content_dir, href.lstrip("/"))
    return posixpath.normpath(joined)


def read_container(archive: EpubArchive) -> ContainerDescriptor:
    """Read and parse ``META-INF/container.xml``.

    Raises:
        MalformedContainerError: If the member is absent or not well-formed.
    """
    try:
        data = archive.read_member(CONTAINER_PATH)
        return ContainerDescriptor.from_xml(data)
    except (ArchiveMemberError, ET.ParseError) as e:
        raise MalformedContainerError(f"failed to parse container.xml: {e}") from e


def read_package(archive: EpubArchive, content_path: str) -> PackageDescriptor:
    """Read and parse the package document at *content_path*.

    Raises:
        MalformedPackageError: If the member is absent or not well-formed.
    """
    try:
        data = archive.read_member(content_path)
        return PackageDescriptor.from_xml(data)
    except (ArchiveMemberError, ET.ParseError) as e:
        raise MalformedPackageError(f"failed to parse {content_path}: {e}") from e


def resolve_content_paths(archive: EpubArchive) -> ResolvedContent:
    """Resolve the spine of *archive* to an ordered list of member paths."""
    container = read_container(archive)
    content_path = container.content_path
    content_dir = posixpath.dirname(content_path) or "."
    package = read_package(archive, content_path)
    return ResolvedContent(
        content_path=content_path,
        content_dir=content_dir,
        paths=package.resolve(content_dir),
    )
