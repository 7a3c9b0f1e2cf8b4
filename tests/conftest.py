"""Shared fixtures: small EPUB archives built in memory."""

import zipfile
from pathlib import Path
from typing import Callable

import pytest

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{content_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def package_xml(items: list[tuple[str, str]], spine: list[str]) -> str:
    """Build an OPF document with the given (id, href) items and spine idrefs."""
    manifest = "\n".join(
        f'    <item id="{item_id}" href="{href}" media-type="application/xhtml+xml"/>'
        for item_id, href in items
    )
    itemrefs = "\n".join(f'    <itemref idref="{idref}"/>' for idref in spine)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="uid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>Test Book</dc:title>
  </metadata>
  <manifest>
{manifest}
  </manifest>
  <spine toc="ncx">
{itemrefs}
  </spine>
</package>
"""


def write_zip(path: Path, members: dict[str, str | bytes]) -> Path:
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in members.items():
            zf.writestr(name, data)
    return path


@pytest.fixture
def make_epub(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes an EPUB with one OPF and the given documents.

    ``documents`` is a list of (id, href, markup) tuples; their order is the
    manifest order. ``spine`` defaults to every id in that order.
    """

    def _make(
        documents: list[tuple[str, str, str]],
        spine: list[str] | None = None,
        content_path: str = "OEBPS/content.opf",
        name: str = "book.epub",
        extra_members: dict[str, str | bytes] | None = None,
    ) -> Path:
        content_dir = content_path.rpartition("/")[0]
        members: dict[str, str | bytes] = {
            "mimetype": "application/epub+zip",
            "META-INF/container.xml": CONTAINER_XML.format(content_path=content_path),
            content_path: package_xml(
                [(item_id, href) for item_id, href, _ in documents],
                spine if spine is not None else [item_id for item_id, _, _ in documents],
            ),
        }
        for _, href, markup in documents:
            member = f"{content_dir}/{href}" if content_dir else href
            members[member] = markup
        members.update(extra_members or {})
        return write_zip(tmp_path / name, members)

    return _make
