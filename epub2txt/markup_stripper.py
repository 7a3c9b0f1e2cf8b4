"""
Character-scanning markup stripper.

This module provides a stripper that needs no HTML parser: line breaks are
seeded by literal substitutions, then a single forward scan drops tags,
scripts and styles, and a handful of named entities are decoded.
"""

from dataclasses import dataclass, field
from enum import Enum

import ftfy

from .stripper import Stripper, StripperConfig

# Applied in order, before tags are removed.
DEFAULT_BREAK_RULES: tuple[tuple[str, str], ...] = (
    ("</p>", "</p>\n"),
    ("<br>", "\n"),
    ("<br/>", "\n"),
    ("<br />", "\n"),
    ("</div>", "</div>\n"),
    ("</h1>", "</h1>\n\n"),
    ("</h2>", "</h2>\n\n"),
    ("</h3>", "</h3>\n\n"),
    ("</h4>", "</h4>\n\n"),
)

# Order matters: "&amp;lt;" decodes to "<".
ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

SCRIPT_OPEN = "<script"
SCRIPT_CLOSE = "</script>"
STYLE_OPEN = "<style"
STYLE_CLOSE = "</style>"


class ScanState(Enum):
    """Where the scanner currently is in the document."""

    TEXT = "text"
    TAG = "tag"
    SCRIPT = "script"
    STYLE = "style"


def _marker_at(markup: str, pos: int, marker: str) -> bool:
    return markup[pos : pos + len(marker)].lower() == marker


def insert_structural_breaks(
    markup: str, rules: tuple[tuple[str, str], ...] = DEFAULT_BREAK_RULES
) -> str:
    """Apply each (pattern, replacement) rule to *markup*, in order."""
    for pattern, replacement in rules:
        markup = markup.replace(pattern, replacement)
    return markup


def strip_tags(markup: str) -> str:
    """
    Remove tags and the bodies of script/style elements.

    Tag names are not validated; anything between "<" and the next ">" is
    dropped. Consuming a closing "</script>" or "</style>" leaves the scanner
    in TAG, so output resumes only after the next ">". A tag, script or style
    that never closes swallows the rest of the document.
    """
    out: list[str] = []
    state = ScanState.TEXT
    i = 0
    n = len(markup)

    while i < n:
        ch = markup[i]

        if state is ScanState.SCRIPT:
            if ch == "<" and _marker_at(markup, i, SCRIPT_CLOSE):
                state = ScanState.TAG
                i += len(SCRIPT_CLOSE)
                continue
        elif state is ScanState.STYLE:
            if ch == "<" and _marker_at(markup, i, STYLE_CLOSE):
                state = ScanState.TAG
                i += len(STYLE_CLOSE)
                continue
        elif ch == "<":
            if _marker_at(markup, i, SCRIPT_OPEN):
                state = ScanState.SCRIPT
            elif _marker_at(markup, i, SCRIPT_CLOSE):
                state = ScanState.TAG
                i += len(SCRIPT_CLOSE)
                continue
            elif _marker_at(markup, i, STYLE_OPEN):
                state = ScanState.STYLE
            elif _marker_at(markup, i, STYLE_CLOSE):
                state = ScanState.TAG
                i += len(STYLE_CLOSE)
                continue
            else:
                state = ScanState.TAG
        elif ch == ">":
            # A stray ">" in text is dropped as well.
            state = ScanState.TEXT
        elif state is ScanState.TEXT:
            out.append(ch)

        i += 1

    return "".join(out)


def decode_entities(text: str) -> str:
    """Decode the six named entities in ENTITIES; leave everything else alone."""
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def normalize_whitespace(text: str) -> str:
    """Trim every line and drop the ones left empty."""
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


@dataclass
class MarkupStripperConfig(StripperConfig):
    """
    Configuration for the character-scanning stripper.

    Attributes:
        extra_breaks: Additional [pattern, replacement] pairs applied after the
                      default break rules, e.g. [["</li>", "</li>\\n"]].
                      Default: [] (only the built-in rules).
        fix_unicode: Run ftfy over the stripped text to repair mojibake.
                     Default: False (output is left exactly as decoded).
    """

    extra_breaks: list[list[str]] = field(default_factory=list)
    fix_unicode: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.extra_breaks, list):
            raise ValueError(f"extra_breaks must be a list, got {self.extra_breaks!r}")
        for rule in self.extra_breaks:
            if (
                not isinstance(rule, (list, tuple))
                or len(rule) != 2
                or not all(isinstance(part, str) for part in rule)
            ):
                raise ValueError(
                    f"extra_breaks entries must be [pattern, replacement] string pairs, got {rule!r}"
                )
            if not rule[0]:
                raise ValueError("extra_breaks patterns must not be empty")

    @property
    def break_rules(self) -> tuple[tuple[str, str], ...]:
        """Default rules followed by the configured extras."""
        extras = tuple((pattern, replacement) for pattern, replacement in self.extra_breaks)
        return DEFAULT_BREAK_RULES + extras


class MarkupStripper(Stripper):
    """
    Strip a single XHTML/HTML document to plain text.

    Example:
        >>> MarkupStripper().strip("<h1>Title</h1><p>Body &amp; soul</p>")
        'Title\\nBody & soul'
    """

    config: MarkupStripperConfig

    def __init__(self, config: MarkupStripperConfig | None = None):
        super().__init__(config or MarkupStripperConfig())

    def strip(self, markup: str) -> str:
        markup = insert_structural_breaks(markup, self.config.break_rules)
        text = strip_tags(markup)
        text = decode_entities(text)
        text = normalize_whitespace(text)
        if self.config.fix_unicode and text:
            text = ftfy.fix_text(text)
        return text

    def __repr__(self) -> str:
        return (
            f"MarkupStripper(extra_breaks={len(self.config.extra_breaks)}, "
            f"fix_unicode={self.config.fix_unicode})"
        )


def extract_text_from_html(html_content: str) -> str:
    """Strip *html_content* with the default configuration."""
    return MarkupStripper().strip(html_content)
