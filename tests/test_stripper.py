"""Tests for the stripper base class contract."""

from dataclasses import dataclass

import pytest

from epub2txt.converter import convert_epub_to_text
from epub2txt.stripper import Stripper, StripperConfig


@dataclass
class UpperCaseStripperConfig(StripperConfig):
    """Configuration for a stripper that keeps markup but shouts."""

    prefix: str = ""


class UpperCaseStripper(Stripper):
    """Minimal stripper implementation."""

    def strip(self, markup: str) -> str:
        return f"{self.config.prefix}{markup.strip().upper()}"

    def __repr__(self) -> str:
        return f"UpperCaseStripper(prefix={self.config.prefix!r})"


class TestStripper:
    """Tests for Stripper base class."""

    def test_init_with_config(self):
        config = UpperCaseStripperConfig(prefix=">")
        stripper = UpperCaseStripper(config)

        assert stripper.config is config

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Stripper(StripperConfig())  # type: ignore[abstract]

    def test_config_to_dict(self):
        assert UpperCaseStripperConfig(prefix=">").to_dict() == {"prefix": ">"}

    def test_converter_accepts_any_stripper(self, make_epub):
        """The converter only relies on the Stripper interface."""
        path = make_epub([("a", "a.xhtml", "one"), ("b", "b.xhtml", "two")])
        stripper = UpperCaseStripper(UpperCaseStripperConfig(prefix="# "))

        assert convert_epub_to_text(path, stripper=stripper) == "# ONE\n\n# TWO\n\n"

    def test_repr(self):
        stripper = UpperCaseStripper(UpperCaseStripperConfig(prefix="x"))
        assert repr(stripper) == "UpperCaseStripper(prefix='x')"
