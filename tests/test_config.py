"""Tests for conversion configuration."""

import json
from pathlib import Path

import pytest

from epub2txt.converter import ConverterConfig
from epub2txt.markup_stripper import MarkupStripper, MarkupStripperConfig


class TestConverterConfig:
    """Tests for ConverterConfig loading and saving."""

    def test_defaults(self):
        config = ConverterConfig()

        assert config.encoding == "utf-8"
        assert config.stripper == MarkupStripperConfig()

    def test_to_dict_nests_stripper(self):
        assert ConverterConfig().to_dict() == {
            "encoding": "utf-8",
            "stripper": {"extra_breaks": [], "fix_unicode": False},
        }

    def test_from_dict_builds_stripper_config(self):
        config = ConverterConfig.from_dict(
            {"encoding": "latin-1", "stripper": {"extra_breaks": [["</li>", "</li>\n"]]}}
        )

        assert config.encoding == "latin-1"
        assert isinstance(config.stripper, MarkupStripperConfig)
        assert config.stripper.extra_breaks == [["</li>", "</li>\n"]]

    def test_from_dict_partial(self):
        config = ConverterConfig.from_dict({"stripper": {"fix_unicode": True}})

        assert config.encoding == "utf-8"
        assert config.stripper.fix_unicode is True

    def test_json_roundtrip(self, tmp_path: Path):
        original = ConverterConfig(
            encoding="cp1252",
            stripper=MarkupStripperConfig(extra_breaks=[["</tr>", "</tr>\n"]], fix_unicode=True),
        )
        json_path = tmp_path / "nested" / "config.json"

        original.to_json(json_path)

        with json_path.open("r") as f:
            assert json.load(f)["stripper"]["fix_unicode"] is True
        assert ConverterConfig.from_json(json_path) == original

    def test_from_json_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            ConverterConfig.from_json("/nonexistent/path/config.json")

    def test_from_json_requires_object(self, tmp_path: Path):
        json_path = tmp_path / "config.json"
        json_path.write_text("[1, 2]")

        with pytest.raises(TypeError):
            ConverterConfig.from_json(json_path)

    def test_unknown_key(self):
        with pytest.raises(TypeError):
            ConverterConfig.from_dict({"nonsense": 1})

    def test_unknown_encoding(self):
        with pytest.raises(LookupError):
            ConverterConfig(encoding="no-such-codec")

    def test_non_string_encoding(self):
        with pytest.raises(ValueError):
            ConverterConfig.from_dict({"encoding": 8})

    def test_stripper_must_be_object(self):
        with pytest.raises(ValueError):
            ConverterConfig.from_dict({"stripper": ["</li>"]})

    def test_create_stripper(self):
        config = ConverterConfig.from_dict({"stripper": {"extra_breaks": [["</li>", "</li>\n"]]}})
        stripper = config.create_stripper()

        assert isinstance(stripper, MarkupStripper)
        assert stripper.config is config.stripper
        assert stripper.strip("<li>a</li><li>b</li>") == "a\nb"
