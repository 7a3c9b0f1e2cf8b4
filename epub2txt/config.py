"""Dict/JSON round-tripping shared by the configuration dataclasses."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T", bound="Config")


@dataclass
class Config:
    """
    Base class for configuration dataclasses.

    Subclasses declare their fields; this class reads and writes them as
    plain dictionaries or JSON files, e.g. the file given to ``--config``.
    """

    @classmethod
    def from_dict(cls: type[T], config_dict: dict[str, Any]) -> T:
        """
        Create a configuration instance from a dictionary.

        Raises:
            TypeError: If the dictionary has keys the dataclass does not declare.
        """
        return cls(**config_dict)

    @classmethod
    def from_json(cls: type[T], json_path: str | Path) -> T:
        """
        Load configuration from a JSON file.

        Args:
            json_path: Path to the JSON configuration file.

        Returns:
            Configuration instance.

        Raises:
            FileNotFoundError: If the JSON file doesn't exist.
            json.JSONDecodeError: If the JSON file is invalid.
        """
        path = Path(json_path)
        with path.open("r", encoding="utf-8") as f:
            config_dict = json.load(f)
        if not isinstance(config_dict, dict):
            raise TypeError(f"expected a JSON object in {path}, got {type(config_dict).__name__}")
        return cls.from_dict(config_dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary, nested configs included."""
        return asdict(self)

    def to_json(self, json_path: str | Path, indent: int = 2) -> None:
        """
        Save configuration to a JSON file.

        Args:
            json_path: Path where the JSON file should be saved.
            indent: Number of spaces for JSON indentation (default: 2).
        """
        path = Path(json_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=indent)
