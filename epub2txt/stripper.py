"""
Base classes for markup stripping.

A stripper turns one document's markup (typically XHTML from an EPUB spine)
into plain text. For example: "<p>Hello <b>World</b></p>" → "Hello World"
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .config import Config


@dataclass
class StripperConfig(Config):
    """Base configuration for markup strippers; implementations add fields."""


class Stripper(ABC):
    """
    Abstract base class for markup strippers.

    A stripper removes tags, scripts and styles from a document and returns
    its readable text with line structure preserved. The converter calls
    ``strip`` once per spine resource.
    """

    def __init__(self, config: StripperConfig):
        self.config = config

    @abstractmethod
    def strip(self, markup: str) -> str:
        """
        Convert markup to plain text.

        Args:
            markup: Raw markup of a single document.

        Returns:
            Plain text, one line per non-empty text line of the document,
            or "" if the document holds no text.
        """
        pass

    @abstractmethod
    def __repr__(self) -> str:
        pass
