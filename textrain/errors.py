# textrain/errors.py
from __future__ import annotations


class TextRainError(Exception):
    """Base class for every error raised by textrain."""


class DocumentError(TextRainError):
    """A document could not be found or read."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Unable to load '{name}': {reason}")


class ConfigError(TextRainError):
    """Configuration file, environment or option value is invalid."""
