"""Exceptions raised by ModelCheck."""

from __future__ import annotations

from pathlib import Path


class ModelCheckError(Exception):
    """Base class for fatal ModelCheck errors."""


class DocumentLoadError(ModelCheckError):
    """A manifest, model or diagram file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class ConfigError(ModelCheckError):
    """The configuration file is unreadable or holds invalid values."""
