"""Custom exceptions for ddev-explain."""

from pathlib import Path


class DdevExplainError(Exception):
    """Base exception for ddev-explain."""


class ProjectNotFoundError(DdevExplainError):
    """No DDEV project found in a directory or any of its parents."""

    def __init__(self, start_path: Path):
        self.start_path = start_path
        super().__init__(
            f"No DDEV project found in {start_path} or parent directories"
        )


class ConfigError(DdevExplainError):
    """Project config.yaml is missing or malformed."""


class ComposerError(DdevExplainError):
    """composer.json exists but cannot be read or parsed."""


class ProjectListError(DdevExplainError):
    """Global DDEV project list is missing or malformed."""
