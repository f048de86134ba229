"""Errors raised by the env initializer.

Every error carries the process exit status the CLI reports it with.
"""
from __future__ import annotations

from pathlib import Path


class EnvInitError(Exception):
    """Base class for fatal initializer errors."""

    exit_code = 1


class UsageError(EnvInitError):
    """Malformed command line."""

    def __init__(self, message: str = "", *, exit_code: int = 1, show_usage: bool = False):
        super().__init__(message)
        self.exit_code = exit_code
        self.show_usage = show_usage


class MissingFileError(EnvInitError):
    """A required input file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Missing required file: {path}")
        self.path = path


class OverwriteError(EnvInitError):
    """The output file exists and overwriting was not requested."""

    def __init__(self, path: Path):
        super().__init__(f"Refusing to overwrite existing {path} (use --force)")
        self.path = path


class TemplateDecodeError(EnvInitError):
    """The template is not valid UTF-8."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Template {path} is not valid UTF-8: {reason}")
        self.path = path


class ConfigError(EnvInitError):
    """A ``PRODENV_*`` setting has an invalid value."""
