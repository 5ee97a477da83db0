"""Exceptions for nts."""

from __future__ import annotations

import typing as t
from pathlib import Path

if t.TYPE_CHECKING:
    from collections.abc import Sequence


class NtsException(Exception):
    """Standard exception raised by nts.

    Parameters
    ----------
    message : str
        The error message describing what went wrong.
    path : Optional[Path | str]
        The file path related to this exception, if any.
    suggestion : Optional[str]
        A suggestion on how to fix the error, if applicable.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception with metadata."""
        self.message = message
        self.path = Path(path) if isinstance(path, str) else path
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted string representation of exception."""
        result = self.message
        if self.path:
            result += f" (path: {self.path})"
        if self.suggestion:
            result += f"\nSuggestion: {self.suggestion}"
        return result


# Configuration related exceptions
class ConfigException(NtsException):
    """Base exception for configuration related errors."""


class ConfigNotFound(ConfigException):
    """No configuration file exists at any of the candidate locations."""

    def __init__(
        self,
        paths: Sequence[Path | str],
        message: str | None = None,
        **kwargs: t.Any,
    ) -> None:
        """Initialize with the attempted paths listed in the message."""
        self.paths = [Path(p) for p in paths]
        if message is None:
            message = "Unable to find configuration file in " + ", ".join(
                str(p) for p in self.paths
            )
        kwargs.setdefault(
            "suggestion",
            "Run `nts generate sample` to create a starter projects.json.",
        )
        super().__init__(message=message, **kwargs)


class ConfigParseError(ConfigException):
    """Error parsing a configuration file."""


class ConfigWriteError(ConfigException):
    """Error writing a configuration file."""


# VCS related exceptions
class VCSException(NtsException):
    """Base exception for VCS related errors."""


class VCSNotFound(VCSException):
    """VCS binary not found or could not be started."""


class WorkingCopyNotFound(VCSException):
    """Project directory to run the VCS client in does not exist."""
