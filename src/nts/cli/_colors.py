"""Color output utilities for nts CLI."""

from __future__ import annotations

import os
import sys
import typing as t
from enum import Enum

from colorama import Fore, Style


class ColorMode(Enum):
    """Color output modes."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class Colors:
    """Semantic color constants and utilities."""

    SUCCESS = Fore.GREEN
    ERROR = Fore.RED + Style.BRIGHT
    INFO = Fore.CYAN + Style.BRIGHT
    RESET = Style.RESET_ALL

    def __init__(
        self,
        mode: ColorMode = ColorMode.AUTO,
        stream: t.TextIO | None = None,
    ) -> None:
        """Initialize color manager.

        Parameters
        ----------
        mode : ColorMode
            Color mode to use (auto, always, never)
        stream : TextIO, optional
            Stream checked for a TTY in auto mode, defaults to stdout
        """
        self.mode = mode
        self._stream = stream
        self._enabled = self._should_enable_color()

    @property
    def enabled(self) -> bool:
        """Whether escape codes are emitted."""
        return self._enabled

    def _should_enable_color(self) -> bool:
        # NO_COLOR wins over everything, including --color=always
        if os.environ.get("NO_COLOR"):
            return False

        if self.mode == ColorMode.NEVER:
            return False
        if self.mode == ColorMode.ALWAYS:
            return True

        stream = self._stream if self._stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled.

        >>> Colors(ColorMode.NEVER).colorize("plain", Colors.INFO)
        'plain'
        """
        if self._enabled:
            return f"{color}{text}{self.RESET}"
        return text

    def success(self, text: str) -> str:
        """Format text as success (green)."""
        return self.colorize(text, self.SUCCESS)

    def error(self, text: str) -> str:
        """Format text as error (red)."""
        return self.colorize(text, self.ERROR)

    def info(self, text: str) -> str:
        """Format text as info (cyan)."""
        return self.colorize(text, self.INFO)


def get_color_mode(color_arg: str | None = None) -> ColorMode:
    """Determine color mode from argument.

    >>> get_color_mode("ALWAYS")
    <ColorMode.ALWAYS: 'always'>
    >>> get_color_mode("rainbow")
    <ColorMode.AUTO: 'auto'>
    """
    if color_arg is None:
        return ColorMode.AUTO

    try:
        return ColorMode(color_arg.lower())
    except ValueError:
        return ColorMode.AUTO
