"""Console status lines for nts commands.

Every bulk operation reports through a :class:`Reporter` handed to it by the
CLI, rather than through a shared global.
"""

from __future__ import annotations

import sys
import typing as t

from .cli._colors import Colors, ColorMode

if t.TYPE_CHECKING:
    from collections.abc import Callable


class Reporter:
    """Emit ``info``, ``error`` and ``success`` lines.

    Info and success lines go to stdout, errors to stderr. Each line is
    prefixed with its kind and the terminal color is reset after it.

    >>> import io
    >>> out = io.StringIO()
    >>> reporter = Reporter(Colors(ColorMode.NEVER), stdout=out, stderr=out)
    >>> reporter.info("+ project A")
    >>> reporter.error("project B failed")
    >>> print(out.getvalue(), end="")
    info: + project A
    error: project B failed
    """

    def __init__(
        self,
        colors: Colors | None = None,
        stdout: t.TextIO | None = None,
        stderr: t.TextIO | None = None,
    ) -> None:
        self.colors = colors if colors is not None else Colors()
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> t.TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> t.TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _emit(
        self,
        stream: t.TextIO,
        label: str,
        paint: Callable[[str], str],
        message: object,
    ) -> None:
        stream.write(paint(f"{label}: {message}") + "\n")
        stream.flush()

    def info(self, message: object) -> None:
        """Informational line (cyan)."""
        self._emit(self.stdout, "info", self.colors.info, message)

    def error(self, message: object) -> None:
        """Failure line (red), written to stderr."""
        self._emit(self.stderr, "error", self.colors.error, message)

    def success(self, message: object) -> None:
        """Completion line (green)."""
        self._emit(self.stdout, "success", self.colors.success, message)
