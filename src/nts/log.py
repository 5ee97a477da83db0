"""Log utilities for formatting CLI output in nts.

Colorized formatters for generic logging inside the application are provided
here. User-facing status lines go through :class:`nts.reporter.Reporter`;
logging carries diagnostics (spawned commands, exit codes, resolved paths).
"""

from __future__ import annotations

import contextlib
import importlib
import logging
import pkgutil
import sys
import time
import typing as t
from functools import lru_cache

from colorama import Fore, Style

LEVEL_COLORS = {
    "DEBUG": Fore.BLUE,  # Blue
    "INFO": Fore.GREEN,  # Green
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED,
}


@lru_cache(maxsize=1)
def get_cli_logger_names(include_self: bool = True) -> list[str]:
    """Return logger names under ``nts.cli``."""
    names: set[str] = set()
    exclude = {"nts.cli._colors"}
    cli_module = importlib.import_module("nts.cli")
    if include_self:
        names.add(cli_module.__name__)

    if hasattr(cli_module, "__path__"):
        for module_info in pkgutil.walk_packages(
            cli_module.__path__,
            prefix="nts.cli.",
        ):
            if module_info.name in exclude:
                continue
            names.add(module_info.name)

    return sorted(names)


def setup_logger(
    log: logging.Logger | None = None,
    level: t.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
) -> None:
    """Configure the nts logging hierarchy once and reuse it everywhere."""
    resolved_level = getattr(logging, level.upper(), logging.INFO)

    nts_logger = logging.getLogger("nts")

    # A NullHandler is installed at import time for library consumers. The CLI
    # needs a real stream handler, so a NullHandler-only logger counts as
    # having no handlers.
    existing_handlers = [
        handler
        for handler in nts_logger.handlers
        if not isinstance(handler, logging.NullHandler)
    ]
    formatter: logging.Formatter = (
        DebugLogFormatter() if resolved_level <= logging.DEBUG else SimpleLogFormatter()
    )
    if not existing_handlers:
        for handler in list(nts_logger.handlers):
            nts_logger.removeHandler(handler)
        stream_handler = logging.StreamHandler()
        stream_handler.stream = sys.stdout
        stream_handler.setFormatter(formatter)
        nts_logger.addHandler(stream_handler)
    else:
        for handler in existing_handlers:
            if isinstance(handler, logging.StreamHandler):
                with contextlib.suppress(ValueError):
                    handler.flush()
                handler.stream = sys.stdout
            handler.setFormatter(formatter)

    nts_logger.setLevel(resolved_level)
    nts_logger.propagate = True

    # CLI modules bubble up to the ``nts`` logger rather than owning handlers.
    for logger_name in get_cli_logger_names(include_self=True):
        cli_logger = logging.getLogger(logger_name)
        for handler in list(cli_logger.handlers):
            if isinstance(handler, logging.StreamHandler) and isinstance(
                handler.formatter,
                (SimpleLogFormatter, DebugLogFormatter),
            ):
                cli_logger.removeHandler(handler)
        cli_logger.setLevel(resolved_level)
        cli_logger.propagate = True

    target_logger = log or nts_logger
    target_logger.setLevel(resolved_level)
    target_logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.setLevel(resolved_level)


def _dim(field: str, color: str = Fore.WHITE) -> str:
    return f"{color}{Style.DIM}{Style.BRIGHT}{field}{Fore.RESET}{Style.RESET_ALL}"


class LogFormatter(logging.Formatter):
    """Log formatting for nts."""

    levelname_field = "(%(levelname)s)"

    def template(self, record: logging.LogRecord) -> str:
        """Return the prefix for the log message. Template for Formatter.

        Parameters
        ----------
        record : :py:class:`logging.LogRecord`
            Passed in from inside the :py:meth:`logging.Formatter.format` record.
        """
        levelname = (
            f"{LEVEL_COLORS.get(record.levelname, '')}{Style.BRIGHT}"
            f"{self.levelname_field}{Style.RESET_ALL} "
        )
        asctime = f"[{_dim('%(asctime)s', Fore.BLACK)}]"
        name = f" {_dim('%(name)s')} "
        return Style.RESET_ALL + levelname + asctime + name + Style.RESET_ALL

    def __init__(self, color: bool = True, **kwargs: t.Any) -> None:
        logging.Formatter.__init__(self, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record."""
        try:
            record.message = record.getMessage()
        except Exception as e:
            record.message = f"Bad message ({e!r}): {record.__dict__!r}"

        record.asctime = time.strftime("%H:%M:%S", self.converter(record.created))
        prefix = self.template(record) % record.__dict__

        formatted = prefix + " " + record.message
        return formatted.replace("\n", "\n    ")


class DebugLogFormatter(LogFormatter):
    """Provides greater technical details than standard log Formatter."""

    levelname_field = "(%(levelname)1.1s)"

    def template(self, record: logging.LogRecord) -> str:
        """Append ``module.funcName():lineno`` to the standard prefix."""
        location = (
            f"{Fore.GREEN}{Style.BRIGHT}%(module)s.%(funcName)s()"
            f"{Fore.BLACK}{Style.DIM}{Style.BRIGHT}:{Style.RESET_ALL}"
            f"{Fore.CYAN}%(lineno)d"
        )
        return super().template(record) + location + Style.RESET_ALL


class SimpleLogFormatter(logging.Formatter):
    """Simple formatter that outputs only the message, like print()."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record to just return the message."""
        return record.getMessage()
