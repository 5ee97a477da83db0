"""List configured projects."""

from __future__ import annotations

import json
import logging
import typing as t

from nts.config import read_config

if t.TYPE_CHECKING:
    import pathlib

    from nts.reporter import Reporter
    from nts.types import ProjectConfig

log = logging.getLogger(__name__)


def print_config(config: ProjectConfig, reporter: Reporter, verbose: bool) -> None:
    """Print ``+ <name>`` per project, or the whole config when ``verbose``."""
    if verbose:
        reporter.info(json.dumps(config, indent=4))
        return
    for name in config:
        reporter.info(f"+ {name}")


def list_projects(
    config_file: str | pathlib.Path,
    reporter: Reporter,
    verbose: bool = False,
    cwd: pathlib.Path | None = None,
) -> ProjectConfig:
    """Load the configuration and print its projects.

    Returns the loaded configuration.
    """
    config = read_config(config_file, cwd=cwd)
    print_config(config, reporter, verbose)
    return config
