"""Write a configuration file: a sample, or one built from working copies."""

from __future__ import annotations

import asyncio
import logging
import pathlib
import typing as t

from nts.config import sample_config, write_config
from nts.operations import discover_projects, find_working_copies

if t.TYPE_CHECKING:
    import argparse

    from nts.reporter import Reporter
    from nts.runner import SvnRunner
    from nts.types import ProjectConfig

log = logging.getLogger(__name__)

GENERATE_MODES = ("sample",)


def create_generate_subparser(parser: argparse.ArgumentParser) -> None:
    """Create ``nts generate`` argument subparser."""
    parser.add_argument(
        "mode",
        nargs="?",
        choices=GENERATE_MODES,
        help="'sample' writes an example config instead of scanning the cwd",
    )


def _save(
    config_file: str | pathlib.Path,
    config: ProjectConfig,
    reporter: Reporter,
    verbose: bool,
    cwd: pathlib.Path,
) -> pathlib.Path:
    path = write_config(cwd / config_file, config)
    if verbose:
        reporter.success(f"Wrote config to file: {config_file}")
    return path


def generate_sample(
    config_file: str | pathlib.Path,
    reporter: Reporter,
    verbose: bool = False,
    cwd: pathlib.Path | None = None,
) -> pathlib.Path:
    """Write the example configuration, replacing any existing file."""
    if cwd is None:
        cwd = pathlib.Path.cwd()
    return _save(config_file, sample_config(), reporter, verbose, cwd)


def generate_config(
    config_file: str | pathlib.Path,
    runner: SvnRunner,
    cwd: pathlib.Path | None = None,
) -> ProjectConfig | None:
    """Scan ``cwd`` for working copies and write a configuration for them.

    Nothing is written when no working copy is found.
    """
    if cwd is None:
        cwd = pathlib.Path.cwd()
    reporter = runner.reporter

    working_copies = find_working_copies(cwd)
    if not working_copies:
        reporter.error(f"No svn working copies found in {cwd}")
        return None

    config = asyncio.run(discover_projects(cwd, runner, working_copies))
    _save(config_file, config, reporter, runner.verbose, cwd)
    return config
