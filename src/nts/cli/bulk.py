"""``info``, ``update`` and ``init``: one svn process per configured project."""

from __future__ import annotations

import asyncio
import logging
import pathlib
import typing as t

from nts.config import read_config
from nts.operations import checkout_projects, info_projects, update_projects

if t.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from nts.runner import ProjectResult, SvnRunner
    from nts.types import ProjectConfig

    BulkOperation: t.TypeAlias = Callable[
        [ProjectConfig, SvnRunner, pathlib.Path],
        Awaitable[list[ProjectResult]],
    ]

log = logging.getLogger(__name__)


def _run_bulk(
    operation: BulkOperation,
    config_file: str | pathlib.Path,
    runner: SvnRunner,
    cwd: pathlib.Path | None,
) -> list[ProjectResult]:
    if cwd is None:
        cwd = pathlib.Path.cwd()
    config = read_config(config_file, cwd=cwd)
    if not config:
        runner.reporter.info("No projects configured.")
        return []
    results = asyncio.run(operation(config, runner, cwd))
    failed = sum(1 for result in results if not result.ok)
    log.debug("%d of %d project(s) failed", failed, len(results))
    return results


def info_command(
    config_file: str | pathlib.Path,
    runner: SvnRunner,
    cwd: pathlib.Path | None = None,
) -> list[ProjectResult]:
    """Show ``svn info`` for every configured project."""
    return _run_bulk(info_projects, config_file, runner, cwd)


def update_command(
    config_file: str | pathlib.Path,
    runner: SvnRunner,
    cwd: pathlib.Path | None = None,
) -> list[ProjectResult]:
    """Run ``svn update`` in every configured project."""
    return _run_bulk(update_projects, config_file, runner, cwd)


def init_command(
    config_file: str | pathlib.Path,
    runner: SvnRunner,
    cwd: pathlib.Path | None = None,
) -> list[ProjectResult]:
    """Check out every configured project into ``cwd``."""
    return _run_bulk(checkout_projects, config_file, runner, cwd)
