"""Bulk operations over every configured project.

Each coroutine fans out one ``svn`` process per project through
:func:`nts.runner.run_all` and reports one line per project as it finishes.
A failing project never stops its siblings.
"""

from __future__ import annotations

import logging
import pathlib
import re
import typing as t

from .config import iter_projects
from .runner import run_all

if t.TYPE_CHECKING:
    from .runner import ProjectResult, SvnRunner
    from .types import ProjectConfig

log = logging.getLogger(__name__)

SVN_METADATA_DIR = ".svn"
INFO_URL_RE = re.compile(r"^URL:\s*(?P<url>\S+)\s*$", re.MULTILINE)


async def info_projects(
    config: ProjectConfig,
    runner: SvnRunner,
    cwd: pathlib.Path,
) -> list[ProjectResult]:
    """Print ``svn info`` of each project's working copy under ``cwd``."""
    reporter = runner.reporter

    def report(result: ProjectResult) -> None:
        if result.ok:
            reporter.info(f"{result.name}: {result.output}\n")
        else:
            reporter.error(f"{result.name} failed")

    return await run_all(
        {
            p["name"]: runner.info(p["name"], cwd / p["name"])
            for p in iter_projects(config)
        },
        on_result=report,
    )


async def update_projects(
    config: ProjectConfig,
    runner: SvnRunner,
    cwd: pathlib.Path,
) -> list[ProjectResult]:
    """``svn update`` each project's working copy under ``cwd``."""
    reporter = runner.reporter

    def report(result: ProjectResult) -> None:
        if result.ok:
            reporter.success(f"{result.name}: updated successfully.")
        else:
            reporter.error(f"{result.name}: failed to update!")

    return await run_all(
        {
            p["name"]: runner.update(p["name"], cwd / p["name"])
            for p in iter_projects(config)
        },
        on_result=report,
    )


async def checkout_projects(
    config: ProjectConfig,
    runner: SvnRunner,
    cwd: pathlib.Path,
) -> list[ProjectResult]:
    """``svn checkout`` each project into a directory named after it."""
    reporter = runner.reporter

    def report(result: ProjectResult) -> None:
        if result.ok:
            reporter.success(f"{result.name}: checked out successfully.")
        else:
            reporter.error(f"{result.name}: failed to check out!")

    return await run_all(
        {p["name"]: runner.checkout(p, cwd) for p in iter_projects(config)},
        on_result=report,
    )


def find_working_copies(cwd: pathlib.Path) -> list[pathlib.Path]:
    """Return immediate subdirectories of ``cwd`` holding a ``.svn`` entry.

    Hidden directories are skipped.
    """
    found = [
        child
        for child in sorted(cwd.iterdir())
        if child.is_dir()
        and not child.name.startswith(".")
        and (child / SVN_METADATA_DIR).exists()
    ]
    log.debug("Found %d working copies in %s", len(found), cwd)
    return found


def parse_info_url(output: str) -> str | None:
    """Return the repository URL from ``svn info`` output.

    >>> parse_info_url("Path: .\\nURL: https://svn.example.com/trunk\\nRevision: 7")
    'https://svn.example.com/trunk'
    >>> parse_info_url("Relative URL: ^/trunk") is None
    True
    """
    match = INFO_URL_RE.search(output)
    if match is None:
        return None
    return match.group("url")


async def discover_projects(
    cwd: pathlib.Path,
    runner: SvnRunner,
    working_copies: list[pathlib.Path] | None = None,
) -> ProjectConfig:
    """Build a config from the working copies directly below ``cwd``.

    Every working copy is queried with ``svn info`` concurrently; the result
    is only assembled once all of them have finished. Working copies whose
    info fails or carries no ``URL:`` line are reported and left out.
    """
    reporter = runner.reporter
    if working_copies is None:
        working_copies = find_working_copies(cwd)
    discovered: dict[str, str] = {}

    def collect(result: ProjectResult) -> None:
        if runner.verbose and result.output:
            reporter.info(f"{cwd / result.name} ::: {result.output}")
        if not result.ok:
            reporter.error(f"{result.name}: failed to read working copy info")
            return
        url = parse_info_url(result.output)
        if url is None:
            reporter.error(f"{result.name}: no repository url in svn info output")
            return
        discovered[result.name] = url

    await run_all(
        {path.name: runner.info(path.name, path) for path in working_copies},
        on_result=collect,
    )
    return {name: {"url": discovered[name]} for name in sorted(discovered)}
