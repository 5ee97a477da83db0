"""Spawn the Subversion client for each project and collect the outcome.

All child processes of a bulk operation are started back to back on a single
asyncio event loop, without a concurrency cap. Results are delivered in the
order the children exit, not in configuration order.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
import os
import pathlib
import typing as t

from . import exc

if t.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from .reporter import Reporter
    from .types import Project

log = logging.getLogger(__name__)

DEFAULT_SVN_BIN = "svn"
SVN_BIN_ENV = "NTS_SVN"

# asyncio's default 64 KiB line limit is too small for ``svn update`` on
# repositories with very long paths.
STREAM_LIMIT = 2**20


def get_svn_bin(override: str | None = None) -> str:
    """Return the svn executable: ``override``, else ``$NTS_SVN``, else ``svn``.

    >>> get_svn_bin("/opt/svn/bin/svn")
    '/opt/svn/bin/svn'
    """
    if override:
        return override
    return os.environ.get(SVN_BIN_ENV) or DEFAULT_SVN_BIN


@dataclasses.dataclass
class ProjectResult:
    """Outcome of one svn invocation for one project."""

    name: str
    returncode: int | None = None
    output: str = ""
    errors: list[str] = dataclasses.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """A run succeeds on a zero exit with nothing written to stderr.

        >>> ProjectResult("a", returncode=0).ok
        True
        >>> ProjectResult("a", returncode=0, errors=["svn: E155007"]).ok
        False
        >>> ProjectResult("a", returncode=1).ok
        False
        """
        return self.returncode == 0 and not self.errors


async def _pump(
    stream: asyncio.StreamReader | None,
    on_line: Callable[[str], None],
) -> None:
    if stream is None:
        return
    overlong = False
    while True:
        try:
            raw = await stream.readuntil(b"\n")
        except asyncio.IncompleteReadError as e:
            raw = e.partial
        except asyncio.LimitOverrunError as e:
            # Drop the buffered part of a line that does not fit STREAM_LIMIT;
            # its tail is whatever the next successful read returns.
            await stream.read(e.consumed)
            overlong = True
            continue
        if overlong:
            overlong = False
            on_line(f"[line longer than {STREAM_LIMIT} bytes omitted]")
        elif raw:
            on_line(raw.decode("utf-8", errors="replace").rstrip("\r\n"))
        if not raw.endswith(b"\n"):
            break


class SvnRunner:
    """Run ``svn`` subcommands for projects, echoing output to a reporter.

    Parameters
    ----------
    reporter : Reporter
        destination of streamed stdout lines and of every stderr line
    bin_name : str
        svn executable
    verbose : bool
        stream stdout of ``checkout`` and ``update`` as it arrives
    """

    def __init__(
        self,
        reporter: Reporter,
        bin_name: str = DEFAULT_SVN_BIN,
        verbose: bool = False,
    ) -> None:
        self.reporter = reporter
        self.bin_name = bin_name
        self.verbose = verbose

    async def _spawn(
        self,
        args: list[str],
        cwd: pathlib.Path | None,
    ) -> asyncio.subprocess.Process:
        command = " ".join(map(str, args))
        log.debug("[%s] $ %s %s", cwd or ".", self.bin_name, command)
        try:
            return await asyncio.create_subprocess_exec(
                self.bin_name,
                *args,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=STREAM_LIMIT,
            )
        except OSError as e:
            if cwd is not None and not cwd.is_dir():
                raise exc.WorkingCopyNotFound(
                    "Working copy not found",
                    path=cwd,
                    suggestion="Run `nts init` to check it out.",
                ) from e
            raise exc.VCSNotFound(
                f"Unable to run {self.bin_name}: {e.strerror or e}",
                suggestion=f"Install Subversion or point ${SVN_BIN_ENV} at it.",
            ) from e
        except (ValueError, TypeError) as e:
            # NUL bytes or non-string values in a url or project name
            raise exc.VCSException(f"Invalid svn arguments: {e}") from e

    async def run(
        self,
        name: str,
        args: list[str],
        cwd: pathlib.Path | None = None,
        stream: bool = False,
    ) -> ProjectResult:
        """Run ``svn <args>`` for project ``name`` and wait for it to exit.

        Every stderr line is reported immediately as an error and marks the
        result failed. Stdout is collected into :attr:`ProjectResult.output`
        and, with ``stream``, also reported line by line.
        """
        result = ProjectResult(name=name)
        try:
            proc = await self._spawn(args, cwd)
        except exc.VCSException as e:
            result.errors.append(str(e))
            self.reporter.error(f"{name}: {e}")
            return result

        lines: list[str] = []

        def on_stdout(line: str) -> None:
            lines.append(line)
            if stream:
                self.reporter.info(f"{name}: {line}")

        def on_stderr(line: str) -> None:
            result.errors.append(line)
            self.reporter.error(f"{name}: {line}")

        try:
            await asyncio.gather(
                _pump(proc.stdout, on_stdout),
                _pump(proc.stderr, on_stderr),
            )
        except BaseException:
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
            raise
        result.returncode = await proc.wait()
        result.output = "\n".join(lines)
        log.debug("%s: %s exited with %s", name, args[0], result.returncode)
        return result

    async def checkout(self, project: Project, cwd: pathlib.Path) -> ProjectResult:
        """``svn checkout <url> <name>`` from within ``cwd``."""
        name = project["name"]
        url = project.get("url")
        if not url:
            message = "no url configured"
            self.reporter.error(f"{name}: {message}")
            return ProjectResult(name=name, errors=[message])
        return await self.run(
            name,
            ["checkout", url, name],
            cwd=cwd,
            stream=self.verbose,
        )

    async def info(self, name: str, path: pathlib.Path) -> ProjectResult:
        """``svn info`` inside the working copy at ``path``."""
        return await self.run(name, ["info"], cwd=path)

    async def update(self, name: str, path: pathlib.Path) -> ProjectResult:
        """``svn update`` inside the working copy at ``path``."""
        return await self.run(name, ["update"], cwd=path, stream=self.verbose)


async def _settle(name: str, job: Awaitable[ProjectResult]) -> ProjectResult:
    try:
        return await job
    except Exception as e:
        message = str(e) or type(e).__name__
        log.error("%s: %s", name, message)
        log.debug("%s raised", name, exc_info=True)
        return ProjectResult(name=name, errors=[message])


async def run_all(
    jobs: Mapping[str, Awaitable[ProjectResult]],
    on_result: Callable[[ProjectResult], None] | None = None,
) -> list[ProjectResult]:
    """Start every job at once and wait until all of them have resolved.

    ``jobs`` maps project names to their pending run. A job that raises
    settles as a failed :class:`ProjectResult` for its name; siblings keep
    running. ``on_result`` is called for each result as soon as its job
    finishes. Results are returned in completion order.
    """
    tasks = [asyncio.ensure_future(_settle(name, job)) for name, job in jobs.items()]
    results: list[ProjectResult] = []
    for next_done in asyncio.as_completed(tasks):
        result = await next_done
        if on_result is not None:
            on_result(result)
        results.append(result)
    return results
