"""Helpers for nts tests."""

from __future__ import annotations

import json
import pathlib
import typing as t

if t.TYPE_CHECKING:
    from nts.types import ProjectConfig


class SvnCall(t.NamedTuple):
    """One recorded invocation of the fake svn."""

    cwd: pathlib.Path
    args: list[str]


def make_working_copy(
    parent: pathlib.Path,
    name: str,
    url: str | None = None,
    broken: bool = False,
    warn: bool = False,
    longline: bool = False,
) -> pathlib.Path:
    """Create ``parent/name/.svn`` with fake svn marker files."""
    metadata = parent / name / ".svn"
    metadata.mkdir(parents=True, exist_ok=True)
    if url is not None:
        (metadata / "url").write_text(url + "\n", encoding="utf-8")
    if broken:
        (metadata / "broken").touch()
    if warn:
        (metadata / "warn").touch()
    if longline:
        (metadata / "longline").touch()
    return parent / name


def write_json_config(path: pathlib.Path, config: ProjectConfig) -> pathlib.Path:
    """Write ``config`` as JSON to ``path``."""
    path.write_text(json.dumps(config, indent=4), encoding="utf-8")
    return path


def read_svn_log(log_file: pathlib.Path) -> list[SvnCall]:
    """Parse the ``<cwd>|<args>`` lines written by the fake svn."""
    if not log_file.exists():
        return []
    calls = []
    for line in log_file.read_text(encoding="utf-8").splitlines():
        cwd, _, args = line.partition("|")
        calls.append(SvnCall(pathlib.Path(cwd), args.split()))
    return calls
