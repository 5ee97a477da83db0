"""Configuration functionality for nts.

A configuration maps project names to their repository record. It is looked
up in the current working directory first and the user's home directory
second::

    $ cat projects.json
    {
        "project A": {
            "url": "https://subversion.example.com/repo/trunk",
            "notes": "replace me!"
        }
    }
"""

from __future__ import annotations

import copy
import json
import logging
import pathlib
import typing as t

import yaml

from . import exc
from ._internal.config_reader import ConfigReader
from .util import contract_user_home, get_home_dir

if t.TYPE_CHECKING:
    from collections.abc import Iterator

    from .types import Project, ProjectConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "projects.json"

SAMPLE_CONFIG: ProjectConfig = {
    "project A": {
        "url": "https://subversion.example.com/repo/trunk",
        "notes": "replace me!",
    },
}


def candidate_config_paths(
    filename: str | pathlib.Path = DEFAULT_CONFIG_FILENAME,
    cwd: pathlib.Path | None = None,
    home: pathlib.Path | None = None,
) -> list[pathlib.Path]:
    """Return the ordered list of locations searched for ``filename``.

    Parameters
    ----------
    filename : str or pathlib.Path
        config file name, or an absolute path
    cwd : pathlib.Path, optional
        current working dir, defaults to :py:meth:`pathlib.Path.cwd`
    home : pathlib.Path, optional
        home directory, defaults to :func:`nts.util.get_home_dir`

    Examples
    --------
    >>> candidate_config_paths("nts.json", pathlib.Path("/work"), pathlib.Path("/u"))
    [PosixPath('/work/nts.json'), PosixPath('/u/nts.json')]
    >>> candidate_config_paths("/etc/nts.json", pathlib.Path("/work"))
    [PosixPath('/etc/nts.json')]
    """
    if cwd is None:
        cwd = pathlib.Path.cwd()
    if home is None:
        home = get_home_dir()

    paths: list[pathlib.Path] = []
    for directory in (cwd, home):
        path = directory / filename
        if path not in paths:
            paths.append(path)
    return paths


def find_config_file(
    filename: str | pathlib.Path = DEFAULT_CONFIG_FILENAME,
    cwd: pathlib.Path | None = None,
    home: pathlib.Path | None = None,
) -> pathlib.Path:
    """Return the first existing candidate for ``filename``.

    Raises
    ------
    exc.ConfigNotFound
        None of the candidate paths exist. Every attempted path is listed.
    """
    paths = candidate_config_paths(filename, cwd=cwd, home=home)
    for path in paths:
        if path.is_file():
            log.debug("Using config %s", contract_user_home(path))
            return path
        log.debug("No config at %s", contract_user_home(path))
    raise exc.ConfigNotFound(paths)


def read_config(
    filename: str | pathlib.Path = DEFAULT_CONFIG_FILENAME,
    cwd: pathlib.Path | None = None,
    home: pathlib.Path | None = None,
) -> ProjectConfig:
    """Locate and parse a project configuration.

    The content is returned as parsed. Apart from requiring a mapping at the
    top level, entries are not validated.

    Raises
    ------
    exc.ConfigNotFound
        No file at any candidate location.
    exc.ConfigParseError
        The file is not valid JSON (or YAML), or is not a mapping.
    """
    path = find_config_file(filename, cwd=cwd, home=home)
    try:
        content = ConfigReader.from_file(path).content
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise exc.ConfigParseError(
            f"Unable to parse configuration file: {e}",
            path=path,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise exc.ConfigParseError(
            f"Unable to read configuration file: {e}",
            path=path,
        ) from e

    if not isinstance(content, dict):
        raise exc.ConfigParseError(
            "Configuration must be an object mapping project names to projects",
            path=path,
        )
    return t.cast("ProjectConfig", content)


def write_config(path: str | pathlib.Path, config: ProjectConfig) -> pathlib.Path:
    """Serialize ``config`` to ``path``, overwriting any existing file.

    JSON is written with a four space indent, or YAML when ``path`` ends in
    ``.yaml`` / ``.yml``.

    Raises
    ------
    exc.ConfigWriteError
        The file could not be written.
    """
    path = pathlib.Path(path)
    reader = ConfigReader(dict(config))
    content = reader.dump(ConfigReader.format_for(path))
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise exc.ConfigWriteError(
            f"Failed to write file: {e.strerror or e}",
            path=path,
        ) from e
    log.debug("Wrote %d project(s) to %s", len(config), contract_user_home(path))
    return path


def sample_config() -> ProjectConfig:
    """Return a fresh copy of the example configuration.

    >>> list(sample_config())
    ['project A']
    >>> sample_config()["project A"]["notes"]
    'replace me!'
    """
    return copy.deepcopy(SAMPLE_CONFIG)


def iter_projects(config: ProjectConfig) -> Iterator[Project]:
    """Yield each project with its ``name`` attached, in configuration order.

    The yielded records are copies; ``config`` itself is left untouched.

    >>> config = {"b": {"url": "svn://b"}, "a": {"url": "svn://a"}}
    >>> [p["name"] for p in iter_projects(config)]
    ['b', 'a']
    >>> "name" in config["b"]
    False
    """
    for name, project in config.items():
        runtime = t.cast("Project", dict(project) if isinstance(project, dict) else {})
        runtime["name"] = name
        yield runtime
