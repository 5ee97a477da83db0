"""Utility functions for nts."""

from __future__ import annotations

import os
import pathlib
import sys


def get_home_dir() -> pathlib.Path:
    """Return the user's home directory.

    ``USERPROFILE`` is consulted on Windows, ``HOME`` everywhere else. Falls
    back to :meth:`pathlib.Path.home` when the variable is unset.

    Examples
    --------
    >>> get_home_dir() == pathlib.Path(os.environ["HOME"])
    True
    """
    env_var = "USERPROFILE" if sys.platform == "win32" else "HOME"
    home = os.environ.get(env_var)
    if home:
        return pathlib.Path(home)
    return pathlib.Path.home()


def contract_user_home(path: str | pathlib.Path) -> str:
    """Contract user home directory to ~ for display purposes.

    Examples
    --------
    >>> contract_user_home(get_home_dir() / "code" / "repo")
    '~/code/repo'
    >>> contract_user_home("/opt/project")
    '/opt/project'
    """
    path_str = str(path)
    if not path_str or path_str.startswith("~"):
        return path_str

    home_str = str(get_home_dir())
    if path_str == home_str:
        return "~"
    if path_str.startswith(home_str + os.sep):
        return "~" + path_str[len(home_str) :]
    return path_str
